""" Slot values of a playing field and the preparation of the field.

A field is a tuple of slots. Each slot holds either a `Participant`
(wrapping the caller's value) or one of the two placeholders `REST`
and `SELF`. The caller's values are never compared to anything; only
the slot type decides how a slot is treated.
"""

from dataclasses import dataclass
import logging
from typing import Any, Optional, Tuple

from .base_utils import shuffled

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Participant:
    value: Any

    def __repr__(self):
        return "Participant({!r})".format(self.value)


@dataclass(frozen=True)
class Rest:
    """ Bye. Pads odd fields; every game against it is skipped. """

    def __repr__(self):
        return "REST"


@dataclass(frozen=True)
class Self:
    """ Stands in for the opponent in a game against oneself. """

    def __repr__(self):
        return "SELF"


REST = Rest()
SELF = Self()


def prepare_field(participants, options, rng) -> Tuple:
    """ Creates the playing field for the given participants.

    Without participants the field is empty. Otherwise the participants
    are shuffled if `options.shuffle` is set. A `SELF`
    slot is appended for `options.play_self` and finally a `REST` slot
    if the field would otherwise have an odd length.
    """
    values = list(participants)
    if not values:
        _logger.debug("No participants given. The field stays empty.")
        return ()
    if options.shuffle:
        values = shuffled(values, rng)

    field = [Participant(value) for value in values]
    if options.play_self:
        field.append(SELF)
    if len(field) % 2 != 0:
        field.append(REST)

    _logger.debug("Prepared field of %d slots for %d participants.", len(field), len(values))
    return tuple(field)


def reshuffled_field(field, rng) -> Tuple:
    """ Returns a shuffled copy of `field`, placeholders included. """
    return tuple(shuffled(field, rng))


def resolve_game(left, right) -> Optional[Tuple[Any, Any]]:
    """ Turns a pair of slots into a game of two participant values.

    A `SELF` slot takes the value of its opponent. Returns None when
    the game involves a `REST` slot and must be skipped.
    """
    if isinstance(left, Self):
        left = right
    if isinstance(right, Self):
        right = left

    if isinstance(left, Rest) or isinstance(right, Rest):
        return None
    return (left.value, right.value)

import logging

from .base_utils import default_rng
from .options import resolve_options
from .roundrobin import iter_rounds
from .slots import Participant, prepare_field, reshuffled_field

_logger = logging.getLogger(__name__)


class TournamentTemplate:
    """ Creates tournaments with a fixed set of options.

    Use `all_play_all` to construct one.
    """
    def __init__(self, options):
        self.options = options

    def create(self, participants, rng=None):
        """ Creates a tournament in which all `participants` play against each other.

        Parameters
        ----------
        participants : iterable
            the participants; any values are accepted
        rng : Random | int | None
            RNG or seed used for shuffling the participants and for `reshuffle`

        Returns
        -------
        Tournament
        """
        rng = default_rng(rng)
        field = prepare_field(participants, self.options, rng)
        return Tournament(field, self.options, rng=rng)

    def __repr__(self):
        return "TournamentTemplate({!r})".format(self.options)


class Tournament:
    """ A round-robin schedule over a fixed playing field.

    The field does not change once the tournament is created. Every call
    to `rounds`, `fixtures` or `games` computes a fresh, lazy sequence
    from it.
    """
    def __init__(self, field, options, rng=None):
        self._field = tuple(field)
        self.options = options
        self._rng = default_rng(rng)

    @property
    def field(self):
        return self._field

    @property
    def participants(self):
        """ The participant values in field order. """
        return [slot.value for slot in self._field if isinstance(slot, Participant)]

    def rounds(self):
        return iter_rounds(self._field, self.options)

    def fixtures(self):
        for round in self.rounds():
            yield from round

    def games(self):
        for fixture in self.fixtures():
            yield from fixture

    def reshuffle(self):
        """ Returns a new tournament over a shuffled copy of this tournament’s field. """
        field = reshuffled_field(self._field, self._rng)
        _logger.debug("Reshuffled field of %d slots.", len(field))
        return Tournament(field, self.options, rng=self._rng)

    def __repr__(self):
        return "Tournament({!r}, {!r})".format(list(self._field), self.options)


def all_play_all(options=None, **kwargs):
    """ Returns a template for round-robin tournaments.

    Parameters
    ----------
    options : Mapping | Options | None
        partial configuration with the keys `rematch`, `play_self` and `shuffle`;
        unknown keys are ignored
    kwargs
        options that override the ones in `options`

    Returns
    -------
    TournamentTemplate

    Example
    -------
        >>> tournament = all_play_all(shuffle=False).create(["A", "B", "C", "D"])
        >>> list(next(iter(tournament.fixtures())))
        [('A', 'D'), ('B', 'C')]
    """
    return TournamentTemplate(resolve_options(options, **kwargs))

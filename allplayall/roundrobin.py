""" Circle method for round-robin schedules.

For a field of even length L, the slot at index 0 is kept fixed and the
remaining L - 1 slots form a ring. Slots are paired top against bottom:

    +---+---+---+
    | 0 | 1 | 2 |
    +---+---+---+
    | 5 | 4 | 3 |
    +---+---+---+

    games: 0-5, 1-4, 2-3

For the next fixture the ring is rotated clockwise by one position
(the last slot moves to the front) while 0 stays where it is:

    +---+---+---+
    | 0 | 5 | 1 |
    +---+---+---+
    | 4 | 3 | 2 |
    +---+---+---+

    games: 0-4, 5-3, 1-2

After L - 1 fixtures every pair of slots has met exactly once.

Further reading
[1]: https://en.wikipedia.org/wiki/Round-robin_tournament#Circle_method
"""

from typing import List, Tuple

from .slots import resolve_game


def shift_ring(field, amount: int) -> Tuple:
    """ Returns a copy of `field` with all slots but the first rotated
    right by `amount` positions. """
    if len(field) < 2:
        return tuple(field)
    fixed, ring = field[0], tuple(field[1:])
    amount = amount % len(ring)
    if amount == 0:
        return (fixed,) + ring
    return (fixed,) + ring[-amount:] + ring[:-amount]


def pair_slots(arrangement) -> List[Tuple]:
    """ Pairs slot j with slot L - 1 - j for the first half of the arrangement. """
    num_slots = len(arrangement)
    return [(arrangement[idx], arrangement[num_slots - 1 - idx])
            for idx in range(num_slots // 2)]


class Fixture:
    """ The games of one arrangement of the field.

    Iterating yields the games as tuples of participant values. Games
    against a bye are left out.
    """
    def __init__(self, arrangement):
        self.arrangement = tuple(arrangement)

    def __iter__(self):
        for left, right in pair_slots(self.arrangement):
            game = resolve_game(left, right)
            if game is not None:
                yield game

    def __repr__(self):
        return "Fixture({})".format(list(self))


class Round:
    """ All fixtures of one pass over the field.

    With `reverse` set, every arrangement is read back to front, so that
    each game of the round has its two sides swapped.

    Fixtures are created on iteration; iterating again starts over.
    """
    def __init__(self, field, reverse=False):
        self.field = tuple(field)
        self.reverse = reverse

    def __len__(self):
        return max(len(self.field) - 1, 0)

    def __iter__(self):
        for shift in range(len(self)):
            arrangement = shift_ring(self.field, shift)
            if self.reverse:
                arrangement = arrangement[::-1]
            yield Fixture(arrangement)

    def __repr__(self):
        return "Round({})".format(list(self))


def iter_rounds(field, options):
    """ Yields the round over `field` and, for `options.rematch`, the
    reversed round. An empty field has no rounds. """
    if not field:
        return
    yield Round(field)
    if options.rematch:
        yield Round(field, reverse=True)

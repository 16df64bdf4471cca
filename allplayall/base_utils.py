from random import Random

def default_rng(seed=None):
    """Construct a new RNG from a given seed or return the same RNG.

    Parameters
    ----------
    seed : Random | int | None
        RNG to re-use or seed to initialise a new RNG or None to initialise a RNG without seed
    """
    if isinstance(seed, Random):
        return seed
    return Random(seed)

def shuffled(items, rng):
    """ Returns a shuffled copy of `items`. The input is left untouched.

    Every position from the first to the second-to-last is swapped with a
    position at or after it, chosen uniformly by `rng`.
    """
    items = list(items)
    for idx in range(len(items) - 1):
        other = rng.randint(idx, len(items) - 1)
        items[idx], items[other] = items[other], items[idx]
    return items

""" Resolution of tournament options.

Options are merged from (lowest to highest precedence) the defaults,
a mapping and keyword overrides. Unknown keys are ignored.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
import logging

import yaml

from .exceptions import InvalidOptionsFile

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    #: Play a second pass over the reversed field, swapping the roles of each pairing.
    rematch: bool = False
    #: Add a slot which lets every participant play against itself once per round.
    play_self: bool = False
    #: Randomise the order of the participants before scheduling.
    shuffle: bool = True


OPTION_NAMES = tuple(f.name for f in fields(Options))

#: Alternative spellings of option names.
OPTION_ALIASES = {
    'playSelf': 'play_self',
}

TRUE_STRINGS = {'true', 'yes', 'on', '1'}
FALSE_STRINGS = {'false', 'no', 'off', '0'}


def as_bool(value):
    """ Converts an option value to a bool.

    Strings are read as the usual spellings of true and false. Returns
    None for strings that are neither.
    """
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
        return None
    return bool(value)


def _given_options(options):
    # the options of `options` that have a value, with aliases resolved
    if isinstance(options, Options):
        options = {name: getattr(options, name) for name in OPTION_NAMES}
    elif options is None:
        options = {}
    elif not isinstance(options, Mapping):
        _logger.debug("Ignoring options of type %s.", type(options).__name__)
        options = {}

    given = {}
    for key, value in options.items():
        key = OPTION_ALIASES.get(key, key)
        if key not in OPTION_NAMES:
            _logger.debug("Ignoring unknown option %r.", key)
            continue
        if value is None:
            continue
        flag = as_bool(value)
        if flag is None:
            _logger.debug("Ignoring value %r for option %r.", value, key)
            continue
        given[key] = flag
    return given


def resolve_options(options=None, **kwargs):
    """ Merges the given options with the defaults and returns a new `Options`.

    Options set to None count as not given and do not override anything.

    Parameters
    ----------
    options : Options | Mapping | None
        partial configuration
    kwargs
        options that take precedence over the ones in `options`

    Returns
    -------
    Options
    """
    resolved = _given_options(options)
    resolved.update(_given_options(kwargs))
    return Options(**resolved)


def load_options(path):
    """ Reads options from a YAML file.

    An empty file gives the default options. Anything but a mapping at the
    top level raises `InvalidOptionsFile`.
    """
    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidOptionsFile("{path}: expected a mapping of options, got {kind}.".format(
            path=path, kind=type(data).__name__))

    _logger.debug("Loaded options from %s: %r", path, data)
    return resolve_options(data)

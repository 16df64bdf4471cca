from .options import Options, load_options, resolve_options
from .roundrobin import Fixture, Round
from .schedule import Tournament, TournamentTemplate, all_play_all
from .slots import REST, SELF, Participant, Rest, Self

__version__ = '1.0.0'

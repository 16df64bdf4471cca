#!/usr/bin/env python3

import argparse
import logging
import sys

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import all_play_all, load_options
from ..exceptions import InvalidOptionsFile
from .script_utils import start_logging

_logger = logging.getLogger(__name__)


def schedule_as_data(tournament):
    """ Returns the rounds of `tournament` as nested lists of games. """
    return {
        'rounds': [
            [[list(game) for game in fixture] for fixture in round]
            for round in tournament.rounds()
        ]
    }


def print_tables(tournament, console):
    for round_idx, round in enumerate(tournament.rounds(), start=1):
        table = Table(title=f"Round {round_idx}", title_justify="left")
        table.add_column("Fixture", justify="right", style="blue")
        table.add_column("Games")
        for fixture_idx, fixture in enumerate(round, start=1):
            games = ", ".join(escape(f"{a} – {b}") for a, b in fixture)
            table.add_row(str(fixture_idx), games or "[dim]–[/]")
        console.print(table)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Create a round-robin schedule in which all participants play each other',
                                     add_help=False,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser._positionals = parser.add_argument_group('Arguments')
    parser._optionals = parser.add_argument_group('Options')
    parser.add_argument('--help', '-h',
                        help='show this help message and exit',
                        action='store_true')

    parser.add_argument('participants', nargs='*', metavar='PARTICIPANT',
                        help='names of the participants')

    parser.add_argument('--rematch', dest='rematch', action='store_true', help='play a second, reversed round')
    parser.add_argument('--no-rematch', dest='rematch', action='store_false', help='play a single round')
    parser.set_defaults(rematch=None)

    parser.add_argument('--play-self', dest='play_self', action='store_true', help='every participant plays itself once per round')
    parser.add_argument('--no-play-self', dest='play_self', action='store_false', help='nobody plays against itself')
    parser.set_defaults(play_self=None)

    parser.add_argument('--shuffle', dest='shuffle', action='store_true', help='shuffle the participants before scheduling')
    parser.add_argument('--no-shuffle', dest='shuffle', action='store_false', help='keep the given order of participants')
    parser.set_defaults(shuffle=None)

    parser.add_argument('--seed', type=int, help='random seed')
    parser.add_argument('--config', help='options file',
                        metavar="OPTIONS_YAML")
    parser.add_argument('--format', choices=['table', 'yaml'], default='table',
                        help='output format (default: table)')
    parser.add_argument('--log', help='print debugging log information to LOGFILE (default \'stderr\')',
                        metavar='LOGFILE', const='-', nargs='?')

    args = parser.parse_args(argv)
    if args.help:
        parser.print_help()
        sys.exit(0)

    if args.log:
        start_logging(args.log)

    options = {}
    if args.config:
        try:
            options = load_options(args.config)
        except FileNotFoundError:
            print("‘{}’ not found.".format(args.config), file=sys.stderr)
            sys.exit(1)
        except (InvalidOptionsFile, yaml.YAMLError) as e:
            print("Could not read options: {}".format(e), file=sys.stderr)
            sys.exit(1)

    template = all_play_all(options,
                            rematch=args.rematch,
                            play_self=args.play_self,
                            shuffle=args.shuffle)
    _logger.debug("Using %r.", template.options)

    tournament = template.create(args.participants, rng=args.seed)

    if args.format == 'yaml':
        yaml.safe_dump(schedule_as_data(tournament), sys.stdout, default_flow_style=None)
    else:
        print_tables(tournament, Console())


if __name__ == '__main__':
    main()

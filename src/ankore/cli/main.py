"""
ankore CLI.
"""

import argparse
import logging

from ankore.cli.commands import card, lookup, match
from ankore.core.config import load_settings


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main():
    parser = argparse.ArgumentParser(prog="ankore", description="Expression lookup for flashcards")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    lookup.add_subparser(subparsers)
    match.add_subparser(subparsers)
    card.add_subparser(subparsers)

    args = parser.parse_args()

    settings = load_settings()
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if hasattr(args, "func"):
        args.func(args, settings)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

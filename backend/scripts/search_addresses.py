"""Look up a street in Saint Petersburg via Nominatim and print the matches.

Usage:
    street-geocoder -q "Невский проспект"
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from domain.models import Place
from services.address_search import search_addresses

USAGE = "Usage: street-geocoder -q query_string"
ERROR_MESSAGE = "Error happened."
QUERY_FLAG = "-q"


def build_parser() -> argparse.ArgumentParser:
    # -q is scanned by hand in find_query; -h is left to fall through as an unknown argument
    parser = argparse.ArgumentParser(description="Search a street in Saint Petersburg.", usage=USAGE, add_help=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def find_query(argv: List[str]) -> Optional[str]:
    """Return the argument after the last ``-q``, whatever it looks like.

    The final argument is never treated as a flag, so a trailing ``-q`` is ignored.
    """
    query = None
    for index in range(len(argv) - 1):
        if argv[index] == QUERY_FLAG:
            query = argv[index + 1]
    return query


def _strip_query_pairs(argv: List[str]) -> List[str]:
    # keeps a query value such as "-vx" away from the option parser
    rest: List[str] = []
    index = 0
    while index < len(argv):
        if argv[index] == QUERY_FLAG and index < len(argv) - 1:
            index += 2
            continue
        rest.append(argv[index])
        index += 1
    return rest


def format_places(places: List[Place]) -> str:
    return "places - [" + ", ".join(str(p) for p in places) + "]"


def print_places(places: List[Place]) -> None:
    print(format_places(places))


def print_error() -> None:
    print(ERROR_MESSAGE, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args_list = sys.argv[1:] if argv is None else list(argv)
    if not args_list:
        print(USAGE)
        return 0

    # unknown arguments are ignored
    args, _ = build_parser().parse_known_args(_strip_query_pairs(args_list))
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # the worker thread is not a daemon, so the process waits for it
    search_addresses(find_query(args_list), print_places, print_error)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

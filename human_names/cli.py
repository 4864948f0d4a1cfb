"""
Command-line front end.

    human-names parse "Doe, John A." "MR OSCAR DE LA HOYA JR"
    human-names eq "Jane Doe" "J. Doe"
    cat names.txt | human-names eq "Jane Doe" -

`parse` prints one JSON object per parsed input and skips unparseable ones;
it exits 0 if anything parsed. `eq` prints "y" or "n" per comparison and exits
0 if any comparison was consistent.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from human_names.names import HumanName, parse


def _stdin_lines() -> Iterable[str]:
    for line in sys.stdin:
        yield line.rstrip("\r\n")


def _is_consistent(a: Optional[HumanName], b: Optional[HumanName]) -> bool:
    return a is not None and b is not None and a.consistent_with(b)


def run_parse(args: argparse.Namespace) -> int:
    inputs = args.names if args.names else _stdin_lines()
    parsed_any = False

    for text in inputs:
        name = parse(text)
        if name is None:
            continue
        print(name.to_json())
        parsed_any = True

    return 0 if parsed_any else 1


def run_eq(args: argparse.Namespace) -> int:
    reference = parse(args.name)
    others = _stdin_lines() if args.other == "-" else [args.other]
    any_consistent = False

    for text in others:
        consistent = _is_consistent(reference, parse(text))
        print("y" if consistent else "n")
        any_consistent = any_consistent or consistent

    return 0 if any_consistent else 1


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="human-names", description="Parse and compare human names.")
    parser.add_argument("--verbose", action="store_true", help="Log why inputs fail to parse.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Print each parsed name as JSON.")
    parse_parser.add_argument("names", nargs="*", help="Names to parse; read from stdin when omitted.")
    parse_parser.set_defaults(handler=run_parse)

    eq_parser = subparsers.add_parser("eq", help="Check whether names could denote the same person.")
    eq_parser.add_argument("name", help="Reference name.")
    eq_parser.add_argument("other", help="Name to compare, or '-' to compare each line of stdin.")
    eq_parser.set_defaults(handler=run_eq)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line entry point.

Usage:
    hrml-query input.txt
    hrml-query < input.txt -o answers.txt
    hrml-query input.txt --not-found '-' --strict-closing -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack

from .document import NOT_FOUND
from .exceptions import HrmlError
from .session import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hrml-query',
        description='Parse an HRML block and answer its attribute queries'
    )
    parser.add_argument('input', nargs='?', default='-',
                        help="Input file ('-' or omitted for stdin)")
    parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    parser.add_argument('--not-found', default=NOT_FOUND,
                        help=f"Text printed for unresolved queries (default: {NOT_FOUND!r})")
    parser.add_argument('--strict-closing', action='store_true',
                        help='Reject closing tags that name a different tag')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log parsing details to stderr')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        with ExitStack() as stack:
            source = sys.stdin
            if args.input != '-':
                source = stack.enter_context(open(args.input, encoding='utf-8'))
            sink = sys.stdout
            if args.output:
                sink = stack.enter_context(open(args.output, 'w', encoding='utf-8'))
            run(source, sink, not_found=args.not_found, strict_closing=args.strict_closing)
    except (HrmlError, OSError, UnicodeDecodeError) as exc:
        print(f"hrml-query: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line front end: load HDF files, query or dump them.

Usage:
    hdfstore FILE [FILE ...] [--flat] [--get PATH] [--debug]

Examples:
    # Print the merged tree in nested form
    hdfstore defaults.hdf site.hdf

    # Print one value
    hdfstore site.hdf --get site.title
"""

from __future__ import annotations

import argparse
import logging
import sys

from .store import HdfStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hdfstore',
        description='Load HDF files into one tree and print it or a value'
    )
    parser.add_argument('files', nargs='+', help='HDF files to load, in order')
    parser.add_argument('--flat', action='store_true',
                        help='Dump with full dotted keys instead of nested blocks')
    parser.add_argument('--get', metavar='PATH', help='Print the value at PATH')
    parser.add_argument('--debug', action='store_true',
                        help='Trace parsing and resolution on stderr')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    store = HdfStore()
    for filepath in args.files:
        logger.debug("loading %s", filepath)
        store.read_file(filepath)

    if args.get:
        value = store.get_value(args.get)
        if value is None:
            logger.error("%s: not found", args.get)
            return 1
        sys.stdout.write(value if value.endswith('\n') else value + '\n')
        return 0

    sys.stdout.write(store.dumps(flat=args.flat))
    return 0


if __name__ == '__main__':
    sys.exit(main())

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for HDF (Hierarchical Data Format) text.

Each line is matched against the following forms, first match wins:

    name.path = value          assign a value
    name.path : other.path     link to another path
    name.path << EOM           literal block, ended by a line reading EOM
    name.path {                open a nested scope
    }                          close the current scope

Any other line (blank, comment, malformed) is skipped. The grammar is
permissive: end of input closes every open scope and literal block
without error.

Example:
    >>> store = parse_hdf('''
    ... config {
    ...     name = MyApp
    ...     db : services.db
    ... }
    ... ''')
    >>> store.get_value('config.name')
    'MyApp'
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from ..store import HdfStore

# Patterns for the line forms
ASSIGN_LINE = re.compile(r'^\s*([a-zA-Z0-9_.]+)\s*=\s*(.*)$')
LINK_LINE = re.compile(r'^\s*([a-zA-Z0-9_.]+)\s*:\s*(.*)$')
OPEN_PASTE_LINE = re.compile(r'^\s*([a-zA-Z0-9_.]+)\s*<<\s*EOM\s*$')
CLOSE_PASTE_LINE = 'EOM'
OPEN_TREE_LINE = re.compile(r'^\s*([a-zA-Z0-9_.]+)\s*{\s*$')
CLOSE_TREE_LINE = re.compile(r'^\s*}\s*$')


def _strip_eol(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


class HdfParser:
    """Line-oriented parser feeding HDF lines into an HdfStore.

    Nested scopes are tracked on an explicit stack, so the depth of the
    input is not bounded by the interpreter's recursion limit.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def parse_lines(self, lines: Iterable[str], store: HdfStore | None = None) -> HdfStore:
        """Parse an iterable of lines into store.

        Args:
            lines: Lines of HDF text, with or without line terminators.
            store: Target store. A new one is created when omitted.

        Returns:
            The populated store.
        """
        if store is None:
            store = HdfStore(logger=self.logger)
        self._parse_scope(iter(lines), store)
        return store

    def parse(self, text: str, store: HdfStore | None = None) -> HdfStore:
        """Parse HDF text into store.

        Lines are split on '\\n' only; a trailing '\\r' is dropped from each.
        """
        lines = text.split('\n')
        if lines[-1] == '':
            lines.pop()
        return self.parse_lines(lines, store)

    def parse_file(self, filepath: str | Path, store: HdfStore | None = None) -> HdfStore:
        """Parse an HDF file into store.

        A file that cannot be opened or read is logged as an error and
        parsing stops; whatever was read so far stays in the store.
        """
        if store is None:
            store = HdfStore(logger=self.logger)
        try:
            # newline='\n': a lone '\r' inside a value does not end the line
            with open(filepath, encoding='utf-8', newline='\n') as fh:
                self._parse_scope(fh, store)
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error("file %s could not be read: %s", filepath, e)
        return store

    def _parse_scope(self, lines: Iterator[str], store: HdfStore) -> None:
        """Consume lines into store until its closing brace or end of input."""
        scopes = [store]
        for raw in lines:
            line = _strip_eol(raw)
            scope = scopes[-1]

            m = ASSIGN_LINE.match(line)
            if m:
                self.logger.debug("equals matched: %s = %s", m.group(1), m.group(2))
                scope.set_value(m.group(1), m.group(2))
                continue

            m = LINK_LINE.match(line)
            if m:
                self.logger.debug("link matched: %s : %s", m.group(1), m.group(2))
                scope.link_value(m.group(1), m.group(2))
                continue

            m = OPEN_PASTE_LINE.match(line)
            if m:
                self.logger.debug("EOM begin matched: %s", m.group(1))
                scope.set_value(m.group(1), self._read_paste(lines))
                continue

            m = OPEN_TREE_LINE.match(line)
            if m:
                self.logger.debug("open tree matched: %s", m.group(1))
                node = scope.resolve_or_create(m.group(1))
                if node is None:
                    # Detached scope, so the block does not land in the outer one
                    scopes.append(HdfStore(logger=self.logger))
                else:
                    scopes.append(HdfStore(node, logger=self.logger,
                                           max_link_depth=scope.max_link_depth))
                continue

            if CLOSE_TREE_LINE.match(line):
                self.logger.debug("close tree matched")
                scopes.pop()
                if not scopes:
                    return
                continue

            self.logger.debug("nothing matched: %r", line)

    def _read_paste(self, lines: Iterator[str]) -> str:
        """Collect raw lines up to the EOM terminator."""
        value = ''
        for raw in lines:
            line = _strip_eol(raw)
            if line == CLOSE_PASTE_LINE:
                self.logger.debug("EOM end")
                return value
            value += line + '\n'
        self.logger.debug("EOM block not terminated before end of input")
        return value


def parse_hdf(text: str, store: HdfStore | None = None) -> HdfStore:
    """Parse HDF text.

    Args:
        text: HDF source text.
        store: Optional store to populate.

    Returns:
        The populated HdfStore.
    """
    logger = store.logger if store is not None else None
    return HdfParser(logger=logger).parse(text, store)


def parse_hdf_file(filepath: str | Path, store: HdfStore | None = None) -> HdfStore:
    """Parse an HDF file.

    Args:
        filepath: Path of the file to read.
        store: Optional store to populate.

    Returns:
        The populated HdfStore.
    """
    logger = store.logger if store is not None else None
    return HdfParser(logger=logger).parse_file(filepath, store)

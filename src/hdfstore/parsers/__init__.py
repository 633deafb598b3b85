# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating HdfStore from text.

Available parsers:
- hdf: the line-oriented HDF format (.hdf files)

Example:
    >>> from hdfstore.parsers import parse_hdf, parse_hdf_file
    >>> store = parse_hdf_file('site.hdf')
    >>> store.get_value('site.title')
"""

from .hdf import HdfParser, parse_hdf, parse_hdf_file

__all__ = [
    'parse_hdf',
    'parse_hdf_file',
    'HdfParser',
]

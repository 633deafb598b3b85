# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HdfStore - Hierarchical key/value data in the HDF text format.

A small, zero-dependency library holding configuration-like data in a
tree of named nodes addressed by dotted paths, with links between
subtrees and a line-oriented text format (nested or flat).
"""

__version__ = "0.1.0"

from .exceptions import HdfError, PathNotFoundError
from .node import HdfNode
from .parsers import HdfParser, parse_hdf, parse_hdf_file
from .store import HdfStore, dump_flat, dump_tree

__all__ = [
    # Core classes
    "HdfStore",
    "HdfNode",
    # Parsing
    "HdfParser",
    "parse_hdf",
    "parse_hdf_file",
    # Dumping
    "dump_tree",
    "dump_flat",
    # Exceptions
    "HdfError",
    "PathNotFoundError",
]

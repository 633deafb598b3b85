# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HdfStore package - Dotted-path navigation and text rendering.

The package is organized into:
- core: HdfStore class with path resolution, links, reads, writes and deletes
- dumping: Functions rendering a node tree in nested or flat HDF form

Example:
    >>> from hdfstore import HdfStore
    >>> store = HdfStore()
    >>> store.set_value('config.name', 'MyApp')
    >>> store.dump_flat()
    ['config.name = MyApp']
"""

from .core import HdfStore, split_path
from .dumping import dump_flat, dump_tree

__all__ = ["HdfStore", "dump_flat", "dump_tree", "split_path"]

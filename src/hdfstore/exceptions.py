# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HdfStore exceptions."""

from __future__ import annotations


class HdfError(Exception):
    """Base exception for HdfStore errors."""

    pass


class PathNotFoundError(HdfError, KeyError):
    """Raised by mapping-style access when a path holds no value."""

    pass

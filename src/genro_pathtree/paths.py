# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path string utilities.

A path is a string of node names joined by separator characters. Any
character of the separator set delimits a segment; empty segments are
dropped, so leading, trailing and repeated separators are tolerated.
No other normalization is applied ('.' and '..' are ordinary names).

Example:
    >>> split_path('/root//config\\\\db/')
    ['root', 'config', 'db']
    >>> join_path(['root', 'config'])
    'root/config'
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from .exceptions import InvalidPathError

DEFAULT_SEPARATORS: tuple[str, ...] = ('\\', '/')
CANONICAL_SEPARATOR = '/'


def split_path(path: str, separators: Iterable[str] = DEFAULT_SEPARATORS) -> list[str]:
    """Split a path on any separator character, discarding empty segments.

    Args:
        path: The path string.
        separators: Characters treated as delimiters.

    Returns:
        Ordered list of segment names.
    """
    chars = ''.join(separators)
    if not chars:
        return [path] if path else []
    pattern = f"[{re.escape(chars)}]"
    return [segment for segment in re.split(pattern, path) if segment]


def join_path(names: Iterable[str], separator: str = CANONICAL_SEPARATOR) -> str:
    """Join node names into a path string."""
    return separator.join(names)


def check_path(path: Any, operation: str) -> None:
    """Raise InvalidPathError if path is None, not a string, or blank.

    Args:
        path: Caller supplied path.
        operation: Name of the calling operation, used in the message.
    """
    if not isinstance(path, str) or not path.strip():
        raise InvalidPathError(path, operation)

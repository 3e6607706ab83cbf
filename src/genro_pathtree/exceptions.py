# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree exceptions.

Every error derives from PathTreeError and from the builtin exception that
matches its meaning, so ``except KeyError`` keeps working for lookups.
"""

from __future__ import annotations

from typing import Any


class PathTreeError(Exception):
    """Base exception for PathTree errors."""

    pass


class InvalidPathError(PathTreeError, ValueError):
    """Raised when a path is None, empty or whitespace only."""

    def __init__(self, path: Any, operation: str) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"{operation}: parameter 'path' was null or empty ({path!r})")


class ChildNotFoundError(PathTreeError, KeyError):
    """Raised when a named child does not exist."""

    def __init__(self, name: str, parent: str | None = None) -> None:
        self.name = name
        self.parent = parent
        where = f" under '{parent}'" if parent is not None else ""
        super().__init__(f"Child '{name}' not found{where}")

    def __str__(self) -> str:
        return str(self.args[0])


class NodeNotFoundError(PathTreeError, KeyError):
    """Raised when a path cannot be resolved to a node."""

    def __init__(self, path: str, operation: str | None = None) -> None:
        self.path = path
        self.operation = operation
        prefix = f"{operation}: " if operation else ""
        super().__init__(f"{prefix}could not find path '{path}'")

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateNameError(PathTreeError, KeyError):
    """Raised when a child name already exists among its siblings."""

    def __init__(self, name: str, parent: str | None = None) -> None:
        self.name = name
        self.parent = parent
        where = f" under '{parent}'" if parent is not None else ""
        super().__init__(f"Child '{name}' already exists{where}")

    def __str__(self) -> str:
        return str(self.args[0])


class RootRemovalError(PathTreeError, RuntimeError):
    """Raised when removing a node that has no parent."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot remove '{path}': node has no parent")


class CyclicAttachError(PathTreeError, RuntimeError):
    """Raised when attaching a node under itself or one of its descendants."""

    def __init__(self, name: str, target: str) -> None:
        self.name = name
        self.target = target
        super().__init__(f"Cannot attach '{name}' under '{target}': would create a cycle")


class NodeValueTypeError(PathTreeError, TypeError):
    """Raised when a stored value is not an instance of the requested type."""

    def __init__(self, path: str, expected: type, actual: Any) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Value at '{path}' is {type(actual).__name__}, "
            f"not {expected.__name__}"
        )

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-PathTree - In-memory hierarchical container addressed by paths.

A lightweight, zero-dependency library providing a generic tree whose
nodes are reached by child-name lookup or by slash-delimited paths
resolved from the root.
"""

__version__ = "0.1.0"

from .exceptions import (
    ChildNotFoundError,
    CyclicAttachError,
    DuplicateNameError,
    InvalidPathError,
    NodeNotFoundError,
    NodeValueTypeError,
    PathTreeError,
    RootRemovalError,
)
from .node import BasePathTreeNode, PathTreeNode
from .paths import CANONICAL_SEPARATOR, DEFAULT_SEPARATORS, join_path, split_path
from .tree import PathTree

__all__ = [
    # Core classes
    "PathTree",
    "PathTreeNode",
    "BasePathTreeNode",
    # Paths
    "CANONICAL_SEPARATOR",
    "DEFAULT_SEPARATORS",
    "split_path",
    "join_path",
    # Exceptions
    "PathTreeError",
    "InvalidPathError",
    "ChildNotFoundError",
    "NodeNotFoundError",
    "DuplicateNameError",
    "RootRemovalError",
    "CyclicAttachError",
    "NodeValueTypeError",
]

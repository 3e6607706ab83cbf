# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree - path string addressing over a PathTreeNode graph.

This module provides the PathTree class, a thin wrapper around a single
root node that resolves separator-delimited paths into nodes.

Path Syntax:
    - Absolute from the root: 'root/config/db'
    - Either slash works by default: 'root\\config\\db'
    - Empty segments are ignored: '/root//config/'

The first segment always names the root itself, so a tree whose root is
called 'root' resolves 'root/a' to the child 'a' and 'other/a' to nothing.

Example:
    Basic usage::

        tree = PathTree('root', None)
        tree.add_as_path('root/config', {})
        tree.add_as_path('root/config/db', 'sqlite')

        found, value = tree.try_get_value('root/config/db')  # (True, 'sqlite')
        tree.count()  # 3

        tree.remove_node('root/config')
        tree.count()  # 1
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar, overload

from ..exceptions import NodeNotFoundError, NodeValueTypeError, RootRemovalError
from ..node import BasePathTreeNode, PathTreeNode
from ..paths import DEFAULT_SEPARATORS, check_path, split_path

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')


class PathTree(Generic[T]):
    """A hierarchical container addressed by path strings.

    PathTree provides:
    - add_as_path(path, item): Create a node under an existing parent
    - try_get_value(path) / try_get_node(path): Lookups that never raise
      for a missing path
    - get_value(path) / get_node(path) / tree[path]: Lookups that raise
      NodeNotFoundError
    - remove_node(path): Drop a node and its subtree
    - count(): Number of nodes including the root

    Attributes:
        path_separators: Characters that delimit path segments. Mutable;
            a change applies to every later call on this instance.

    Example:
        >>> tree = PathTree('r', 0)
        >>> tree.add_as_path('r/x', 1)
        PathTreeNode('x', value=1, children=0)
        >>> tree['r/x']
        1
    """

    __slots__ = ('_root', 'path_separators')

    @overload
    def __init__(self, *, separators: Iterable[str] = ...) -> None: ...

    @overload
    def __init__(self, root: BasePathTreeNode[T], *, separators: Iterable[str] = ...) -> None: ...

    @overload
    def __init__(self, root: str, value: T = ..., *, separators: Iterable[str] = ...) -> None: ...

    def __init__(
        self,
        root: BasePathTreeNode[T] | str | None = None,
        *args: Any,
        separators: Iterable[str] = DEFAULT_SEPARATORS,
    ) -> None:
        """Initialize a PathTree.

        Args:
            root: Optional root. Can be:
                - None: empty tree, set ``root`` later
                - BasePathTreeNode: an existing node (with its subtree)
                - str: name of a new root node, whose value follows
            *args: The root value, when root is given as a name.
            separators: Characters treated as path delimiters.

        Example:
            >>> PathTree()
            PathTree(root=None, nodes=0)
            >>> PathTree(PathTreeNode('root'))
            PathTree(root='root', nodes=1)
            >>> PathTree('root', {'version': 1}).root.value
            {'version': 1}
            >>> PathTree('root', None, separators='.').path_separators
            ('.',)
        """
        self._root: BasePathTreeNode[T] | None = None
        self.path_separators: tuple[str, ...] = tuple(separators)

        if isinstance(root, str):
            if len(args) > 1:
                raise TypeError(
                    f"PathTree() takes a root name and one value, got {len(args)} values"
                )
            self.root = PathTreeNode(root, args[0] if args else None)
        elif root is not None:
            if args:
                raise TypeError("PathTree() takes no value when given a root node")
            self.root = root
        elif args:
            raise TypeError("PathTree() takes no value without a root name")

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        root_name = self._root.name if self._root is not None else None
        return f"PathTree(root={root_name!r}, nodes={self.count()})"

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        return self.count()

    def __iter__(self) -> Iterator[BasePathTreeNode[T]]:
        """Iterate over all nodes depth first, root first."""
        if self._root is None:
            return iter(())
        return self._root.self_and_descendants_depth_first()

    def __contains__(self, path: object) -> bool:
        return self.contains_path(path)

    def __getitem__(self, path: str) -> T:
        return self.get_value(path)

    # ==================== Root ====================

    @property
    def root(self) -> BasePathTreeNode[T] | None:
        """The top-level node, or None for an empty tree."""
        return self._root

    @root.setter
    def root(self, node: BasePathTreeNode[T] | None) -> None:
        """Replace the root; the new root is cut loose from any parent."""
        if self._root is not None:
            logger.debug("Replacing root '%s'", self._root.name)
        self._root = node
        if node is not None:
            node.parent = None

    # ==================== Path Resolution ====================

    def _split(self, path: str) -> list[str]:
        return split_path(path, self.path_separators)

    def _resolve(self, names: list[str]) -> BasePathTreeNode[T] | None:
        """Walk from the root consuming one name per hop.

        Args:
            names: Segment names; the first one must be the root's name.

        Returns:
            The node reached after the last name, or None if any hop fails.
        """
        if not names or self._root is None:
            return None
        if names[0] != self._root.name:
            return None

        current = self._root
        for name in names[1:]:
            found, child = current.try_get_child(name)
            if not found:
                return None
            current = child
        return current

    def _resolve_node(self, path: str) -> BasePathTreeNode[T] | None:
        return self._resolve(self._split(path))

    def _resolve_parent(self, path: str) -> BasePathTreeNode[T] | None:
        return self._resolve(self._split(path)[:-1])

    # ==================== Core API ====================

    def add_as_path(self, path: str, item: T) -> BasePathTreeNode[T]:
        """Add item as a new node at path, under an existing parent.

        Only the last segment is created; every segment before it must
        already resolve, starting with the root's name.

        Args:
            path: Full path of the new node (e.g., 'root/config/db').
            item: Value for the new node.

        Returns:
            The new node.

        Raises:
            InvalidPathError: If path is None, empty or whitespace only.
            NodeNotFoundError: If the parent path does not resolve.
            DuplicateNameError: If the parent already has a child with
                the same name.

        Example:
            >>> tree = PathTree('root', None)
            >>> tree.add_as_path('root/a', 1)
            PathTreeNode('a', value=1, children=0)
            >>> tree.add_as_path('root/a/b', 2).path_key
            'root/a/b'
        """
        check_path(path, 'add_as_path')

        parent = self._resolve_parent(path)
        if parent is None:
            raise NodeNotFoundError(path, 'add_as_path')

        node_name = self._split(path)[-1]
        node = parent.add_child(node_name, item)
        logger.debug("Added '%s'", path)
        return node

    def try_get_value(self, path: str, as_type: type[U] | None = None) -> tuple[bool, Any]:
        """Get the value stored at path without raising for a missing path.

        Args:
            path: Full path of the node.
            as_type: Optional type the stored value is expected to have.

        Returns:
            (True, value) if the path resolves, (False, None) otherwise.

        Raises:
            InvalidPathError: If path is None, empty or whitespace only.
            NodeValueTypeError: If as_type is given and the stored value
                is neither None nor an instance of it.
        """
        check_path(path, 'try_get_value')

        node = self._resolve_node(path)
        if node is None:
            return False, None

        value = node.value
        if as_type is not None and value is not None and not isinstance(value, as_type):
            raise NodeValueTypeError(path, as_type, value)
        return True, value

    def try_get_node(
        self, path: str, as_type: type[U] | None = None
    ) -> tuple[bool, BasePathTreeNode[Any] | None]:
        """Get the node at path without raising for a missing path.

        Args:
            path: Full path of the node.
            as_type: Optional type the node's value is expected to have.

        Returns:
            (True, node) if the path resolves, (False, None) otherwise.

        Raises:
            InvalidPathError: If path is None, empty or whitespace only.
            NodeValueTypeError: If as_type is given and the node's value
                is neither None nor an instance of it.
        """
        check_path(path, 'try_get_node')

        node = self._resolve_node(path)
        if node is None:
            return False, None

        if (
            as_type is not None
            and node.value is not None
            and not isinstance(node.value, as_type)
        ):
            raise NodeValueTypeError(path, as_type, node.value)
        return True, node

    def get_node(self, path: str) -> BasePathTreeNode[T]:
        """Get the node at path.

        Raises:
            InvalidPathError: If path is None, empty or whitespace only.
            NodeNotFoundError: If the path does not resolve.
        """
        check_path(path, 'get_node')
        node = self._resolve_node(path)
        if node is None:
            raise NodeNotFoundError(path, 'get_node')
        return node

    def get_value(self, path: str) -> T:
        """Get the value at path.

        Raises:
            InvalidPathError: If path is None, empty or whitespace only.
            NodeNotFoundError: If the path does not resolve.
        """
        check_path(path, 'get_value')
        node = self._resolve_node(path)
        if node is None:
            raise NodeNotFoundError(path, 'get_value')
        return node.value

    def contains_path(self, path: object) -> bool:
        """True if path resolves to a node. Blank or non-string paths are False."""
        if not isinstance(path, str) or not path.strip():
            return False
        return self._resolve_node(path) is not None

    def remove_node(self, path: str) -> None:
        """Remove the node at path together with its subtree.

        Args:
            path: Full path of the node to remove.

        Raises:
            InvalidPathError: If path is None, empty or whitespace only.
            NodeNotFoundError: If the path does not resolve.
            RootRemovalError: If the node has no parent (the root).
        """
        check_path(path, 'remove_node')

        node = self._resolve_node(path)
        if node is None:
            raise NodeNotFoundError(path, 'remove_node')

        parent = node.parent
        if parent is None:
            raise RootRemovalError(path)

        parent.remove_child(node.name)

    # ==================== Traversal ====================

    def count(self) -> int:
        """Count every node reachable from the root, root included.

        Uses an explicit stack, so deep trees do not hit the recursion limit.

        Returns:
            Number of nodes (0 for a tree without root).
        """
        if self._root is None:
            return 0

        total = 0
        stack: list[BasePathTreeNode[T]] = [self._root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children())
        return total

    def walk(self) -> Iterator[tuple[str, BasePathTreeNode[T]]]:
        """Yield (path_key, node) for every node, depth first from the root.

        Example:
            >>> tree = PathTree('root', 0)
            >>> _ = tree.add_as_path('root/a', 1)
            >>> for path, node in tree.walk():
            ...     print(path, node.value)
            root 0
            root/a 1
        """
        for node in self:
            yield node.path_key, node

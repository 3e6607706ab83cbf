# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree node classes.

BasePathTreeNode declares the node capability (identity, payload, parent
link, child mutation) and implements every traversal on top of it.
PathTreeNode is the dict-backed implementation used by PathTree.
"""

from __future__ import annotations

import logging
import weakref
from abc import ABC, abstractmethod
from collections import deque
from typing import Generic, Iterator, TypeVar

from .exceptions import ChildNotFoundError, CyclicAttachError, DuplicateNameError
from .paths import CANONICAL_SEPARATOR, join_path

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BasePathTreeNode(ABC, Generic[T]):
    """Abstract tree vertex.

    Subclasses provide storage for name, value, parent and children.
    Traversals are generators built only on ``children()`` and ``parent``,
    so they are lazy and can be restarted by calling them again.
    """

    __slots__ = ()

    # ==================== Identity ====================

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the node, unique among its siblings."""

    @property
    @abstractmethod
    def value(self) -> T:
        """Payload stored in the node."""

    @value.setter
    @abstractmethod
    def value(self, value: T) -> None: ...

    @property
    @abstractmethod
    def parent(self) -> BasePathTreeNode[T] | None:
        """Enclosing node, or None for a root."""

    @parent.setter
    @abstractmethod
    def parent(self, node: BasePathTreeNode[T] | None) -> None: ...

    # ==================== Structure ====================

    @abstractmethod
    def add_child(self, name: str, value: T) -> BasePathTreeNode[T]: ...

    @abstractmethod
    def remove_child(self, name: str) -> None: ...

    @abstractmethod
    def contains_child(self, name: str) -> bool: ...

    @abstractmethod
    def try_get_child(self, name: str) -> tuple[bool, BasePathTreeNode[T] | None]: ...

    @abstractmethod
    def attach_child(self, node: BasePathTreeNode[T]) -> None: ...

    @abstractmethod
    def detach_child(self, name: str) -> BasePathTreeNode[T]: ...

    @abstractmethod
    def children(self) -> Iterator[BasePathTreeNode[T]]:
        """Iterate over immediate children in insertion order."""

    # ==================== Navigation ====================

    @property
    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return next(self.children(), None) is None

    @property
    def depth(self) -> int:
        """Number of ancestors (root=0)."""
        return sum(1 for _ in self.ancestors())

    @property
    def path_key(self) -> str:
        """Names from the most distant ancestor down to this node.

        Recomputed on every access, never cached.

        Example:
            >>> root = PathTreeNode('root')
            >>> root.add_child('config', None).add_child('db', 1).path_key
            'root/config/db'
        """
        names = [ancestor.name for ancestor in self.ancestors()]
        names.reverse()
        names.append(self.name)
        return join_path(names, CANONICAL_SEPARATOR)

    # ==================== Traversal ====================

    def ancestors(self) -> Iterator[BasePathTreeNode[T]]:
        """Walk parent links from the parent up to the root (self excluded)."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def self_and_descendants_depth_first(self) -> Iterator[BasePathTreeNode[T]]:
        """Pre-order traversal starting with self.

        Each child's full subtree is visited before the next sibling.
        Uses an explicit stack of child iterators, so depth is not bounded
        by the interpreter recursion limit.
        """
        yield self
        stack = [self.children()]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue
            yield child
            stack.append(child.children())

    def descendants_depth_first(self) -> Iterator[BasePathTreeNode[T]]:
        """Pre-order traversal of the descendants (self excluded)."""
        nodes = self.self_and_descendants_depth_first()
        next(nodes)
        yield from nodes

    def self_and_descendants_breadth_first(self) -> Iterator[BasePathTreeNode[T]]:
        """Level-order traversal starting with self.

        All nodes at depth k are visited before any node at depth k+1.
        """
        frontier: deque[BasePathTreeNode[T]] = deque([self])
        while frontier:
            node = frontier.popleft()
            yield node
            frontier.extend(node.children())

    def descendants_breadth_first(self) -> Iterator[BasePathTreeNode[T]]:
        """Level-order traversal of the descendants (self excluded)."""
        nodes = self.self_and_descendants_breadth_first()
        next(nodes)
        yield from nodes

    # ==================== Special Methods ====================

    def __iter__(self) -> Iterator[BasePathTreeNode[T]]:
        """Iterate over immediate children."""
        return self.children()

    def __contains__(self, name: str) -> bool:
        """Check if a child with this name exists."""
        return self.contains_child(name)


class PathTreeNode(BasePathTreeNode[T]):
    """A node in a PathTree hierarchy, with dict-backed children.

    Each node has:
    - name: The node's key within its parent, fixed at construction
    - value: The payload, freely reassignable
    - parent: Weak back-reference to the enclosing node (None for a root)
    - children: Dict of child nodes keyed by name, in insertion order

    The parent link does not own the parent: the parent owns its children
    through the dict, and the child only observes the parent. Assigning
    ``parent`` never touches any children dict; use attach_child and
    detach_child to keep both sides consistent.

    Example:
        >>> root = PathTreeNode('root', 0)
        >>> cfg = root.add_child('config', {'debug': True})
        >>> cfg.parent is root
        True
        >>> [n.name for n in root.children()]
        ['config']
    """

    __slots__ = ('_name', '_value', '_parent_ref', '_children', '__weakref__')

    def __init__(self, name: str, value: T | None = None) -> None:
        """Initialize a PathTreeNode.

        Args:
            name: The node's name, unique among its future siblings.
            value: The node's payload.
        """
        self._name = name
        self._value = value
        self._parent_ref: weakref.ref[BasePathTreeNode[T]] | None = None
        self._children: dict[str, BasePathTreeNode[T]] = {}

    def __repr__(self) -> str:
        return (
            f"PathTreeNode({self._name!r}, value={self._value!r}, "
            f"children={len(self._children)})"
        )

    def __len__(self) -> int:
        """Return the number of immediate children."""
        return len(self._children)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    @property
    def parent(self) -> BasePathTreeNode[T] | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: BasePathTreeNode[T] | None) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    # ==================== Structure ====================

    def add_child(self, name: str, value: T) -> PathTreeNode[T]:
        """Create a child node and attach it under this node.

        Args:
            name: Name of the new child.
            value: Payload of the new child.

        Returns:
            The new child node.

        Raises:
            DuplicateNameError: If a child with this name already exists.
        """
        if name in self._children:
            raise DuplicateNameError(name, self._name)
        child: PathTreeNode[T] = PathTreeNode(name, value)
        child.parent = self
        self._children[name] = child
        return child

    def remove_child(self, name: str) -> None:
        """Remove and discard the named child together with its subtree.

        Raises:
            ChildNotFoundError: If no child has this name.
        """
        try:
            child = self._children.pop(name)
        except KeyError:
            raise ChildNotFoundError(name, self._name) from None
        child.parent = None
        logger.debug("Removed '%s' from '%s'", name, self._name)

    def contains_child(self, name: str) -> bool:
        return name in self._children

    def try_get_child(self, name: str) -> tuple[bool, BasePathTreeNode[T] | None]:
        """Look up a child by name without raising.

        Returns:
            (True, node) if found, (False, None) otherwise.
        """
        child = self._children.get(name)
        return child is not None, child

    def attach_child(self, node: BasePathTreeNode[T]) -> None:
        """Insert an existing node, with its subtree, as a child.

        The node is keyed by its own name and its parent is set to self.
        If the node still belongs to another parent, that parent is not
        updated; detach it first.

        Raises:
            DuplicateNameError: If a child with the node's name exists.
            CyclicAttachError: If node is self or one of self's ancestors.
        """
        if node is self or any(ancestor is node for ancestor in self.ancestors()):
            raise CyclicAttachError(node.name, self._name)
        if node.name in self._children:
            raise DuplicateNameError(node.name, self._name)
        self._children[node.name] = node
        node.parent = self
        logger.debug("Attached '%s' under '%s'", node.name, self._name)

    def detach_child(self, name: str) -> BasePathTreeNode[T]:
        """Remove the named child and hand its subtree back to the caller.

        Returns:
            The detached node, now a root (parent None).

        Raises:
            ChildNotFoundError: If no child has this name.
        """
        try:
            child = self._children.pop(name)
        except KeyError:
            raise ChildNotFoundError(name, self._name) from None
        child.parent = None
        logger.debug("Detached '%s' from '%s'", name, self._name)
        return child

    def children(self) -> Iterator[BasePathTreeNode[T]]:
        """Iterate over immediate children in insertion order."""
        return iter(self._children.values())

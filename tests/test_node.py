# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for PathTreeNode structure and traversal."""

import sys

import pytest

from genro_pathtree import (
    BasePathTreeNode,
    ChildNotFoundError,
    CyclicAttachError,
    DuplicateNameError,
    PathTreeError,
    PathTreeNode,
)


def names(nodes):
    return [node.name for node in nodes]


@pytest.fixture
def sample():
    """Tree used by traversal tests.

        root
        ├── a
        │   ├── a1
        │   │   └── a1x
        │   └── a2
        └── b
            └── b1
    """
    root = PathTreeNode('root', 0)
    a = root.add_child('a', 1)
    a1 = a.add_child('a1', 11)
    a1.add_child('a1x', 111)
    a.add_child('a2', 12)
    b = root.add_child('b', 2)
    b.add_child('b1', 21)
    return root


class TestPathTreeNodeBasics:
    """Tests for node construction and properties."""

    def test_create_node(self):
        """Test creating a node with name and value."""
        node = PathTreeNode('user', 'Alice')
        assert node.name == 'user'
        assert node.value == 'Alice'
        assert node.parent is None
        assert list(node.children()) == []

    def test_create_node_defaults(self):
        """Test node value defaults to None."""
        node = PathTreeNode('empty')
        assert node.value is None
        assert node.is_root is True
        assert node.is_leaf is True
        assert node.depth == 0

    def test_name_is_read_only(self):
        """Test name cannot be reassigned."""
        node = PathTreeNode('fixed')
        with pytest.raises(AttributeError):
            node.name = 'other'

    def test_value_is_mutable(self):
        """Test value can be replaced in place."""
        node = PathTreeNode('counter', 1)
        node.value = 2
        assert node.value == 2

    def test_is_a_base_node(self):
        """Test concrete node implements the abstract capability."""
        assert isinstance(PathTreeNode('x'), BasePathTreeNode)

    def test_base_node_is_abstract(self):
        """Test abstract base cannot be instantiated."""
        with pytest.raises(TypeError):
            BasePathTreeNode()

    def test_repr(self):
        """Test string representation."""
        node = PathTreeNode('name', 'Alice')
        node.add_child('child', None)
        repr_str = repr(node)
        assert 'name' in repr_str
        assert 'Alice' in repr_str
        assert 'children=1' in repr_str

    def test_parent_setter_does_not_touch_children(self):
        """Test assigning parent leaves both child collections alone."""
        parent = PathTreeNode('parent')
        child = PathTreeNode('child')
        child.parent = parent
        assert child.parent is parent
        assert parent.contains_child('child') is False

    def test_parent_is_not_owned(self):
        """Test a child does not keep its parent alive."""
        root = PathTreeNode('root')
        child = root.add_child('child', None)
        assert child.parent is root
        del root
        assert child.parent is None


class TestPathTreeNodeChildren:
    """Tests for child mutation primitives."""

    def test_add_child(self):
        """Test add_child creates and attaches a child."""
        root = PathTreeNode('root')
        child = root.add_child('a', 1)
        assert child.name == 'a'
        assert child.value == 1
        assert child.parent is root
        assert root.contains_child('a')
        assert 'a' in root
        assert len(root) == 1
        assert root.is_leaf is False

    def test_add_child_duplicate_raises(self):
        """Test duplicate name fails and keeps the existing child."""
        root = PathTreeNode('root')
        original = root.add_child('a', 1)
        with pytest.raises(DuplicateNameError, match="'a' already exists"):
            root.add_child('a', 2)
        found, child = root.try_get_child('a')
        assert found is True
        assert child is original
        assert child.value == 1

    def test_duplicate_is_key_error(self):
        """Test DuplicateNameError is catchable as KeyError."""
        root = PathTreeNode('root')
        root.add_child('a', 1)
        with pytest.raises(KeyError):
            root.add_child('a', 2)

    def test_remove_child(self):
        """Test remove_child discards the child and its subtree."""
        root = PathTreeNode('root')
        a = root.add_child('a', 1)
        a.add_child('b', 2)
        root.remove_child('a')
        assert root.contains_child('a') is False
        assert a.parent is None
        assert len(root) == 0

    def test_remove_missing_child_raises(self):
        """Test removing an unknown name raises ChildNotFoundError."""
        root = PathTreeNode('root')
        with pytest.raises(ChildNotFoundError, match="'missing' not found"):
            root.remove_child('missing')

    def test_try_get_child(self):
        """Test try_get_child returns a found flag and never raises."""
        root = PathTreeNode('root')
        a = root.add_child('a', 1)
        assert root.try_get_child('a') == (True, a)
        assert root.try_get_child('missing') == (False, None)

    def test_children_insertion_order(self):
        """Test children iterate in insertion order."""
        root = PathTreeNode('root')
        for name in ('c', 'a', 'b'):
            root.add_child(name, None)
        assert names(root.children()) == ['c', 'a', 'b']
        assert names(root) == ['c', 'a', 'b']

    def test_children_is_restartable(self):
        """Test each call to children() starts a fresh iteration."""
        root = PathTreeNode('root')
        root.add_child('a', None)
        root.add_child('b', None)
        assert names(root.children()) == names(root.children())


class TestPathTreeNodeAttachDetach:
    """Tests for moving subtrees with attach/detach."""

    def test_detach_child(self):
        """Test detach_child returns the subtree with parent cleared."""
        root = PathTreeNode('root')
        a = root.add_child('a', 1)
        a.add_child('b', 2)
        detached = root.detach_child('a')
        assert detached is a
        assert detached.parent is None
        assert root.contains_child('a') is False
        assert names(detached.children()) == ['b']

    def test_detach_missing_raises(self):
        """Test detaching an unknown name raises ChildNotFoundError."""
        root = PathTreeNode('root')
        with pytest.raises(ChildNotFoundError):
            root.detach_child('missing')

    def test_missing_child_is_key_error(self):
        """Test ChildNotFoundError is catchable as KeyError and PathTreeError."""
        root = PathTreeNode('root')
        with pytest.raises(KeyError):
            root.detach_child('missing')
        with pytest.raises(PathTreeError):
            root.remove_child('missing')

    def test_attach_child(self):
        """Test attach_child inserts an existing node keyed by its name."""
        root = PathTreeNode('root')
        branch = PathTreeNode('branch', 5)
        branch.add_child('leaf', 6)
        root.attach_child(branch)
        assert branch.parent is root
        found, child = root.try_get_child('branch')
        assert found and child is branch
        assert names(root.descendants_depth_first()) == ['branch', 'leaf']

    def test_attach_duplicate_raises(self):
        """Test attaching over an existing name fails."""
        root = PathTreeNode('root')
        root.add_child('a', 1)
        with pytest.raises(DuplicateNameError):
            root.attach_child(PathTreeNode('a', 2))
        assert root.try_get_child('a')[1].value == 1

    def test_detach_attach_restores_state(self, sample):
        """Test detach followed by attach on the same parent is a no-op."""
        before = [(n.path_key, n.value) for n in sample.self_and_descendants_breadth_first()]
        sample.attach_child(sample.detach_child('a'))
        after = [(n.path_key, n.value) for n in sample.self_and_descendants_breadth_first()]
        assert sorted(after) == sorted(before)
        assert sample.try_get_child('a')[1].parent is sample

    def test_move_branch(self, sample):
        """Test re-parenting a subtree under another node."""
        a = sample.detach_child('a')
        b = sample.try_get_child('b')[1]
        b.attach_child(a)
        assert a.parent is b
        assert a.path_key == 'root/b/a'
        assert names(sample.descendants_depth_first()) == ['b', 'b1', 'a', 'a1', 'a1x', 'a2']

    def test_attach_self_raises(self):
        """Test a node cannot be attached under itself."""
        node = PathTreeNode('node')
        with pytest.raises(CyclicAttachError):
            node.attach_child(node)

    def test_attach_ancestor_raises(self, sample):
        """Test attaching an ancestor below its descendant is rejected."""
        a1x = next(n for n in sample.descendants_depth_first() if n.name == 'a1x')
        with pytest.raises(CyclicAttachError, match="cycle"):
            a1x.attach_child(sample)
        assert a1x.is_leaf
        assert sample.is_root


class TestPathTreeNodeTraversal:
    """Tests for ancestors and descendant traversals."""

    def test_ancestors(self, sample):
        """Test ancestors walk from parent up to root, excluding self."""
        a1x = next(n for n in sample.descendants_depth_first() if n.name == 'a1x')
        assert names(a1x.ancestors()) == ['a1', 'a', 'root']
        assert list(sample.ancestors()) == []

    def test_depth(self, sample):
        """Test depth counts ancestors."""
        depths = {n.name: n.depth for n in sample.self_and_descendants_depth_first()}
        assert depths == {'root': 0, 'a': 1, 'a1': 2, 'a1x': 3, 'a2': 2, 'b': 1, 'b1': 2}

    def test_path_key(self, sample):
        """Test path_key joins names from the root down with '/'."""
        keys = [n.path_key for n in sample.self_and_descendants_depth_first()]
        assert keys == [
            'root', 'root/a', 'root/a/a1', 'root/a/a1/a1x',
            'root/a/a2', 'root/b', 'root/b/b1',
        ]

    def test_path_key_follows_moves(self, sample):
        """Test path_key is recomputed after re-parenting."""
        a = sample.detach_child('a')
        assert a.path_key == 'a'
        sample.attach_child(a)
        assert a.path_key == 'root/a'

    def test_depth_first_order(self, sample):
        """Test pre-order: each subtree is finished before the next sibling."""
        assert names(sample.self_and_descendants_depth_first()) == [
            'root', 'a', 'a1', 'a1x', 'a2', 'b', 'b1',
        ]
        assert names(sample.descendants_depth_first()) == [
            'a', 'a1', 'a1x', 'a2', 'b', 'b1',
        ]

    def test_breadth_first_order(self, sample):
        """Test level order: depth k before depth k+1."""
        assert names(sample.self_and_descendants_breadth_first()) == [
            'root', 'a', 'b', 'a1', 'a2', 'b1', 'a1x',
        ]
        assert names(sample.descendants_breadth_first()) == [
            'a', 'b', 'a1', 'a2', 'b1', 'a1x',
        ]

    def test_traversals_visit_same_nodes(self, sample):
        """Test depth-first and breadth-first cover the same node set."""
        dfs = sample.self_and_descendants_depth_first()
        bfs = sample.self_and_descendants_breadth_first()
        assert {id(n) for n in dfs} == {id(n) for n in bfs}

    def test_leaf_traversals(self):
        """Test traversals of a lone node."""
        node = PathTreeNode('alone')
        assert names(node.self_and_descendants_depth_first()) == ['alone']
        assert names(node.self_and_descendants_breadth_first()) == ['alone']
        assert list(node.descendants_depth_first()) == []
        assert list(node.descendants_breadth_first()) == []

    def test_traversal_is_lazy(self, sample):
        """Test a traversal can be consumed partially."""
        nodes = sample.descendants_breadth_first()
        assert next(nodes).name == 'a'
        assert next(nodes).name == 'b'

    def test_traversal_sees_mutation_before_start(self, sample):
        """Test a traversal created before a mutation reflects it once started."""
        nodes = sample.descendants_depth_first()
        sample.add_child('c', 3)
        assert names(nodes)[-1] == 'c'

    def test_deep_tree_does_not_recurse(self):
        """Test traversals handle trees deeper than the recursion limit."""
        root = PathTreeNode('n0')
        current = root
        depth = sys.getrecursionlimit() + 100
        for i in range(1, depth):
            current = current.add_child(f'n{i}', i)
        assert sum(1 for _ in root.self_and_descendants_depth_first()) == depth
        assert sum(1 for _ in root.self_and_descendants_breadth_first()) == depth
        assert sum(1 for _ in current.ancestors()) == depth - 1

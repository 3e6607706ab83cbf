# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathTree package - path addressing over a node hierarchy.

The package is organized into:
- core: PathTree class with path resolution, mutation and counting

Example:
    >>> from genro_pathtree import PathTree
    >>> tree = PathTree('root', None)
    >>> tree.add_as_path('root/config', 'MyApp')
    PathTreeNode('config', value='MyApp', children=0)
    >>> tree['root/config']
    'MyApp'
"""

from .core import PathTree

__all__ = ["PathTree"]

"""Content-tree storage helpers."""
from .tree_builder import TreeBuilder

__all__ = [
    'TreeBuilder',
]

"""
Configuration tree: node model, dot-path reads and writes.
"""

from .node import (
    MISSING, ConfigNode, ScalarNode, MappingNode, SequenceNode, to_node, to_literal
)
from .resolver import PathResolver, split_path, join_path, parse_index
from .mutator import TreeMutator, prepare_for_set

__all__ = [
    'MISSING',
    'ConfigNode',
    'ScalarNode',
    'MappingNode',
    'SequenceNode',
    'to_node',
    'to_literal',
    'PathResolver',
    'split_path',
    'join_path',
    'parse_index',
    'TreeMutator',
    'prepare_for_set'
]

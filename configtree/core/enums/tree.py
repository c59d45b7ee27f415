"""
Tree-related enums for the configtree package.
"""

from enum import Enum


class NodeKind(Enum):
    """Variants of a configuration node."""
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


class WritePolicy(Enum):
    """How a write behaves when its parent path is missing or ends on a scalar."""
    STRICT = "strict"
    MERGE = "merge"

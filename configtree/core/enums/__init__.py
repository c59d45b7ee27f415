"""
Core enums for the configtree package.
"""

from .tree import (
    NodeKind,
    WritePolicy
)

__all__ = [
    'NodeKind',
    'WritePolicy'
]

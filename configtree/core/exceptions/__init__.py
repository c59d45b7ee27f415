"""
Core exceptions for the configtree package.

All errors raised by the tree, the registry and the configurable base class
derive from ConfigTreeError.
"""

from .base import (
    ConfigTreeError,
    LogicError,
    InvalidArgumentError,
    PathIndexError,
    ConfigurationError
)

__all__ = [
    'ConfigTreeError',
    'LogicError',
    'InvalidArgumentError',
    'PathIndexError',
    'ConfigurationError'
]

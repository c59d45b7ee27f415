"""
Singleton registry and tree storage for configuration types.
"""

from .storage import TreeHandle
from .registry import ConfigRegistry, get_config_registry, get_instance

__all__ = [
    'TreeHandle',
    'ConfigRegistry',
    'get_config_registry',
    'get_instance'
]

"""
Registry of configuration type singletons.

The registry records, for every configuration type, which tree it uses
(its own, or the one of its nearest ancestor declaring a seed) and holds at
most one instance per type for the lifetime of the process.
"""

import threading
from typing import Dict, List, Optional

from configtree.core.exceptions import LogicError
from configtree.logger import get_logger
from .storage import TreeHandle

SEED_ATTRIBUTE = "configurations"


class ConfigRegistry:
    """
    Per-type singleton pool for configuration types.

    Types are registered when they are defined (see
    ``Configurable.__init_subclass__``); a type that was never registered is
    registered on first access.
    """

    def __init__(self):
        self.logger = get_logger("configtree.registry")
        self._lock = threading.RLock()

        self._handles: Dict[type, TreeHandle] = {}
        self._instances: Dict[type, object] = {}

    def register_type(self, cls: type) -> TreeHandle:
        """
        Resolve the tree used by `cls`.

        Args:
            cls: Configuration type

        Returns:
            A new handle if `cls` declares its own seed, otherwise the handle
            of its nearest declaring ancestor (or a new empty one if no
            ancestor declares a seed)
        """
        with self._lock:
            if cls in self._handles:
                return self._handles[cls]

            owner = self._find_seed_owner(cls)
            if owner is cls or owner is None:
                handle = TreeHandle(cls, cls.__dict__.get(SEED_ATTRIBUTE))
            else:
                handle = self.register_type(owner)

            self._handles[cls] = handle
            self.logger.debug("Configuration type registered",
                              config_type=cls.__qualname__,
                              tree_owner=handle.owner.__qualname__)
            return handle

    @staticmethod
    def _find_seed_owner(cls: type) -> Optional[type]:
        for klass in cls.__mro__:
            if SEED_ATTRIBUTE in klass.__dict__:
                return klass
        return None

    def tree_handle(self, cls: type) -> TreeHandle:
        """Get the tree handle of a configuration type."""
        with self._lock:
            if cls not in self._handles:
                return self.register_type(cls)
            return self._handles[cls]

    def get_instance(self, cls: type):
        """
        Get the singleton of a configuration type, creating it on first call.

        Args:
            cls: Configuration type

        Returns:
            The unique instance of `cls` in this registry
        """
        if not isinstance(cls, type) or not callable(getattr(cls, "_create", None)):
            raise LogicError("instantiated", getattr(cls, "__qualname__", repr(cls)),
                             "Only configuration types have instances.")

        with self._lock:
            instance = self._instances.get(cls)
            if instance is None:
                handle = self.tree_handle(cls)
                instance = cls._create(handle)
                self._instances[cls] = instance
                self.logger.info("Configuration instance created",
                                 config_type=cls.__qualname__,
                                 tree_owner=handle.owner.__qualname__)
            return instance

    def is_constructed(self, cls: type) -> bool:
        """Whether the singleton of `cls` has been created."""
        with self._lock:
            return cls in self._instances

    def list_types(self) -> List[type]:
        """List all registered configuration types."""
        with self._lock:
            return list(self._handles.keys())


_default_registry = ConfigRegistry()


def get_config_registry() -> ConfigRegistry:
    """Get the process-wide configuration registry."""
    return _default_registry


def get_instance(cls: type):
    """Get the singleton of `cls` from the process-wide registry."""
    return _default_registry.get_instance(cls)

"""
Tree storage handles.

A TreeHandle owns exactly one configuration tree. Configuration types that
declare their own seed get a new handle; types that do not share the handle
of their nearest declaring ancestor, so both see the same tree instance.
"""

import threading
from collections.abc import Mapping
from typing import Optional

from configtree.core.exceptions import ConfigurationError
from configtree.logger import get_logger
from configtree.tree import MappingNode, to_node


class TreeHandle:
    """
    Shared-ownership handle on one configuration tree.

    The root is built from the seed on first access and lives for the rest
    of the process. `lock` serializes reads and writes on this tree only.
    """

    def __init__(self, owner: type, seed: Optional[Mapping] = None):
        if seed is not None and not isinstance(seed, Mapping):
            raise ConfigurationError(
                "configurations", type(seed).__name__,
                f"seed of {owner.__qualname__} must be a mapping"
            )
        self.owner = owner
        self.lock = threading.RLock()
        self.logger = get_logger("configtree.storage")
        self._seed = seed
        self._root: Optional[MappingNode] = None

    @property
    def is_built(self) -> bool:
        return self._root is not None

    @property
    def root(self) -> MappingNode:
        """The tree root, built from the seed on first access."""
        if self._root is None:
            with self.lock:
                if self._root is None:
                    self._root = to_node(self._seed or {})
                    self.logger.debug("Configuration tree built",
                                      owner=self.owner.__qualname__,
                                      top_level_keys=list(self._root.keys()))
        return self._root

    def __repr__(self) -> str:
        return f"TreeHandle(owner={self.owner.__qualname__}, built={self.is_built})"

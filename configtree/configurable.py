"""
Configuration base class.

Concrete configuration types subclass Configurable and optionally declare a
``configurations`` class attribute holding their seed tree::

    class DatabaseConfig(Configurable):
        configurations = {
            'connection': {'host': 'localhost', 'port': 5432},
            'replicas': ['db-1', 'db-2'],
        }

    class ReportingDatabaseConfig(DatabaseConfig):
        pass

    config = DatabaseConfig.get_instance()
    config.get('connection.port')        # 5432
    config.set('replicas.1', 'db-3')

A subclass that does not declare ``configurations`` shares the tree of its
nearest declaring ancestor: writes through ReportingDatabaseConfig are visible
through DatabaseConfig and vice versa. A subclass that declares its own seed
gets an independent tree and sees nothing of its ancestors' values.
"""

from typing import Any, Optional

from configtree.core.enums import WritePolicy
from configtree.core.exceptions import (
    ConfigurationError, InvalidArgumentError, LogicError, PathIndexError
)
from configtree.logger import get_logger
from configtree.registry import TreeHandle, get_config_registry
from configtree.settings import get_settings
from configtree.tree import (
    MISSING, ConfigNode, PathResolver, ScalarNode, TreeMutator, prepare_for_set
)

logger = get_logger("configtree.configurable")


class Configurable:
    """
    Singleton configuration store addressed by dot-paths.

    Instances are only obtained through `get_instance()`; they can not be
    constructed, copied or pickled.
    """

    write_policy: Optional[WritePolicy] = None

    _tree_handle: TreeHandle

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        policy = cls.__dict__.get('write_policy')
        if policy is not None and not isinstance(policy, WritePolicy):
            raise ConfigurationError("write_policy", repr(policy),
                                     f"{cls.__qualname__} must use a WritePolicy")
        get_config_registry().register_type(cls)

    def __new__(cls, *args, **kwargs):
        # Direct calls and unpickling both come through here
        raise LogicError("constructed", cls.__qualname__,
                         "Object can not be constructed or unserialized, use get_instance().")

    @classmethod
    def _create(cls, handle: TreeHandle) -> 'Configurable':
        """Private factory used by the registry."""
        instance = object.__new__(cls)
        instance._tree_handle = handle
        return instance

    @classmethod
    def get_instance(cls) -> 'Configurable':
        """Get the settings object instance of this type."""
        if cls is Configurable:
            raise LogicError("instantiated", cls.__qualname__,
                             "Only concrete configuration types have instances.")
        return get_config_registry().get_instance(cls)

    # Singletons must not be duplicated

    def __copy__(self):
        raise LogicError("cloned", type(self).__qualname__)

    def __deepcopy__(self, memo):
        raise LogicError("cloned", type(self).__qualname__)

    def __reduce_ex__(self, protocol):
        raise LogicError("serialized", type(self).__qualname__)

    def __reduce__(self):
        raise LogicError("serialized", type(self).__qualname__)

    def __setstate__(self, state):
        raise LogicError("unserialized", type(self).__qualname__)

    def __getattr__(self, name):
        # Only reached for objects built around the factory (e.g. by copyreg)
        if name == "_tree_handle":
            raise LogicError("unserialized", type(self).__qualname__,
                             "Object was not created by get_instance().")
        raise AttributeError(f"{type(self).__qualname__!r} object has no attribute {name!r}")

    @property
    def tree(self) -> ConfigNode:
        """Root node of the tree backing this instance."""
        return self._tree_handle.root

    def _policy(self, policy: Optional[WritePolicy]) -> WritePolicy:
        if policy is not None:
            return policy
        if self.write_policy is not None:
            return self.write_policy
        return get_settings().default_write_policy

    def get_node(self, path: Optional[str] = None) -> Any:
        """
        Get the node at `path`.

        Returns:
            The node reached, or MISSING if a mapping lookup missed
        """
        handle = self._tree_handle
        with handle.lock:
            return PathResolver.get(handle.root, path)

    def get(self, path: Optional[str] = None, default: Any = None) -> Any:
        """
        Get the current configuration.

        Args:
            path: Dot-path to the configuration, None for the whole tree
            default: Returned when nothing is stored at `path`. Pass MISSING
                to tell an absent value from a stored None.

        Returns:
            The scalar value, the live MappingNode/SequenceNode for
            containers, or `default`
        """
        node = self.get_node(path)
        if node is MISSING:
            return default
        if isinstance(node, ScalarNode):
            return node.value
        return node

    def has(self, path: str) -> bool:
        """Whether a value (possibly None) is stored at `path`."""
        return self.get_node(path) is not MISSING

    def set(self, path: str, value: Any, policy: Optional[WritePolicy] = None) -> 'Configurable':
        """
        Set a new value into the configuration.

        Args:
            path: Dot-path of the configuration
            value: Plain value; dicts and lists are converted to tree nodes
            policy: Overrides the type's write policy for this call

        Returns:
            self, for chaining

        Raises:
            InvalidArgumentError: Non-integer key on a sequence, or (STRICT)
                a multi-segment path going through a scalar
            PathIndexError: Sequence index out of range
        """
        policy = self._policy(policy)
        handle = self._tree_handle
        with handle.lock:
            try:
                TreeMutator.set(handle.root, path, value, policy)
            except (InvalidArgumentError, PathIndexError) as e:
                logger.warning("Configuration write rejected",
                               config_type=type(self).__qualname__,
                               path=path, error=str(e))
                raise
        logger.debug("Configuration updated", config_type=type(self).__qualname__,
                     path=path, policy=policy.value)
        return self

    def prepare_for_set(self, keys: Any, value: Any, final_value: Any = MISSING) -> Any:
        """Prepare the values for `set`: build a nested mapping from a dotted key."""
        return prepare_for_set(keys, value, final_value)

    def to_dict(self) -> dict:
        """Plain-Python snapshot of the whole tree."""
        handle = self._tree_handle
        with handle.lock:
            return handle.root.to_literal()

    def __repr__(self):
        return f"<{type(self).__qualname__} tree_owner={self._tree_handle.owner.__qualname__}>"

"""
Configuration tree data model.

A configuration tree is made of three node variants:

- ScalarNode: an opaque leaf value (string, number, boolean, None, ...)
- MappingNode: insertion-ordered ``str -> ConfigNode`` collection
- SequenceNode: index-addressable list of ConfigNode

A node never changes variant. Replacing a scalar by a mapping (or the other
way round) is done by replacing the parent's reference to the child.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Union

from configtree.core.enums import NodeKind
from configtree.core.exceptions import PathIndexError


class _Missing:
    """Sentinel type for "no value", distinct from a stored None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


class ConfigNode(ABC):
    """Base class of the three configuration node variants."""

    kind: NodeKind

    __slots__ = ()

    @abstractmethod
    def to_literal(self) -> Any:
        """Return an independent plain-Python copy of this node."""
        pass


class ScalarNode(ConfigNode):
    """Leaf node holding an opaque value."""

    kind = NodeKind.SCALAR

    __slots__ = ('value',)

    def __init__(self, value: Any = None):
        self.value = value

    def to_literal(self) -> Any:
        return self.value

    def __eq__(self, other):
        if isinstance(other, ScalarNode):
            return self.value == other.value
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"ScalarNode({self.value!r})"


class MappingNode(ConfigNode):
    """Insertion-ordered mapping of string keys to nodes."""

    kind = NodeKind.MAPPING

    __slots__ = ('_children',)

    def __init__(self, children: Optional[Dict[str, ConfigNode]] = None):
        self._children: Dict[str, ConfigNode] = {}
        if children:
            for key, child in children.items():
                self.put(key, child)

    def get(self, key: str) -> Union[ConfigNode, Any]:
        """Return the child stored under `key`, or MISSING."""
        return self._children.get(key, MISSING)

    def put(self, key: str, node: ConfigNode) -> None:
        """Insert or overwrite `key`."""
        if not isinstance(node, ConfigNode):
            raise TypeError(f"MappingNode children must be ConfigNode, got {type(node).__name__}")
        self._children[str(key)] = node

    def update(self, other: 'MappingNode') -> None:
        """Shallow merge: every top-level key of `other` overwrites ours."""
        for key, child in other.items():
            self.put(key, child)

    def keys(self):
        return self._children.keys()

    def items(self):
        return self._children.items()

    def __contains__(self, key) -> bool:
        return key in self._children

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def to_literal(self) -> Dict[str, Any]:
        return {key: child.to_literal() for key, child in self._children.items()}

    def __eq__(self, other):
        if isinstance(other, MappingNode):
            return list(self._children.items()) == list(other._children.items())
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"MappingNode({self.to_literal()!r})"


class SequenceNode(ConfigNode):
    """Ordered, index-addressable list of nodes. Writes never append."""

    kind = NodeKind.SEQUENCE

    __slots__ = ('_items',)

    def __init__(self, items: Optional[List[ConfigNode]] = None):
        self._items: List[ConfigNode] = []
        for item in items or []:
            if not isinstance(item, ConfigNode):
                raise TypeError(f"SequenceNode items must be ConfigNode, got {type(item).__name__}")
            self._items.append(item)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise PathIndexError(index, len(self._items))

    def at(self, index: int) -> ConfigNode:
        self._check_index(index)
        return self._items[index]

    def put(self, index: int, node: ConfigNode) -> None:
        """Overwrite the element at `index`."""
        if not isinstance(node, ConfigNode):
            raise TypeError(f"SequenceNode items must be ConfigNode, got {type(node).__name__}")
        self._check_index(index)
        self._items[index] = node

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ConfigNode]:
        return iter(self._items)

    def to_literal(self) -> List[Any]:
        return [item.to_literal() for item in self._items]

    def __eq__(self, other):
        if isinstance(other, SequenceNode):
            return self._items == other._items
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"SequenceNode({self.to_literal()!r})"


def to_node(value: Any) -> ConfigNode:
    """
    Convert a plain-Python literal into a configuration node.

    Mappings become MappingNode (keys coerced to str), lists and tuples
    become SequenceNode, existing nodes are returned unchanged and anything
    else is wrapped in a ScalarNode.
    """
    if isinstance(value, ConfigNode):
        return value
    if isinstance(value, Mapping):
        node = MappingNode()
        for key, child in value.items():
            node.put(str(key), to_node(child))
        return node
    if isinstance(value, (list, tuple)):
        return SequenceNode([to_node(item) for item in value])
    return ScalarNode(value)


def to_literal(node: Union[ConfigNode, Any]) -> Any:
    """Plain-Python view of a node; MISSING and non-nodes are returned as is."""
    if isinstance(node, ConfigNode):
        return node.to_literal()
    return node

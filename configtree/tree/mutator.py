"""
Write-side operations on configuration trees.

TreeMutator.set resolves the container that should receive a value, writes
it, and creates missing structure when the parent path does not exist. How
missing or scalar parents are handled depends on the WritePolicy:

- MERGE: the full path is rebuilt as a nested mapping chain and merged into
  the root, overwriting the top-level key of the first segment. Sibling keys
  previously stored under that key and not on the rebuilt path are lost.
- STRICT: same as MERGE, except that writing through a scalar raises
  InvalidArgumentError instead of rebuilding.
"""

from typing import Any, Dict

from configtree.core.enums import WritePolicy
from configtree.core.exceptions import InvalidArgumentError, PathIndexError
from configtree.logger import get_logger
from .node import MISSING, MappingNode, ScalarNode, SequenceNode, to_node
from .resolver import PathResolver, join_path, parse_index, split_path

logger = get_logger("configtree.mutator")


def prepare_for_set(keys: Any, value: Any, final_value: Any = MISSING) -> Any:
    """
    Build a nested mapping chain from a dotted key.

    >>> prepare_for_set("foo.bar.baz", "v")
    {'foo': {'bar': {'baz': 'v'}}}
    >>> prepare_for_set("foo", "bar", "baz")
    {'foo': {'bar': 'baz'}}

    Non-string `keys` are returned unchanged. Has no side effects.
    """
    if not isinstance(keys, str):
        return keys

    if final_value is not MISSING:
        return {keys: prepare_for_set(value, final_value)}

    segments = split_path(keys)
    if len(segments) == 1:
        return {keys: value}

    return prepare_for_set(segments[0], join_path(segments[1:]), value)


class TreeMutator:
    """Applies dot-path writes to a configuration tree."""

    @staticmethod
    def set(tree: MappingNode, path: str, value: Any,
            policy: WritePolicy = WritePolicy.STRICT) -> None:
        segments = split_path(path)
        key = segments[-1]
        relative_path = join_path(segments[:-1])

        if relative_path:
            element = PathResolver.get(tree, relative_path)
        else:
            element = tree

        if isinstance(element, MappingNode):
            element.put(key, to_node(value))
        elif isinstance(element, SequenceNode):
            TreeMutator._set_in_sequence(element, path, key, value)
        elif len(segments) == 1:
            tree.put(key, to_node(value))
        elif isinstance(element, ScalarNode) and policy is WritePolicy.STRICT:
            raise InvalidArgumentError(
                path, key, f"'{relative_path}' holds a scalar and can not contain keys"
            )
        else:
            TreeMutator._merge_at_root(tree, path, value)

    @staticmethod
    def _set_in_sequence(sequence: SequenceNode, path: str, key: str, value: Any) -> None:
        index = parse_index(key)
        if index is None:
            raise InvalidArgumentError(path, key, "Only integer keys may be used with sequences")
        try:
            sequence.put(index, to_node(value))
        except PathIndexError as e:
            raise PathIndexError(e.index, e.length, path) from None

    @staticmethod
    def _merge_at_root(tree: MappingNode, path: str, value: Any) -> None:
        formatted: Dict[str, Any] = prepare_for_set(path, value)
        for top_key in formatted:
            previous = tree.get(top_key)
            if previous is not MISSING:
                logger.debug("Merge write replaces top-level key", path=path, key=top_key)
        tree.update(to_node(formatted))

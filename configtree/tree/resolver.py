"""
Dot-path traversal of configuration trees.
"""

import re
from typing import Any, List, Optional, Union

from configtree.core.exceptions import PathIndexError
from .node import MISSING, ConfigNode, MappingNode, SequenceNode

PATH_SEPARATOR = "."

_INDEX_PATTERN = re.compile(r"[0-9]+")


def split_path(path: str) -> List[str]:
    """Split a dot-path into its ordered segments."""
    return path.split(PATH_SEPARATOR)


def join_path(segments: List[str]) -> str:
    return PATH_SEPARATOR.join(segments)


def parse_index(segment: str) -> Optional[int]:
    """Return `segment` as a non-negative integer index, or None if it is not one."""
    if isinstance(segment, str) and _INDEX_PATTERN.fullmatch(segment):
        return int(segment)
    return None


class PathResolver:
    """
    Read-side traversal of a configuration tree.

    Traversal rules, applied segment by segment:

    - on a MappingNode the segment is a key; a missing key ends the walk
      and the result is MISSING
    - on a SequenceNode an integer segment selects an element; an index out
      of range raises PathIndexError
    - anything else (a scalar, or a sequence addressed by a non-integer
      segment) ends the walk and that node is returned as is, ignoring the
      remaining segments
    """

    @staticmethod
    def get(tree: ConfigNode, path: Optional[str] = None) -> Union[ConfigNode, Any]:
        if path is None:
            return tree

        node = tree
        for segment in split_path(path):
            if isinstance(node, MappingNode):
                node = node.get(segment)
                if node is MISSING:
                    return MISSING
                continue

            index = parse_index(segment)
            if isinstance(node, SequenceNode) and index is not None:
                try:
                    node = node.at(index)
                except PathIndexError as e:
                    raise PathIndexError(e.index, e.length, path) from None
                continue

            return node

        return node

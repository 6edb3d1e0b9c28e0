"""Position-preserving YAML/JSON loading.

The document is composed into a node graph first, so any value can be traced
back to the line and column it came from, then constructed into plain Python
data for schema validation.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import yaml
from yaml.constructor import ConstructorError

from apidom_validate.model.diagnostic import Position

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader variant matching how API descriptions are read.

    Mapping keys stay strings (``200:`` is the response code ``"200"``) and
    dates stay text, since both are strings in the JSON data model.
    """

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[Any, Any]:
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )
        self.flatten_mapping(node)
        mapping: dict[Any, Any] = {}
        for key_node, value_node in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found a non-scalar key",
                    key_node.start_mark,
                )
            key = self.construct_scalar(key_node)
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class LoadedDocument:
    """Constructed data plus the node graph it was built from."""

    data: Any
    root: yaml.Node | None

    def locate(self, path: Iterable[str | int]) -> Position:
        """Return the start of the deepest node along *path* present in the source.

        Path elements are mapping keys or sequence indexes, as in a JSON
        pointer. Elements that do not resolve stop the walk early.
        """
        node = self.root
        if node is None:
            return Position(line=0, character=0)
        for element in path:
            child = _child(node, element)
            if child is None:
                break
            node = child
        return Position(line=node.start_mark.line, character=node.start_mark.column)

    def locate_ref(self, ref: str) -> Position | None:
        """Return the position of the first ``$ref`` key pointing at *ref*.

        ``#/a/b`` and ``/a/b`` name the same local target. ``None`` when no
        such ``$ref`` is in the source.
        """
        target = _fragment(ref)
        for key_node, value_node in _ref_entries(self.root):
            if value_node.value == ref or _fragment(value_node.value) == target:
                return Position(line=key_node.start_mark.line, character=key_node.start_mark.column)
        return None


def _fragment(ref: str) -> str:
    return ref.split("#", 1)[-1]


def _ref_entries(
    node: yaml.Node | None, seen: set[int] | None = None
) -> Iterator[tuple[yaml.ScalarNode, yaml.ScalarNode]]:
    seen = set() if seen is None else seen
    if node is None or id(node) in seen:
        return
    seen.add(id(node))
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            if (
                isinstance(key_node, yaml.ScalarNode)
                and key_node.value == "$ref"
                and isinstance(value_node, yaml.ScalarNode)
            ):
                yield key_node, value_node
            else:
                yield from _ref_entries(value_node, seen)
    elif isinstance(node, yaml.SequenceNode):
        for item in node.value:
            yield from _ref_entries(item, seen)


def _child(node: yaml.Node, element: str | int) -> yaml.Node | None:
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode) and key_node.value == str(element):
                return value_node
        return None
    if isinstance(node, yaml.SequenceNode) and isinstance(element, int):
        if 0 <= element < len(node.value):
            return node.value[element]
    return None


def _compose(text: str) -> yaml.Node | None:
    loader = DocumentLoader(text)
    try:
        return loader.get_single_node()
    finally:
        loader.dispose()


def _load_json(text: str) -> LoadedDocument | None:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    # JSON may be indented with tabs, which YAML rejects outside scalars.
    # Raw tabs cannot occur inside JSON strings, so swapping each for a space
    # keeps every line and column.
    try:
        root = _compose(text.replace("\t", " "))
    except yaml.YAMLError:
        root = None
    return LoadedDocument(data=data, root=root)


def load_document(text: str) -> LoadedDocument:
    """Parse *text* as YAML, or as JSON when YAML rejects it.

    Raises :class:`yaml.YAMLError` when the text is neither.
    """
    loader = DocumentLoader(text)
    try:
        root = loader.get_single_node()
        data = loader.construct_document(root) if root is not None else None
    except yaml.YAMLError:
        loaded = _load_json(text)
        if loaded is None:
            raise
        return loaded
    finally:
        loader.dispose()
    return LoadedDocument(data=data, root=root)

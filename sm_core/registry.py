"""Flatten nested option trees into a stable, zero-based index space."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from sm_core.models import OptionDescriptor, OptionGroup, OptionNode, OptionRecord, OptionTree

logger = logging.getLogger(__name__)

_GROUP_KEYS = ("options", "children")
_CONTENT_KEYS = ("content", "label")


def _mapping_children(node: Mapping[str, Any]) -> Any:
    for key in _GROUP_KEYS:
        if key in node:
            return node[key]
    return None


def _leaf_fields(node: Any) -> tuple[Any, bool, Mapping[str, Any]]:
    """Return (content, is_disabled, props) for any leaf shape."""
    if isinstance(node, OptionDescriptor):
        return node.content, node.is_disabled, node.props
    if isinstance(node, str):
        return node, False, {}
    if isinstance(node, Mapping):
        content = None
        for key in _CONTENT_KEYS:
            if key in node:
                content = node[key]
                break
        disabled = bool(node.get("is_disabled", node.get("disabled", False)))
        props = {
            k: v
            for k, v in node.items()
            if k not in _CONTENT_KEYS and k not in ("is_disabled", "disabled")
        }
        return content, disabled, props
    # Anything else is an opaque renderable used directly as content.
    return node, False, {}


def _walk(nodes: Any, path: tuple[str, ...]) -> Iterator[tuple[Any, tuple[str, ...]]]:
    if nodes is None:
        return
    if isinstance(nodes, (str, Mapping, OptionDescriptor, OptionGroup)) or not isinstance(
        nodes, Iterable
    ):
        # A lone node, including a scalar, flattens to a single leaf.
        nodes = [nodes]
    for node in nodes:
        if isinstance(node, OptionGroup):
            yield from _walk(node.children, path + (node.label,))
            continue
        if isinstance(node, Mapping):
            children = _mapping_children(node)
            if children is not None:
                label = str(node.get("group", node.get("label", "")) or "")
                yield from _walk(children, path + (label,))
                continue
        yield node, path


def flatten(options_tree: OptionTree | OptionNode | None) -> list[OptionRecord]:
    """Flatten an option tree depth-first into consecutively indexed records.

    Groups are transparent: they never consume an index. Leaves without
    content keep their slot with an empty string so sibling indices do not
    shift.
    """
    records: list[OptionRecord] = []
    for node, path in _walk(options_tree, ()):
        content, disabled, props = _leaf_fields(node)
        if content is None:
            content = ""
        records.append(
            OptionRecord(
                index=len(records),
                content=content,
                is_disabled=disabled,
                group_path=path,
                props=dict(props),
            )
        )
    return records


class OptionRegistry:
    """Caches the flattened records of the last options collection seen.

    The cache is keyed by object identity: passing the same collection object
    again reuses the records, passing a different one rebuilds them.
    Collections mutated in place must be followed by :meth:`invalidate`.
    """

    def __init__(self) -> None:
        self._source: object | None = None
        self._records: list[OptionRecord] = []
        self._built = False

    def records(self, options_tree: OptionTree | None) -> list[OptionRecord]:
        if self._built and options_tree is self._source:
            return self._records
        self._records = flatten(options_tree)
        self._source = options_tree
        self._built = True
        logger.debug("Rebuilt option registry with %d records", len(self._records))
        return self._records

    def invalidate(self) -> None:
        self._source = None
        self._records = []
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

"""Load option trees from YAML (or JSON) files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sm_common.errors import OptionSourceError
from sm_core.models import OptionDescriptor, OptionGroup, OptionNode

logger = logging.getLogger(__name__)


class OptionEntry(BaseModel):
    """A leaf option as written in an options file."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    content: str | None = Field(default=None, alias="label")
    disabled: bool = False

    def to_descriptor(self) -> OptionDescriptor:
        return OptionDescriptor(
            content=self.content,
            is_disabled=self.disabled,
            props=dict(self.model_extra or {}),
        )


class GroupEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    group: str = ""
    options: list[Any] = Field(default_factory=list)


def _to_node(raw: Any, location: str) -> OptionNode:
    if isinstance(raw, str):
        return OptionDescriptor(content=raw)
    if raw is None:
        return OptionDescriptor(content=None)
    if not isinstance(raw, dict):
        raise OptionSourceError(
            "Option entries must be strings or mappings",
            context={"location": location, "type": type(raw).__name__},
        )
    try:
        if "options" in raw:
            group = GroupEntry.model_validate(raw)
            children = [
                _to_node(child, f"{location}.options[{idx}]")
                for idx, child in enumerate(group.options)
            ]
            return OptionGroup(label=group.group, children=tuple(children))
        return OptionEntry.model_validate(raw).to_descriptor()
    except ValidationError as exc:
        raise OptionSourceError(
            "Invalid option entry",
            context={"location": location, "errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc


def parse_options(data: Any) -> list[OptionNode]:
    """Convert already-parsed YAML data into an option tree."""
    if isinstance(data, dict):
        data = data.get("options")
    if data is None:
        return []
    if not isinstance(data, list):
        raise OptionSourceError(
            "Options must be a list or a mapping with an 'options' list",
            context={"type": type(data).__name__},
        )
    return [_to_node(item, f"options[{idx}]") for idx, item in enumerate(data)]


def load_options(path: Path) -> list[OptionNode]:
    """Read ``path`` and return its option tree."""
    if not path.exists():
        raise OptionSourceError("Options file not found", context={"path": path})
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OptionSourceError(
            "Options file could not be read", context={"path": path}, cause=exc
        ) from exc
    try:
        data = yaml.safe_load(raw) or []
    except yaml.YAMLError as exc:
        raise OptionSourceError(
            "Options file is not valid YAML", context={"path": path}, cause=exc
        ) from exc
    try:
        tree = parse_options(data)
    except OptionSourceError as exc:
        exc.context.setdefault("path", str(path))
        raise
    logger.debug("Loaded %d top-level option nodes from %s", len(tree), path)
    return tree

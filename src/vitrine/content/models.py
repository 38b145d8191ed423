"""Canonical content records read by every resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class EntityKind(str, Enum):
    NODE = "node"
    MEDIA = "media"
    TAXONOMY_TERM = "taxonomy_term"
    PARAGRAPH = "paragraph"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class EntityRef:
    """Pointer to an entity held by the content store."""

    kind: EntityKind
    id: str


@dataclass(frozen=True, slots=True)
class FieldItem:
    """A single item of a (possibly multi-valued) field."""

    value: str | None = None
    format: str | None = None
    target: EntityRef | None = None
    alt: str | None = None
    title: str | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class ContentEntity:
    """Read-only view of a content record and its declared fields."""

    kind: EntityKind
    id: str
    bundle: str = ""
    label: str = ""
    langcode: str = "und"
    fields: Mapping[str, tuple[FieldItem, ...]] = field(default_factory=dict)
    translations: Mapping[str, "ContentEntity"] = field(default_factory=dict)
    file_uri: str = ""

    def is_kind(self, kind: EntityKind) -> bool:
        return self.kind is kind

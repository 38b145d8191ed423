"""Entity store contract and an in-memory implementation backed by JSON fixtures."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from vitrine.content.models import ContentEntity, EntityKind, EntityRef, FieldItem


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EntityNotFoundError(Exception):
    """Raised when the store cannot resolve an entity reference at all."""

    kind: EntityKind
    entity_id: str

    def __str__(self) -> str:
        return f"Entity not found (kind={self.kind.value}, id={self.entity_id})"


@runtime_checkable
class EntityStore(Protocol):
    """Read access to the content platform's entities."""

    def load(self, kind: EntityKind, entity_id: str) -> ContentEntity:
        """Return the entity or raise when it does not exist."""

    def get_field(self, entity: ContentEntity, name: str) -> tuple[FieldItem, ...]:
        """Return the items of a field, empty when absent."""

    def has_field(self, entity: ContentEntity, name: str) -> bool:
        """Return True when the entity declares the field."""

    def get_translation(self, entity: ContentEntity, locale: str) -> ContentEntity | None:
        """Return the locale variant of an entity, if any."""

    def has_translation(self, entity: ContentEntity, locale: str) -> bool:
        """Return True when a locale variant exists."""


class InMemoryEntityStore:
    """Dictionary-backed store used by the CLI and tests."""

    def __init__(self, entities: list[ContentEntity] | None = None) -> None:
        self._entities: dict[tuple[EntityKind, str], ContentEntity] = {}
        for entity in entities or []:
            self.add(entity)

    def add(self, entity: ContentEntity) -> None:
        if not entity.id:
            raise ValueError("Entity id cannot be empty")
        self._entities[(entity.kind, entity.id)] = entity

    def __len__(self) -> int:
        return len(self._entities)

    def load(self, kind: EntityKind, entity_id: str) -> ContentEntity:
        try:
            return self._entities[(kind, str(entity_id))]
        except KeyError:
            raise EntityNotFoundError(kind, str(entity_id)) from None

    def get_field(self, entity: ContentEntity, name: str) -> tuple[FieldItem, ...]:
        return tuple(entity.fields.get(name, ()))

    def has_field(self, entity: ContentEntity, name: str) -> bool:
        return name in entity.fields

    def get_translation(self, entity: ContentEntity, locale: str) -> ContentEntity | None:
        return entity.translations.get(locale)

    def has_translation(self, entity: ContentEntity, locale: str) -> bool:
        return locale in entity.translations

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "InMemoryEntityStore":
        raw_entities = payload.get("entities")
        if not isinstance(raw_entities, list):
            raise ValueError("Invalid store payload: 'entities' must be a list")

        store = cls()
        for raw in raw_entities:
            if not isinstance(raw, Mapping):
                logger.warning("Skipping non-object entity entry: %r", raw)
                continue
            entity = _parse_entity(raw)
            if entity is not None:
                store.add(entity)
        return store

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryEntityStore":
        source = Path(path)
        payload = json.loads(source.read_text(encoding="utf-8"))
        if not isinstance(payload, Mapping):
            raise ValueError(f"Invalid store payload in {source}: expected an object")
        return cls.from_mapping(payload)


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def _parse_kind(raw: object) -> EntityKind | None:
    try:
        return EntityKind(raw)
    except ValueError:
        logger.warning("Skipping unknown entity kind: %r", raw)
        return None


def _parse_ref(raw: object) -> EntityRef | None:
    if not isinstance(raw, Mapping):
        return None
    kind_raw = raw.get("kind")
    entity_id = raw.get("id")
    if kind_raw is None or entity_id is None:
        return None
    kind = _parse_kind(kind_raw)
    if kind is None:
        return None
    return EntityRef(kind=kind, id=str(entity_id))


def _parse_item(raw: object) -> FieldItem:
    if not isinstance(raw, Mapping):
        return FieldItem(value=_optional_str(raw))
    return FieldItem(
        value=_optional_str(raw.get("value")),
        format=_optional_str(raw.get("format")),
        target=_parse_ref(raw.get("target")),
        alt=_optional_str(raw.get("alt")),
        title=_optional_str(raw.get("title")),
        uri=_optional_str(raw.get("uri")),
    )


def _parse_fields(raw_fields: object) -> dict[str, tuple[FieldItem, ...]]:
    if not isinstance(raw_fields, Mapping):
        return {}
    fields: dict[str, tuple[FieldItem, ...]] = {}
    for name, raw_value in raw_fields.items():
        if raw_value is None:
            fields[str(name)] = ()
        elif isinstance(raw_value, list):
            fields[str(name)] = tuple(_parse_item(item) for item in raw_value)
        else:
            fields[str(name)] = (_parse_item(raw_value),)
    return fields


def _label_field(kind: EntityKind) -> str:
    return "name" if kind is EntityKind.TAXONOMY_TERM else "title"


def _with_label_field(
    kind: EntityKind,
    label: str,
    fields: dict[str, tuple[FieldItem, ...]],
) -> tuple[str, dict[str, tuple[FieldItem, ...]]]:
    """Keep the entity label and its label field in sync."""

    label_field = _label_field(kind)
    if label and label_field not in fields:
        fields[label_field] = (FieldItem(value=label),)
    elif not label:
        items = fields.get(label_field, ())
        if items and items[0].value:
            label = items[0].value
    return label, fields


def _parse_entity(raw: Mapping[str, Any]) -> ContentEntity | None:
    kind = _parse_kind(raw.get("kind", EntityKind.NODE.value))
    if kind is None:
        return None
    entity_id = str(raw.get("id", "")).strip()
    bundle = str(raw.get("bundle", "") or "")
    langcode = str(raw.get("langcode", "und") or "und")
    label, fields = _with_label_field(kind, str(raw.get("label", "") or ""), _parse_fields(raw.get("fields")))
    file_uri = str(raw.get("file_uri", "") or "")

    translations: dict[str, ContentEntity] = {}
    raw_translations = raw.get("translations")
    if isinstance(raw_translations, Mapping):
        for locale, overlay in raw_translations.items():
            if not isinstance(overlay, Mapping):
                logger.warning("Skipping invalid translation %s for %s:%s", locale, kind.value, entity_id)
                continue
            merged = dict(fields)
            merged.update(_parse_fields(overlay.get("fields")))
            translated_label = str(overlay.get("label", "") or "")
            if translated_label:
                merged[_label_field(kind)] = (FieldItem(value=translated_label),)
            else:
                translated_label, merged = _with_label_field(kind, "", merged)
            translations[str(locale)] = ContentEntity(
                kind=kind,
                id=entity_id,
                bundle=bundle,
                label=translated_label or label,
                langcode=str(locale),
                fields=merged,
                file_uri=str(overlay.get("file_uri", "") or file_uri),
            )

    return ContentEntity(
        kind=kind,
        id=entity_id,
        bundle=bundle,
        label=label,
        langcode=langcode,
        fields=fields,
        translations=translations,
        file_uri=file_uri,
    )

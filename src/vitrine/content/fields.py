"""Entity-type-agnostic field reads through the content store."""

from __future__ import annotations

from vitrine.content.models import ContentEntity, FieldItem
from vitrine.content.store import EntityStore
from vitrine.content.text import process_text


class FieldReader:
    """Safe reads of named fields; unknown fields report absent."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    @property
    def store(self) -> EntityStore:
        return self._store

    def field_exists(self, entity: ContentEntity, name: str) -> bool:
        return self._store.has_field(entity, name)

    def read_field(self, entity: ContentEntity, name: str) -> tuple[FieldItem, ...]:
        if not self.field_exists(entity, name):
            return ()
        return self._store.get_field(entity, name)

    def first_item(self, entity: ContentEntity, name: str) -> FieldItem | None:
        items = self.read_field(entity, name)
        return items[0] if items else None

    def value(self, entity: ContentEntity, name: str) -> str | None:
        """First item's raw value, or None when empty."""

        item = self.first_item(entity, name)
        if item is None or not item.value:
            return None
        return item.value

    def processed(self, entity: ContentEntity, name: str) -> str | None:
        """First item's processed value when its raw value is non-empty."""

        item = self.first_item(entity, name)
        if item is None or not item.value:
            return None
        return process_text(item.value, item.format)

    def has_reference(self, entity: ContentEntity, name: str) -> bool:
        item = self.first_item(entity, name)
        return item is not None and item.target is not None

"""Content records, store access and locale overlays."""

from .fields import FieldReader
from .models import ContentEntity, EntityKind, EntityRef, FieldItem
from .store import EntityNotFoundError, EntityStore, InMemoryEntityStore
from .translation import FixedLocaleProvider, LocaleProvider, TranslationOverlay

__all__ = [
    "ContentEntity",
    "EntityKind",
    "EntityNotFoundError",
    "EntityRef",
    "EntityStore",
    "FieldItem",
    "FieldReader",
    "FixedLocaleProvider",
    "InMemoryEntityStore",
    "LocaleProvider",
    "TranslationOverlay",
]

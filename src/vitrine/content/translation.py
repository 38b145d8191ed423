"""Locale overlay for referenced entities."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from vitrine.content.fields import FieldReader
from vitrine.content.models import ContentEntity


@runtime_checkable
class LocaleProvider(Protocol):
    def current_locale(self) -> str:
        """Return the locale of the current request."""


class FixedLocaleProvider:
    """Locale provider pinned to a single locale."""

    def __init__(self, locale: str) -> None:
        if not locale:
            raise ValueError("Locale cannot be empty")
        self._locale = locale

    def current_locale(self) -> str:
        return self._locale


class TranslationOverlay:
    """Resolve references and swap in their locale-specific variants."""

    def __init__(self, fields: FieldReader, locale_provider: LocaleProvider) -> None:
        self._fields = fields
        self._locale_provider = locale_provider

    def translate(self, entity: ContentEntity, locale: str | None = None) -> ContentEntity:
        store = self._fields.store
        langcode = locale or self._locale_provider.current_locale()
        if store.has_translation(entity, langcode):
            translated = store.get_translation(entity, langcode)
            if translated is not None:
                return translated
        return entity

    def resolve_references(
        self,
        entity: ContentEntity,
        field_name: str,
        locale: str | None = None,
    ) -> list[ContentEntity]:
        """Referenced entities in field order, translated where possible."""

        langcode = locale or self._locale_provider.current_locale()
        store = self._fields.store
        resolved: list[ContentEntity] = []
        for item in self._fields.read_field(entity, field_name):
            if item.target is None:
                continue
            referenced = store.load(item.target.kind, item.target.id)
            resolved.append(self.translate(referenced, langcode))
        return resolved

    def resolve_single_reference(
        self,
        entity: ContentEntity,
        field_name: str,
        locale: str | None = None,
    ) -> ContentEntity | None:
        resolved = self.resolve_references(entity, field_name, locale)
        return resolved[0] if resolved else None

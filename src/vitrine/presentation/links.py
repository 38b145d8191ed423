"""Link descriptors and the URL builder contract."""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Protocol, runtime_checkable
from urllib.parse import urlsplit

from vitrine.content.models import EntityKind


EXTERNAL_SCHEMES = frozenset({"http", "https", "mailto", "tel", "ftp", "ftps"})

_CANONICAL_PATHS = {
    EntityKind.NODE: "/node/{id}",
    EntityKind.TAXONOMY_TERM: "/taxonomy/term/{id}",
    EntityKind.MEDIA: "/media/{id}",
    EntityKind.PARAGRAPH: "/paragraph/{id}",
    EntityKind.FILE: "/file/{id}",
}

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LinkDescriptor:
    text: str
    href: str
    external: bool = False
    title: str = ""

    @property
    def attributes(self) -> dict[str, str]:
        """Presentation hints; external links open in a new tab without follow."""

        attributes = {"title": self.title}
        if self.external:
            attributes["target"] = "_blank"
            attributes["rel"] = "nofollow"
        return attributes

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "href": self.href,
            "external": self.external,
            "title": self.title,
            "attributes": self.attributes,
        }


@runtime_checkable
class UrlBuilder(Protocol):
    def from_route(self, kind: EntityKind, entity_id: str, title_hint: str) -> LinkDescriptor:
        """Canonical link to an entity."""

    def from_uri(self, uri: str, title_hint: str, from_user: bool = False) -> LinkDescriptor | None:
        """Link for a stored or user-entered uri; None when it cannot be routed."""


def link_from_text_and_url(text: str, url: LinkDescriptor) -> LinkDescriptor:
    """Relabel a link; the title attribute follows the text."""

    return replace(url, text=text, title=text)


class PathUrlBuilder:
    """Build site-relative canonical paths under an optional base path."""

    def __init__(self, base_path: str = "") -> None:
        self._base_path = base_path.rstrip("/")

    def _path(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return self._base_path + path

    def from_route(self, kind: EntityKind, entity_id: str, title_hint: str) -> LinkDescriptor:
        pattern = _CANONICAL_PATHS[EntityKind(kind)]
        return LinkDescriptor(
            text=title_hint,
            href=self._path(pattern.format(id=entity_id)),
            external=False,
            title=title_hint,
        )

    def from_uri(self, uri: str, title_hint: str, from_user: bool = False) -> LinkDescriptor | None:
        cleaned = uri.strip()
        if not cleaned:
            return None

        if from_user:
            if not cleaned.startswith(("/", "?", "#")) or cleaned.startswith("//"):
                logger.debug("Rejecting user input that is not a local path: %s", cleaned)
                return None
            return LinkDescriptor(text=title_hint, href=self._path(cleaned), external=False, title=title_hint)

        scheme = urlsplit(cleaned).scheme.lower()
        if scheme in EXTERNAL_SCHEMES:
            return LinkDescriptor(text=title_hint, href=cleaned, external=True, title=title_hint)
        if scheme in ("internal", "base"):
            return LinkDescriptor(
                text=title_hint,
                href=self._path(cleaned.split(":", 1)[1]),
                external=False,
                title=title_hint,
            )
        if scheme == "entity":
            kind_raw, _, entity_id = cleaned.split(":", 1)[1].partition("/")
            try:
                kind = EntityKind(kind_raw)
            except ValueError:
                logger.debug("Unknown entity kind in uri: %s", cleaned)
                return None
            if not entity_id:
                return None
            return self.from_route(kind, entity_id, title_hint)

        logger.debug("Cannot build a link for uri without a supported scheme: %s", cleaned)
        return None

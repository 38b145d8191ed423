from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from vitrine.content.store import InMemoryEntityStore
from vitrine.content.translation import FixedLocaleProvider
from vitrine.presentation.assembler import ResourceAssembler
from vitrine.presentation.links import PathUrlBuilder


def _ref(kind: str, entity_id: str) -> dict[str, str]:
    return {"kind": kind, "id": entity_id}


def catalog_payload() -> dict[str, Any]:
    return {
        "entities": [
            {"kind": "file", "id": "10", "file_uri": "public://listing.jpg"},
            {"kind": "file", "id": "11", "file_uri": "public://emphasis.jpg"},
            {"kind": "file", "id": "12", "file_uri": "public://gallery-a.jpg"},
            {"kind": "file", "id": "13", "file_uri": "public://gallery-b.jpg"},
            {"kind": "file", "id": "14", "file_uri": "public://gallery-c.jpg"},
            {"kind": "file", "id": "15", "file_uri": ""},
            {
                "kind": "media",
                "id": "20",
                "bundle": "image",
                "label": "Emphasis media",
                "fields": {
                    "image": {"target": _ref("file", "11"), "alt": "Emphasis alt", "title": "Emphasis title"},
                    "field_description": {"value": "Shot at dawn", "format": "plain_text"},
                },
                "translations": {
                    "fr": {"fields": {"image": {"target": _ref("file", "11"), "alt": "Texte alternatif"}}},
                },
            },
            {"kind": "media", "id": "21", "bundle": "image", "fields": {"image": {"target": _ref("file", "12")}}},
            {
                "kind": "media",
                "id": "22",
                "bundle": "image",
                "fields": {"image": {"target": _ref("file", "13"), "title": "Second"}},
            },
            {
                "kind": "media",
                "id": "23",
                "bundle": "image",
                "fields": {"image": {"target": _ref("file", "14"), "alt": "Third"}},
            },
            {
                "kind": "paragraph",
                "id": "30",
                "bundle": "main_image",
                "fields": {"field_image": {"target": _ref("media", "20")}},
            },
            {
                "kind": "paragraph",
                "id": "31",
                "bundle": "photo_gallery",
                "fields": {
                    "field_gallery": [
                        {"target": _ref("media", "21")},
                        {"target": _ref("media", "22")},
                        {"target": _ref("media", "23")},
                    ]
                },
            },
            {
                "kind": "paragraph",
                "id": "32",
                "bundle": "main_video",
                "fields": {"field_video": "https://vimeo.com/12345"},
            },
            {"kind": "paragraph", "id": "33", "bundle": "quote", "fields": {"field_quote": "Less is more"}},
            {"kind": "paragraph", "id": "34", "bundle": "main_video", "fields": {"field_video": None}},
            {
                "kind": "paragraph",
                "id": "35",
                "bundle": "main_video",
                "fields": {"field_video": "https://example.com/not-a-video"},
            },
            {
                "kind": "taxonomy_term",
                "id": "40",
                "label": "News",
                "translations": {"fr": {"label": "Actualités"}},
            },
            {"kind": "taxonomy_term", "id": "41", "label": "Python"},
            {"kind": "taxonomy_term", "id": "42", "label": ""},
            {"kind": "taxonomy_term", "id": "43", "label": "Design"},
            {
                "kind": "node",
                "id": "1",
                "bundle": "article",
                "label": "Listing and main image",
                "fields": {
                    "field_headline": "Headline wins",
                    "field_text": {"value": "<p>Teaser</p><script>x()</script>", "format": "basic_html"},
                    "body": {"value": "Body text", "format": "plain_text"},
                    "field_image": {"target": _ref("file", "10"), "alt": "Listing alt", "title": "Listing title"},
                    "field_main_emphasis": {"target": _ref("paragraph", "30")},
                    "field_category": {"target": _ref("taxonomy_term", "40")},
                    "field_tags": [
                        {"target": _ref("taxonomy_term", "41")},
                        {"target": _ref("taxonomy_term", "42")},
                        {"target": _ref("taxonomy_term", "43")},
                    ],
                },
            },
            {
                "kind": "node",
                "id": "2",
                "bundle": "article",
                "label": "Gallery story",
                "fields": {
                    "field_headline": None,
                    "body": {"value": "Gallery body", "format": "plain_text"},
                    "field_image": None,
                    "field_main_emphasis": {"target": _ref("paragraph", "31")},
                    "field_tags": [],
                },
            },
            {
                "kind": "node",
                "id": "3",
                "bundle": "article",
                "label": "Video story",
                "fields": {"field_main_emphasis": {"target": _ref("paragraph", "32")}},
            },
            {
                "kind": "node",
                "id": "4",
                "bundle": "article",
                "label": "Emphasis only",
                "fields": {"field_image": None, "field_main_emphasis": {"target": _ref("paragraph", "30")}},
            },
            {
                "kind": "node",
                "id": "5",
                "bundle": "article",
                "label": "Quote story",
                "fields": {"field_main_emphasis": {"target": _ref("paragraph", "33")}},
            },
            {
                "kind": "node",
                "id": "6",
                "bundle": "author",
                "label": "Ada Lovelace",
                "fields": {
                    "body": {"value": "Writes things", "format": "plain_text"},
                    "field_image": None,
                    "field_profile_image": {"target": _ref("media", "20")},
                },
            },
            {
                "kind": "node",
                "id": "7",
                "bundle": "article",
                "label": "Broken image",
                "fields": {"field_image": [{"target": _ref("file", "15")}]},
            },
            {
                "kind": "node",
                "id": "8",
                "bundle": "article",
                "label": "Two listing images",
                "fields": {
                    "field_image": [
                        {"target": _ref("file", "10"), "alt": "One"},
                        {"target": _ref("file", "12")},
                    ]
                },
            },
        ]
    }


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore.from_mapping(catalog_payload())


@pytest.fixture
def assembler(store: InMemoryEntityStore) -> ResourceAssembler:
    return ResourceAssembler(store, PathUrlBuilder(), FixedLocaleProvider("en"))


@pytest.fixture
def store_file(tmp_path: Path) -> Path:
    path = tmp_path / "store.json"
    path.write_text(json.dumps(catalog_payload(), ensure_ascii=False), encoding="utf-8")
    return path

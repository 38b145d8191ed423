from __future__ import annotations

from vitrine.content.models import EntityKind
from vitrine.presentation.links import LinkDescriptor, PathUrlBuilder, UrlBuilder, link_from_text_and_url


def test_path_url_builder_matches_protocol() -> None:
    assert isinstance(PathUrlBuilder(), UrlBuilder)


def test_from_route_builds_canonical_paths() -> None:
    builder = PathUrlBuilder("/fr/")

    node_link = builder.from_route(EntityKind.NODE, "5", "Story")
    term_link = builder.from_route(EntityKind.TAXONOMY_TERM, "7", "News")

    assert node_link == LinkDescriptor(text="Story", href="/fr/node/5", external=False, title="Story")
    assert term_link.href == "/fr/taxonomy/term/7"
    assert node_link.attributes == {"title": "Story"}


def test_external_uri_gets_new_tab_hints() -> None:
    link = PathUrlBuilder().from_uri("https://example.com/page", "Example")

    assert link is not None
    assert link.external is True
    assert link.href == "https://example.com/page"
    assert link.attributes == {"title": "Example", "target": "_blank", "rel": "nofollow"}


def test_internal_and_entity_uris_stay_internal() -> None:
    builder = PathUrlBuilder()

    internal = builder.from_uri("internal:/about", "About")
    entity = builder.from_uri("entity:node/12", "Twelve")

    assert internal is not None and (internal.href, internal.external) == ("/about", False)
    assert entity is not None and (entity.href, entity.external) == ("/node/12", False)


def test_unroutable_uris_yield_nothing() -> None:
    builder = PathUrlBuilder()

    assert builder.from_uri("", "Empty") is None
    assert builder.from_uri("entity:widget/1", "Widget") is None
    assert builder.from_uri("entity:node/", "Missing id") is None
    assert builder.from_uri("no-scheme", "Bare") is None


def test_user_input_must_be_local() -> None:
    builder = PathUrlBuilder()

    local = builder.from_uri("/contact?x=1", "Contact", from_user=True)

    assert local is not None and local.href == "/contact?x=1"
    assert builder.from_uri("https://example.com", "Ext", from_user=True) is None
    assert builder.from_uri("//evil.example/x", "Off-site", from_user=True) is None


def test_link_from_text_and_url_uses_text_as_title() -> None:
    url = PathUrlBuilder().from_route(EntityKind.TAXONOMY_TERM, "7", "hint")

    link = link_from_text_and_url("News", url)

    assert (link.text, link.title, link.href) == ("News", "News", "/taxonomy/term/7")
    assert link.to_dict()["attributes"] == {"title": "News"}

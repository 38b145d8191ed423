"""Assemble the render-ready presentation model of a content resource."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable

from vitrine.content.fields import FieldReader
from vitrine.content.models import ContentEntity, EntityKind
from vitrine.content.store import EntityStore
from vitrine.content.translation import LocaleProvider, TranslationOverlay
from vitrine.media.images import ImageBuilder, ImageDescriptor, ImageSet
from vitrine.media.video import VideoDescriptor, VideoOptions
from vitrine.presentation.emphasis import (
    DEFAULT_EMPHASIS_FIELD,
    EmphasisResolver,
    GalleryEmphasis,
    MainImageEmphasis,
    VideoEmphasis,
)
from vitrine.presentation.links import LinkDescriptor, UrlBuilder, link_from_text_and_url


LISTING_IMAGE_FIELD = "field_image"
PROFILE_IMAGE_FIELD = "field_profile_image"
CATEGORY_FIELD = "field_category"
TAGS_FIELD = "field_tags"
DEFAULT_AUTHOR_IMAGE_STYLE = "content_listing_highlight_list_image"

logger = logging.getLogger(__name__)

TextAccessor = Callable[[ContentEntity], str | None]


@dataclass(frozen=True, slots=True)
class PresentationOptions:
    image_style: str | None = None
    include_image: bool = True
    video: VideoOptions = field(default_factory=VideoOptions)
    include_description: bool = True


@dataclass(frozen=True, slots=True)
class ResourcePresentation:
    title: str
    link: LinkDescriptor
    description: str | None = None
    image: ImageDescriptor | None = None
    video: VideoDescriptor | None = None
    gallery_images: tuple[ImageDescriptor, ...] | None = None
    main_image: ImageSet | None = None
    category: LinkDescriptor | None = None
    tags: tuple[LinkDescriptor, ...] = ()

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "title": self.title,
            "link": self.link.to_dict(),
        }
        if self.description is not None:
            payload["description"] = self.description
        if self.image is not None:
            payload["image"] = self.image.to_dict()
        if self.video is not None:
            payload["video"] = self.video.to_dict()
        if self.gallery_images is not None:
            payload["gallery_images"] = [image.to_dict() for image in self.gallery_images]
        if self.main_image is not None:
            payload["main_image"] = self.main_image.to_dict()
        if self.category is not None:
            payload["category"] = self.category.to_dict()
        payload["tags"] = [tag.to_dict() for tag in self.tags]
        return payload


@dataclass(frozen=True, slots=True)
class AuthorPresentation:
    link: LinkDescriptor
    name: str | None = None
    description: str | None = None
    image: ImageDescriptor | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"link": self.link.to_dict()}
        if self.name is not None:
            payload["name"] = self.name
        if self.description is not None:
            payload["description"] = self.description
        if self.image is not None:
            payload["image"] = self.image.to_dict()
        return payload


def first_non_empty(entity: ContentEntity, accessors: tuple[TextAccessor, ...]) -> str | None:
    """Evaluate accessors in order and return the first non-empty result."""

    for accessor in accessors:
        value = accessor(entity)
        if value:
            return value
    return None


class ResourceAssembler:
    """Combine title, description, link, images, emphasis and taxonomy links."""

    def __init__(
        self,
        store: EntityStore,
        url_builder: UrlBuilder,
        locale_provider: LocaleProvider,
        *,
        emphasis_field: str = DEFAULT_EMPHASIS_FIELD,
    ) -> None:
        self._fields = FieldReader(store)
        self._overlay = TranslationOverlay(self._fields, locale_provider)
        self._images = ImageBuilder(self._fields, self._overlay)
        self._emphasis = EmphasisResolver(self._fields, self._images)
        self._urls = url_builder
        self._emphasis_field = emphasis_field

        self.title_chain: tuple[TextAccessor, ...] = (
            lambda entity: self._fields.value(entity, "field_headline"),
            lambda entity: self._fields.value(entity, "title"),
        )
        self.description_fields: tuple[str, ...] = ("field_text", "body")

    def resolve_title(self, resource: ContentEntity) -> str:
        return first_non_empty(resource, self.title_chain) or ""

    def resolve_description(self, resource: ContentEntity) -> str | None:
        """Processed value of the first field whose raw value is non-empty."""

        for name in self.description_fields:
            if self._fields.value(resource, name):
                return self._fields.processed(resource, name)
        return None

    def assemble(
        self,
        resource: ContentEntity,
        options: PresentationOptions | None = None,
    ) -> ResourcePresentation:
        opts = options or PresentationOptions()

        title = self.resolve_title(resource)
        description = self.resolve_description(resource) if opts.include_description else None
        link = self._urls.from_route(EntityKind.NODE, resource.id, title)

        listing = self._images.build(resource, LISTING_IMAGE_FIELD, opts.image_style, title)
        image = listing.first if opts.include_image else None
        video: VideoDescriptor | None = None
        gallery_images: tuple[ImageDescriptor, ...] | None = None
        main_image: ImageSet | None = None

        emphasis = self._emphasis.resolve(resource, self._emphasis_field, opts.image_style, opts.video)
        if isinstance(emphasis, VideoEmphasis):
            video = emphasis.video
        elif isinstance(emphasis, GalleryEmphasis):
            gallery_images = emphasis.images.images
            if opts.include_image and image is None:
                image = emphasis.images.first
        elif isinstance(emphasis, MainImageEmphasis):
            chosen = listing if listing else emphasis.images
            main_image = chosen if chosen else None
            if opts.include_image and image is None:
                image = chosen.first

        return ResourcePresentation(
            title=title,
            description=description,
            link=link,
            image=image,
            video=video,
            gallery_images=gallery_images,
            main_image=main_image,
            category=self._category(resource),
            tags=self._tags(resource),
        )

    def _term_link(self, term: ContentEntity | None) -> LinkDescriptor | None:
        if term is None:
            return None
        name = self._fields.value(term, "name") or ""
        term_id = term.id
        if not name or not term_id:
            return None
        return link_from_text_and_url(name, self._urls.from_route(EntityKind.TAXONOMY_TERM, term_id, name))

    def _category(self, resource: ContentEntity) -> LinkDescriptor | None:
        if not self._fields.has_reference(resource, CATEGORY_FIELD):
            return None
        category = self._term_link(self._overlay.resolve_single_reference(resource, CATEGORY_FIELD))
        if category is None:
            logger.debug("Dropping partially resolved category on node:%s", resource.id)
        return category

    def _tags(self, resource: ContentEntity) -> tuple[LinkDescriptor, ...]:
        tags: list[LinkDescriptor] = []
        for term in self._overlay.resolve_references(resource, TAGS_FIELD):
            tag = self._term_link(term)
            if tag is None:
                logger.debug("Skipping tag %s:%s without name or id", term.kind.value, term.id)
                continue
            tags.append(tag)
        return tuple(tags)

    def assemble_author(
        self,
        author: ContentEntity,
        image_style: str | None = DEFAULT_AUTHOR_IMAGE_STYLE,
    ) -> AuthorPresentation:
        """Name, biography, listing (else profile) image and link of an author node."""

        name = self._fields.value(author, "title")
        label = name or ""
        description = self._fields.processed(author, "body")

        image = self._images.build(author, LISTING_IMAGE_FIELD, image_style, label)
        if not image:
            image = self._images.build(author, PROFILE_IMAGE_FIELD, image_style, label)

        return AuthorPresentation(
            name=name,
            description=description,
            image=image.first,
            link=self._urls.from_route(EntityKind.NODE, author.id, label),
        )

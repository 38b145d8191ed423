"""Responsive image descriptors built from image and media reference fields."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from vitrine.content.fields import FieldReader
from vitrine.content.models import ContentEntity, EntityKind, FieldItem
from vitrine.content.translation import TranslationOverlay


MEDIA_IMAGE_FIELD = "image"
MEDIA_DESCRIPTION_FIELD = "field_description"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImageAttributes:
    alt: str
    title: str


@dataclass(frozen=True, slots=True)
class ImageDescriptor:
    """Render-ready image: file uri, responsive style id and text attributes."""

    uri: str
    style: str | None
    alt: str
    title: str

    def to_dict(self) -> dict[str, str | None]:
        return {
            "uri": self.uri,
            "style": self.style,
            "alt": self.alt,
            "title": self.title,
        }


@dataclass(frozen=True, slots=True)
class ImageSet:
    """Ordered images produced from one field; may be empty."""

    images: tuple[ImageDescriptor, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.images

    @property
    def is_single(self) -> bool:
        return len(self.images) == 1

    @property
    def first(self) -> ImageDescriptor | None:
        return self.images[0] if self.images else None

    def __bool__(self) -> bool:
        return bool(self.images)

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self):
        return iter(self.images)

    def legacy(self) -> ImageDescriptor | list[ImageDescriptor]:
        """Scalar for one image, list for several, empty list for none."""

        if self.is_single:
            return self.images[0]
        return list(self.images)

    def to_dict(self) -> dict[str, str | None] | list[dict[str, str | None]]:
        shaped = self.legacy()
        if isinstance(shaped, ImageDescriptor):
            return shaped.to_dict()
        return [image.to_dict() for image in shaped]


def resolve_image_attributes(alt: str | None, title: str | None, fallback_label: str) -> ImageAttributes:
    """Pick alt/title text: explicit alt, then explicit title, then the fallback label."""

    if alt:
        if title:
            return ImageAttributes(alt=alt, title=title)
        return ImageAttributes(alt=alt, title=alt)
    if title:
        return ImageAttributes(alt=title, title=title)
    return ImageAttributes(alt=fallback_label, title=fallback_label)


class ImageBuilder:
    """Compose image descriptors from a field holding zero or more image references."""

    def __init__(self, fields: FieldReader, overlay: TranslationOverlay) -> None:
        self._fields = fields
        self._overlay = overlay

    def _media_image_item(self, entity: ContentEntity) -> FieldItem | None:
        if not entity.is_kind(EntityKind.MEDIA) or not self._fields.field_exists(entity, MEDIA_IMAGE_FIELD):
            return None
        return self._fields.first_item(entity, MEDIA_IMAGE_FIELD)

    def fetch_file_uri(self, entity: ContentEntity) -> str:
        """File uri of an image file, or of the file behind a media image."""

        item = self._media_image_item(entity)
        if item is not None and item.target is not None:
            image_file = self._fields.store.load(item.target.kind, item.target.id)
            return image_file.file_uri
        return entity.file_uri

    def build(
        self,
        entity: ContentEntity,
        field_name: str,
        style: str | None,
        fallback_label: str,
    ) -> ImageSet:
        if not self._fields.has_reference(entity, field_name):
            return ImageSet()

        field_items = [item for item in self._fields.read_field(entity, field_name) if item.target is not None]
        referenced = self._overlay.resolve_references(entity, field_name)

        images: list[ImageDescriptor] = []
        for field_item, image_entity in zip(field_items, referenced):
            media_item = self._media_image_item(image_entity)
            if media_item is not None:
                attributes = resolve_image_attributes(media_item.alt, media_item.title, fallback_label)
            else:
                attributes = resolve_image_attributes(field_item.alt, field_item.title, fallback_label)

            uri = self.fetch_file_uri(image_entity)
            if not uri:
                logger.debug(
                    "Skipping image without file uri (%s:%s) in %s",
                    image_entity.kind.value,
                    image_entity.id,
                    field_name,
                )
                continue
            images.append(ImageDescriptor(uri=uri, style=style, alt=attributes.alt, title=attributes.title))

        return ImageSet(tuple(images))

    def build_images(
        self,
        entity: ContentEntity,
        field_name: str,
        style: str | None,
        fallback_label: str,
    ) -> ImageDescriptor | list[ImageDescriptor]:
        """Same as :meth:`build` but shaped as scalar / list / empty list."""

        return self.build(entity, field_name, style, fallback_label).legacy()

    def describe_images(self, entity: ContentEntity, field_name: str) -> list[str]:
        """Processed descriptions of the media entities referenced by a field."""

        if not self._fields.has_reference(entity, field_name):
            return []

        descriptions: list[str] = []
        for media in self._overlay.resolve_references(entity, field_name):
            if not media.is_kind(EntityKind.MEDIA):
                continue
            description = self._fields.processed(media, MEDIA_DESCRIPTION_FIELD)
            if description:
                descriptions.append(description)
        return descriptions

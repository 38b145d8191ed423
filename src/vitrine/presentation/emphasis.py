"""Resolve the highlight block ("emphasis") attached to a node."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Union

from vitrine.content.fields import FieldReader
from vitrine.content.models import ContentEntity, EntityKind
from vitrine.media.images import ImageBuilder, ImageSet
from vitrine.media.video import VideoDescriptor, VideoOptions, resolve_video


DEFAULT_EMPHASIS_FIELD = "field_main_emphasis"
MAIN_IMAGE = "main_image"
PHOTO_GALLERY = "photo_gallery"
MAIN_VIDEO = "main_video"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MainImageEmphasis:
    images: ImageSet


@dataclass(frozen=True, slots=True)
class GalleryEmphasis:
    images: ImageSet


@dataclass(frozen=True, slots=True)
class VideoEmphasis:
    video: VideoDescriptor


@dataclass(frozen=True, slots=True)
class NoEmphasis:
    pass


EmphasisResult = Union[MainImageEmphasis, GalleryEmphasis, VideoEmphasis, NoEmphasis]


class EmphasisResolver:
    """Dispatch on the emphasis block type to an image, gallery or video variant."""

    def __init__(self, fields: FieldReader, images: ImageBuilder) -> None:
        self._fields = fields
        self._images = images

    def resolve(
        self,
        entity: ContentEntity,
        field_name: str = DEFAULT_EMPHASIS_FIELD,
        style: str | None = None,
        video: VideoOptions | None = None,
    ) -> EmphasisResult:
        if not entity.is_kind(EntityKind.NODE) or not self._fields.has_reference(entity, field_name):
            return NoEmphasis()

        target = self._fields.first_item(entity, field_name).target
        block = self._fields.store.load(target.kind, target.id)
        fallback_label = self._fields.value(entity, "title") or ""

        if block.bundle == MAIN_IMAGE:
            return MainImageEmphasis(self._images.build(block, "field_image", style, fallback_label))

        if block.bundle == PHOTO_GALLERY:
            return GalleryEmphasis(self._images.build(block, "field_gallery", style, fallback_label))

        if block.bundle == MAIN_VIDEO:
            video_url = self._fields.value(block, "field_video")
            if not video_url:
                return NoEmphasis()
            options = video or VideoOptions()
            descriptor = resolve_video(video_url, options.width, options.height)
            if descriptor is None:
                logger.debug("Emphasis video url matches no provider: %s", video_url)
                return NoEmphasis()
            return VideoEmphasis(descriptor)

        logger.debug("Unrecognized emphasis type %r on %s:%s", block.bundle, entity.kind.value, entity.id)
        return NoEmphasis()

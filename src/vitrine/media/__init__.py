"""Image and video display primitives."""

from .images import (
    ImageAttributes,
    ImageBuilder,
    ImageDescriptor,
    ImageSet,
    resolve_image_attributes,
)
from .video import VideoDescriptor, VideoOptions, resolve_video

__all__ = [
    "ImageAttributes",
    "ImageBuilder",
    "ImageDescriptor",
    "ImageSet",
    "VideoDescriptor",
    "VideoOptions",
    "resolve_image_attributes",
    "resolve_video",
]

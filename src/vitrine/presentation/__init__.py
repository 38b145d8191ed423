"""Presentation model assembly."""

from .assembler import AuthorPresentation, PresentationOptions, ResourceAssembler, ResourcePresentation
from .emphasis import (
    EmphasisResolver,
    EmphasisResult,
    GalleryEmphasis,
    MainImageEmphasis,
    NoEmphasis,
    VideoEmphasis,
)
from .links import LinkDescriptor, PathUrlBuilder, UrlBuilder, link_from_text_and_url
from .listing import ListWindow, limit_window

__all__ = [
    "AuthorPresentation",
    "EmphasisResolver",
    "EmphasisResult",
    "GalleryEmphasis",
    "LinkDescriptor",
    "ListWindow",
    "MainImageEmphasis",
    "NoEmphasis",
    "PathUrlBuilder",
    "PresentationOptions",
    "ResourceAssembler",
    "ResourcePresentation",
    "UrlBuilder",
    "VideoEmphasis",
    "limit_window",
    "link_from_text_and_url",
]

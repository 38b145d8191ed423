"""Classify third-party video URLs and build embeddable player descriptors."""

from __future__ import annotations

from dataclasses import dataclass
import re


DEFAULT_VIDEO_WIDTH = 1000
DEFAULT_VIDEO_HEIGHT = 800

VIMEO = "vimeo"
YOUTUBE = "youtube"

_VIMEO_RE = re.compile(
    r"^https?://(?:www\.)?vimeo\.com/(?:channels/[a-zA-Z0-9]*/)?(?P<id>[0-9]+)(?:/[a-zA-Z0-9]+)?(?:#t=\d+s)?$"
)
_YOUTUBE_RE = re.compile(
    r"^https?://(?:www\.)?(?:m\.)?(?:youtube\.com|youtu\.be|youtube-nocookie\.com)/"
    r"(?:watch\?v=|embed/|v/|shorts/|live/)?(?P<id>[0-9A-Za-z_-]{11})(?:[&?#].*)?$"
)

_EMBED_URLS = {
    VIMEO: "https://player.vimeo.com/video/{id}",
    YOUTUBE: "https://www.youtube.com/embed/{id}",
}


@dataclass(frozen=True, slots=True)
class VideoOptions:
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True, slots=True)
class VideoDescriptor:
    provider: str
    embed_url: str
    width: int = DEFAULT_VIDEO_WIDTH
    height: int = DEFAULT_VIDEO_HEIGHT

    def to_dict(self) -> dict[str, str | int]:
        return {
            "provider": self.provider,
            "embed_url": self.embed_url,
            "width": self.width,
            "height": self.height,
        }


def vimeo_id(input_url: str) -> str | None:
    match = _VIMEO_RE.match(input_url.strip())
    return match.group("id") if match else None


def youtube_id(input_url: str) -> str | None:
    match = _YOUTUBE_RE.match(input_url.strip())
    return match.group("id") if match else None


def _dimension(value: int | None, default: int) -> int:
    if value is None or value <= 0:
        return default
    return int(value)


def resolve_video(
    input_url: str | None,
    width: int | None = None,
    height: int | None = None,
) -> VideoDescriptor | None:
    """Return an embed descriptor for Vimeo or YouTube URLs, else None."""

    if not input_url:
        return None

    provider = None
    video_id = vimeo_id(input_url)
    if video_id:
        provider = VIMEO
    else:
        video_id = youtube_id(input_url)
        if video_id:
            provider = YOUTUBE

    if provider is None or video_id is None:
        return None

    return VideoDescriptor(
        provider=provider,
        embed_url=_EMBED_URLS[provider].format(id=video_id),
        width=_dimension(width, DEFAULT_VIDEO_WIDTH),
        height=_dimension(height, DEFAULT_VIDEO_HEIGHT),
    )

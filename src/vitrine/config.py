"""Runtime configuration for presentation resolving."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from vitrine.media.video import DEFAULT_VIDEO_HEIGHT, DEFAULT_VIDEO_WIDTH, VideoOptions


DEFAULT_LOCALE = "en"


def _parse_positive_int(*, name: str, raw_value: str, minimum: int = 1) -> int:
    try:
        value = int(raw_value)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@dataclass(frozen=True, slots=True)
class PresenterSettings:
    """Validated defaults applied by the CLI and service wiring."""

    locale: str = DEFAULT_LOCALE
    image_style: str | None = None
    video_width: int = DEFAULT_VIDEO_WIDTH
    video_height: int = DEFAULT_VIDEO_HEIGHT
    base_path: str = ""

    @property
    def video_options(self) -> VideoOptions:
        return VideoOptions(width=self.video_width, height=self.video_height)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PresenterSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        locale = source.get("VITRINE_LOCALE", DEFAULT_LOCALE).strip()
        if not locale:
            raise ValueError("VITRINE_LOCALE cannot be empty")

        image_style = source.get("VITRINE_IMAGE_STYLE", "").strip() or None
        width_raw = source.get("VITRINE_VIDEO_WIDTH", str(DEFAULT_VIDEO_WIDTH)).strip()
        height_raw = source.get("VITRINE_VIDEO_HEIGHT", str(DEFAULT_VIDEO_HEIGHT)).strip()
        base_path = source.get("VITRINE_BASE_PATH", "").strip()

        if not width_raw:
            raise ValueError("VITRINE_VIDEO_WIDTH cannot be empty")
        if not height_raw:
            raise ValueError("VITRINE_VIDEO_HEIGHT cannot be empty")
        if base_path and not base_path.startswith("/"):
            raise ValueError("VITRINE_BASE_PATH must start with /")

        return cls(
            locale=locale,
            image_style=image_style,
            video_width=_parse_positive_int(name="VITRINE_VIDEO_WIDTH", raw_value=width_raw),
            video_height=_parse_positive_int(name="VITRINE_VIDEO_HEIGHT", raw_value=height_raw),
            base_path=base_path.rstrip("/"),
        )

"""CLI entrypoint printing the presentation model of a stored resource."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from vitrine.config import PresenterSettings
from vitrine.content.models import EntityKind
from vitrine.content.store import EntityNotFoundError, InMemoryEntityStore
from vitrine.content.translation import FixedLocaleProvider
from vitrine.media.video import VideoOptions
from vitrine.presentation.assembler import DEFAULT_AUTHOR_IMAGE_STYLE, PresentationOptions, ResourceAssembler
from vitrine.presentation.links import PathUrlBuilder


load_dotenv()

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve the presentation model of a content resource")
    parser.add_argument("--store", required=True, help="JSON fixture file with an 'entities' list")
    parser.add_argument("--id", required=True, dest="entity_id", help="Resource id")
    parser.add_argument(
        "--kind",
        default=EntityKind.NODE.value,
        choices=[kind.value for kind in EntityKind],
        help="Resource entity kind",
    )
    parser.add_argument("--locale", default=None, help="Locale overriding VITRINE_LOCALE")
    parser.add_argument("--image-style", default=None, help="Responsive image style id")
    parser.add_argument("--no-image", action="store_true", help="Skip primary image resolution")
    parser.add_argument("--no-description", action="store_true", help="Skip description resolution")
    parser.add_argument("--video-width", type=int, default=None, help="Video player width")
    parser.add_argument("--video-height", type=int, default=None, help="Video player height")
    parser.add_argument("--author", action="store_true", help="Render the resource as an author profile")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        settings = PresenterSettings.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    try:
        store = InMemoryEntityStore.from_json_file(args.store)
    except (OSError, ValueError) as exc:
        print(f"Failed to load store {args.store}: {exc}", file=sys.stderr)
        return 2
    LOGGER.info("Loaded %d entities from %s", len(store), args.store)

    assembler = ResourceAssembler(
        store,
        PathUrlBuilder(settings.base_path),
        FixedLocaleProvider(args.locale or settings.locale),
    )

    try:
        resource = store.load(EntityKind(args.kind), args.entity_id)
        if args.author:
            presentation = assembler.assemble_author(
                resource,
                args.image_style or settings.image_style or DEFAULT_AUTHOR_IMAGE_STYLE,
            )
        else:
            options = PresentationOptions(
                image_style=args.image_style or settings.image_style,
                include_image=not args.no_image,
                include_description=not args.no_description,
                video=VideoOptions(
                    width=args.video_width or settings.video_width,
                    height=args.video_height or settings.video_height,
                ),
            )
            presentation = assembler.assemble(resource, options)
    except EntityNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    print(json.dumps(presentation.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

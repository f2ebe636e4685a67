"""CLI preview tool: build a component view model from a content file and print it."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from portfolio.config import Settings
from portfolio.content.loader import load_content_node
from portfolio.exceptions import ContentAccessError, ContentFormatError, UnknownComponentError
from portfolio.services.render_service import render_component

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    """Configure CLI logging."""
    level = logging.DEBUG if debug else logging.WARNING
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stderr,
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    settings = Settings()
    parser = argparse.ArgumentParser(
        prog="portfolio-render",
        description="Build a component view model from a content file and print it as JSON",
    )
    parser.add_argument("file", help="Content file (.toml, .json, .yaml)")
    parser.add_argument(
        "--component",
        "-c",
        help="Component type, e.g. 'card' (default: the node's sling:resourceType)",
    )
    parser.add_argument(
        "--dir",
        "-d",
        default=None,
        help=f"Content directory (default: {settings.content_dir})",
    )
    parser.add_argument("--path", "-p", help="Identity path of the node (default: derived)")
    parser.add_argument(
        "--indent",
        type=int,
        default=settings.json_indent,
        help=f"JSON indentation (default: {settings.json_indent})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    _configure_logging(args.debug or settings.debug)

    content_dir: Path | None = Path(args.dir) if args.dir is not None else settings.content_dir
    file_path = Path(args.file).resolve()
    # The content directory only supplies the identity of files inside it.
    if content_dir is not None and not file_path.is_relative_to(content_dir.resolve()):
        content_dir = None

    try:
        node = load_content_node(file_path, content_dir=content_dir, root_path=args.path)
        model = render_component(node, args.component)
    except (ContentAccessError, ContentFormatError, UnknownComponentError) as exc:
        logger.debug("Render failed for %s", file_path, exc_info=True)
        print(f"Error: {exc}")
        sys.exit(1)

    print(json.dumps(model.model_dump(mode="json"), indent=args.indent or None, ensure_ascii=False))


if __name__ == "__main__":
    main()

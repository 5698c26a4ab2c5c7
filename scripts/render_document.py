"""Render a stored document as HTML or Markdown."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from blog_blocks.config import BlogApiConfig
from blog_blocks.db import create_all, create_engine, create_session_factory
from blog_blocks.renderers import BlogFormatter, HtmlRenderer, MarkdownRenderer, RenderOptions
from blog_blocks.store import DocumentStoreError, create_document_store

logger = logging.getLogger("render_document")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a blog document.")
    parser.add_argument("document_id", type=int, help="Identifier of the document to render.")
    parser.add_argument(
        "--format",
        choices=("html", "markdown", "json"),
        default="html",
        help="Output format; 'json' prints the formatted blocks and metadata.",
    )
    parser.add_argument("--metadata", action="store_true", help="Include the reading-time line.")
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="Optional SQLAlchemy URL; reads the SQL store instead of the REST backend.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the rendered document to this file instead of stdout.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = BlogApiConfig()
    if args.database_url:
        engine = create_engine(args.database_url)
        create_all(engine)
        store = create_document_store(create_session_factory(engine), config=config)
    else:
        store = create_document_store(config=config)

    try:
        document = store.load_document(args.document_id)
    except DocumentStoreError as exc:
        logger.error("%s", exc)
        return 1

    options = RenderOptions(include_metadata=args.metadata)
    if args.format == "html":
        output = HtmlRenderer().render_document(document, options=options)
    elif args.format == "markdown":
        output = MarkdownRenderer().render_document(document, options=options)
    else:
        formatter = BlogFormatter()
        payload = {
            "blocks": [block.to_payload() for block in formatter.format_content(document.blocks)],
            "metadata": formatter.generate_metadata(document.blocks).model_dump(mode="json", by_alias=True),
        }
        output = json.dumps(payload, indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

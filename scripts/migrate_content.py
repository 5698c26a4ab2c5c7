"""Rewrite legacy (non-block) document content as block JSON.

Runs against the REST backend by default; pass ``--database-url`` or
``--sqlite-path`` to migrate a SQL store instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from blog_blocks.config import BlogApiConfig
from blog_blocks.db import create_all, create_engine, create_session_factory
from blog_blocks.store import DocumentStore, DocumentStoreError, create_document_store

logger = logging.getLogger("migrate_content")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Migrate legacy blog content to block JSON.")
    parser.add_argument(
        "ids",
        nargs="*",
        type=int,
        help="Document ids to migrate (default: every document reachable from the roots).",
    )
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="Optional SQLAlchemy URL; migrates the SQL store instead of the REST backend.",
    )
    parser.add_argument(
        "--sqlite-path",
        type=Path,
        default=None,
        help="Optional SQLite file path (ignored if --database-url is provided).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def build_store(args: argparse.Namespace, config: BlogApiConfig) -> DocumentStore:
    if args.database_url or args.sqlite_path:
        engine = create_engine(args.database_url, sqlite_path=None if args.database_url else args.sqlite_path)
        create_all(engine)
        return create_document_store(create_session_factory(engine), config=config)
    return create_document_store(config=config)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = build_store(args, BlogApiConfig())
    try:
        migrated = store.migrate_legacy_content(args.ids or None)
    except DocumentStoreError as exc:
        logger.error("Migration failed: %s", exc)
        return 1

    logger.info("Migrated %d document(s): %s", len(migrated), migrated)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

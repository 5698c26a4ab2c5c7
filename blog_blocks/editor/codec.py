"""JSON encoding of block sequences and the legacy-content fallback."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from blog_blocks.models.blocks import (
    DEFAULT_CODE_LANGUAGE,
    Block,
    BlockType,
    CodeLanguage,
    ListType,
    TextBlock,
    create_block,
    new_block_id,
)

logger = logging.getLogger(__name__)

_BLOCK_TYPES = {member.value: member for member in BlockType}
_LANGUAGES = {member.value: member for member in CodeLanguage}
_LIST_TYPES = {member.value: member for member in ListType}


def serialize_blocks(blocks: Iterable[Block]) -> str:
    """Return the canonical compact JSON array for ``blocks``.

    Each element carries ``id``, ``type``, ``content`` and ``order``; code
    blocks add ``language`` and list blocks add ``listType``.
    """
    payload = [block.model_dump(mode="json", by_alias=True) for block in blocks]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def parse_blocks(
    raw: str | None,
    *,
    default_language: CodeLanguage = DEFAULT_CODE_LANGUAGE,
) -> list[Block]:
    """Decode persisted content into blocks. Never raises.

    Input that is not a JSON array of blocks (plain text, legacy markup,
    malformed JSON) is wrapped into a single text block so nothing is lost.
    """
    if not raw:
        return [TextBlock()]

    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        logger.debug("Content is not JSON; wrapping %d characters as a text block", len(str(raw)))
        return [TextBlock(content=str(raw))]

    if isinstance(parsed, str):
        return [TextBlock(content=parsed)]
    if not isinstance(parsed, list):
        logger.debug("Content JSON is a %s, not a block list", type(parsed).__name__)
        return [TextBlock(content=raw)]

    blocks: list[Block] = []
    seen_ids: set[str] = set()
    for position, element in enumerate(parsed):
        if isinstance(element, Mapping):
            block = _block_from_mapping(element, len(blocks), seen_ids, default_language)
        elif isinstance(element, str):
            block = TextBlock(content=element, order=len(blocks))
        else:
            logger.debug("Dropping non-block element at position %d", position)
            continue
        seen_ids.add(block.id)
        blocks.append(block)

    return blocks or [TextBlock()]


def is_block_content(raw: str | None) -> bool:
    """Return True when ``raw`` is already a JSON array of block objects."""
    if not raw:
        return False
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return False
    return (
        isinstance(parsed, list)
        and bool(parsed)
        and all(
            isinstance(element, Mapping) and _lookup(_BLOCK_TYPES, element.get("type")) is not None
            for element in parsed
        )
    )


def _block_from_mapping(
    element: Mapping[str, Any],
    position: int,
    seen_ids: set[str],
    default_language: CodeLanguage,
) -> Block:
    block_type = _lookup(_BLOCK_TYPES, element.get("type")) or BlockType.TEXT

    content = element.get("content")
    if not isinstance(content, str):
        content = ""

    block_id = element.get("id")
    if isinstance(block_id, int) and not isinstance(block_id, bool):
        block_id = str(block_id)
    if not isinstance(block_id, str) or not block_id or block_id in seen_ids:
        block_id = new_block_id()

    return create_block(
        block_type,
        content=content,
        order=position,
        block_id=block_id,
        language=_lookup(_LANGUAGES, element.get("language")) or default_language,
        list_type=_lookup(_LIST_TYPES, element.get("listType")) or ListType.BULLET,
    )


def _lookup(table: Mapping[str, Any], value: Any) -> Any:
    return table.get(value) if isinstance(value, str) else None


__all__ = ["is_block_content", "parse_blocks", "serialize_blocks"]

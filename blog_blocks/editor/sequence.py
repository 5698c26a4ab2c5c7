"""In-memory block sequence backing one article body."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from blog_blocks.models.blocks import (
    DEFAULT_CODE_LANGUAGE,
    Block,
    BlockType,
    CodeBlock,
    CodeLanguage,
    ListBlock,
    ListType,
    TextBlock,
    create_block,
)

from .codec import parse_blocks, serialize_blocks
from .metadata import DocumentMetadata, generate_metadata


class BlockIndexError(IndexError):
    """Raised when an operation references a position outside the sequence."""


class BlockSequence:
    """Ordered, never-empty sequence of typed blocks.

    Every mutation renumbers ``order`` so that it always equals the block's
    index. Blocks are immutable; updates swap in modified copies.
    """

    def __init__(
        self,
        blocks: Iterable[Block] | None = None,
        *,
        default_language: CodeLanguage | str = DEFAULT_CODE_LANGUAGE,
    ) -> None:
        self._default_language = CodeLanguage(default_language)
        self._blocks: list[Block] = list(blocks or [])
        ids = [block.id for block in self._blocks]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate block identifiers are not allowed.")
        if not self._blocks:
            self._blocks = [TextBlock()]
        self._renumber()

    @classmethod
    def deserialize(
        cls,
        raw: str | None,
        *,
        default_language: CodeLanguage | str = DEFAULT_CODE_LANGUAGE,
    ) -> BlockSequence:
        """Decode persisted content; legacy or malformed input becomes a single text block."""
        language = CodeLanguage(default_language)
        return cls(parse_blocks(raw, default_language=language), default_language=language)

    def serialize(self) -> str:
        return serialize_blocks(self._blocks)

    # ------------------------------------------------------------------ Reads
    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    @property
    def default_language(self) -> CodeLanguage:
        return self._default_language

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(tuple(self._blocks))

    def __getitem__(self, index: int) -> Block:
        return self._blocks[self._require_index(index)]

    def __repr__(self) -> str:
        types = ", ".join(block.type.value for block in self._blocks)
        return f"BlockSequence([{types}])"

    def index_of(self, block_id: str) -> int | None:
        for index, block in enumerate(self._blocks):
            if block.id == block_id:
                return index
        return None

    def metadata(self) -> DocumentMetadata:
        return generate_metadata(self._blocks)

    def copy(self) -> BlockSequence:
        return BlockSequence(self._blocks, default_language=self._default_language)

    # ------------------------------------------------------------- Mutations
    def insert_block(
        self,
        block_type: BlockType | str,
        after_index: int,
        *,
        language: CodeLanguage | str | None = None,
        list_type: ListType | str | None = None,
    ) -> str:
        """Insert an empty block right after ``after_index`` (``-1`` for the start).

        ``after_index`` is clamped into ``[-1, len - 1]``. Returns the new block id.
        """
        block_type = BlockType(block_type)
        if block_type is BlockType.CODE and language is None:
            language = self._default_language
        position = max(-1, min(after_index, len(self._blocks) - 1)) + 1
        block = create_block(block_type, language=language, list_type=list_type)
        self._blocks.insert(position, block)
        self._renumber()
        return block.id

    def update_block_content(
        self,
        index: int,
        content: str,
        *,
        language: CodeLanguage | str | None = None,
        list_type: ListType | str | None = None,
    ) -> None:
        """Replace the content of the block at ``index``.

        ``language`` only applies to code blocks and ``list_type`` only to list
        blocks; for other types they are ignored.
        """
        position = self._require_index(index)
        block = self._blocks[position]
        update: dict[str, object] = {"content": content}
        if language is not None and isinstance(block, CodeBlock):
            update["language"] = CodeLanguage(language)
        if list_type is not None and isinstance(block, ListBlock):
            update["list_type"] = ListType(list_type)
        self._blocks[position] = block.model_copy(update=update)

    def remove_block(self, index: int) -> None:
        """Delete the block at ``index``; the last block is replaced by an empty text block."""
        position = self._require_index(index)
        del self._blocks[position]
        if not self._blocks:
            self._blocks.append(TextBlock())
        self._renumber()

    def reorder_block(self, from_index: int, to_index: int) -> None:
        """Move a block with splice semantics. Invalid or identical indices are a no-op."""
        size = len(self._blocks)
        if from_index == to_index:
            return
        if not (0 <= from_index < size and 0 <= to_index < size):
            return
        block = self._blocks.pop(from_index)
        self._blocks.insert(to_index, block)
        self._renumber()

    # --------------------------------------------------------------- Helpers
    def _require_index(self, index: int) -> int:
        if not 0 <= index < len(self._blocks):
            raise BlockIndexError(
                f"Block index {index} is out of range for a sequence of {len(self._blocks)} block(s)."
            )
        return index

    def _renumber(self) -> None:
        self._blocks = [
            block if block.order == position else block.model_copy(update={"order": position})
            for position, block in enumerate(self._blocks)
        ]


def deserialize_blocks(
    raw: str | None,
    *,
    default_language: CodeLanguage | str = DEFAULT_CODE_LANGUAGE,
) -> BlockSequence:
    return BlockSequence.deserialize(raw, default_language=default_language)


__all__ = ["BlockIndexError", "BlockSequence", "deserialize_blocks"]

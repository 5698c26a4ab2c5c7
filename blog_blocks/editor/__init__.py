"""Block document model: sequence mutations, JSON codec and derived metadata."""

from .codec import is_block_content, parse_blocks, serialize_blocks
from .metadata import DocumentMetadata, ReadingTime, count_words, generate_metadata
from .sequence import BlockIndexError, BlockSequence, deserialize_blocks

__all__ = [
    "BlockIndexError",
    "BlockSequence",
    "DocumentMetadata",
    "ReadingTime",
    "count_words",
    "deserialize_blocks",
    "generate_metadata",
    "is_block_content",
    "parse_blocks",
    "serialize_blocks",
]

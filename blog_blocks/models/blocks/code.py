"""Code block definition."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import DEFAULT_CODE_LANGUAGE, Block, BlockType, CodeLanguage


class CodeBlock(Block):
    type: Literal[BlockType.CODE] = Field(default=BlockType.CODE, frozen=True)
    language: CodeLanguage = DEFAULT_CODE_LANGUAGE


__all__ = ["CodeBlock"]

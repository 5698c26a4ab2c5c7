"""Header block definition; rendered as a second-level heading."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType


class HeaderBlock(Block):
    type: Literal[BlockType.HEADER] = Field(default=BlockType.HEADER, frozen=True)


__all__ = ["HeaderBlock"]

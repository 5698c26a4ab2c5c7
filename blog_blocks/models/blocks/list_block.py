"""List block definition.

Items live in ``content`` as newline-delimited lines; blank lines are not items.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .base import Block, BlockType, ListType


class ListBlock(Block):
    type: Literal[BlockType.LIST] = Field(default=BlockType.LIST, frozen=True)
    list_type: ListType = Field(default=ListType.BULLET, alias="listType")

    @property
    def items(self) -> list[str]:
        return [line.strip() for line in self.content.split("\n") if line.strip()]


__all__ = ["ListBlock"]

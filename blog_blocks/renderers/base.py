"""Renderer interfaces and shared helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Protocol

from blog_blocks.models.blocks import Block


class RenderMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"
    PREVIEW = "preview"

    @property
    def is_editing(self) -> bool:
        return self is not RenderMode.PREVIEW


@dataclass(slots=True)
class RenderOptions:
    mode: RenderMode = RenderMode.PREVIEW
    include_metadata: bool = False


class Renderer(Protocol):
    def render(
        self,
        block: Block,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        ...

    def render_blocks(
        self,
        blocks: Iterable[Block],
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        ...


class RendererComponent(Protocol):
    def render(
        self,
        block: Block,
        *,
        engine: Renderer,
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        ...

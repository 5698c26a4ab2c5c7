"""Markdown renderer component implementations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from blog_blocks.models.blocks import Block, BlockType, CodeBlock, ListBlock, ListType
from blog_blocks.renderers.base import RenderOptions, RendererComponent

_BACKTICK_RUN = re.compile(r"`+")

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .renderer import MarkdownRenderer


# ---------------------------------------------------------------------------
# Rendering context & base component


@dataclass(slots=True)
class RenderContext:
    engine: "MarkdownRenderer"
    options: RenderOptions
    extra: Mapping[str, Any]

    def join(self, sections: Sequence[str]) -> str:
        return join_sections(sections)

    def quote(self, text: str) -> str:
        lines = text.splitlines() or [""]
        quoted = [f"> {line}" if line else ">" for line in lines]
        return "\n".join(quoted)


class BaseComponent(RendererComponent):
    def render(
        self,
        block: Block,
        *,
        engine: "MarkdownRenderer",
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        ctx = RenderContext(engine=engine, options=options, extra=extra)
        return self.render_block(block, ctx)

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Component implementations


class TextComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:
        lines = [line.rstrip() for line in block.content.split("\n") if line.strip()]
        return ctx.join(lines)


class HeaderComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        text = " ".join(block.content.split())
        return f"## {text}" if text else ""


class QuoteComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:
        body = block.content.strip()
        return ctx.quote(body) if body else ""


class CodeComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        code_text = block.content.strip("\n")
        if not code_text.strip():
            return ""
        language = block.language.value if isinstance(block, CodeBlock) else ""
        fence = _code_fence(code_text)
        return "\n".join([f"{fence}{language}", code_text, fence])


class ListComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        if not isinstance(block, ListBlock):
            return ""
        if block.list_type is ListType.NUMBER:
            lines = [f"{index}. {item}" for index, item in enumerate(block.items, start=1)]
        else:
            lines = [f"* {item}" for item in block.items]
        return "\n".join(lines)


class ImageComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        url = block.content.strip()
        return f"![]({url})" if url else ""


class NullComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        return ""


# ---------------------------------------------------------------------------
# Misc helpers (kept local to this module)


def _code_fence(code_text: str) -> str:
    longest = max((len(run) for run in _BACKTICK_RUN.findall(code_text)), default=0)
    return "`" * max(3, longest + 1)


def join_sections(sections: Sequence[str]) -> str:
    cleaned = [section.strip() for section in sections if section and section.strip()]
    if not cleaned:
        return ""

    output = cleaned[0]
    for section in cleaned[1:]:
        separator = "\n\n"
        prev_kind = _section_kind(output.splitlines()[-1])
        next_kind = _section_kind(section.splitlines()[0])
        if prev_kind and prev_kind == next_kind and prev_kind in {"bullet", "numbered"}:
            separator = "\n"
        output = f"{output}{separator}{section}"
    return output


def _section_kind(line: str) -> str | None:
    stripped = line.lstrip()
    if not stripped:
        return None
    if stripped[0] in "-*+" and (len(stripped) == 1 or stripped[1].isspace()):
        return "bullet"
    number_prefix = stripped.split(" ", 1)[0]
    if number_prefix.endswith(".") and number_prefix[:-1].isdigit():
        return "numbered"
    return None


DEFAULT_COMPONENTS: dict[BlockType, RendererComponent] = {
    BlockType.TEXT: TextComponent(),
    BlockType.HEADER: HeaderComponent(),
    BlockType.QUOTE: QuoteComponent(),
    BlockType.CODE: CodeComponent(),
    BlockType.LIST: ListComponent(),
    BlockType.IMAGE: ImageComponent(),
}


__all__ = [
    "DEFAULT_COMPONENTS",
    "NullComponent",
    "join_sections",
]

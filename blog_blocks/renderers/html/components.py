"""HTML renderer component implementations."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import TYPE_CHECKING, Any, Mapping

from blog_blocks.models.blocks import Block, BlockType, CodeBlock, ListBlock, ListType
from blog_blocks.renderers.base import RenderOptions, RendererComponent
from blog_blocks.renderers.sanitize import render_inline, render_lines, render_markdown

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .renderer import HtmlRenderer


# ---------------------------------------------------------------------------
# Rendering context & base component


@dataclass(slots=True)
class RenderContext:
    engine: "HtmlRenderer"
    options: RenderOptions
    extra: Mapping[str, Any]

    @property
    def editing(self) -> bool:
        return self.options.mode.is_editing

    def placeholder(self, text: str) -> str:
        return f'<p class="block-placeholder">{escape(text)}</p>'


class BaseComponent(RendererComponent):
    placeholder = ""

    def render(
        self,
        block: Block,
        *,
        engine: "HtmlRenderer",
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        ctx = RenderContext(engine=engine, options=options, extra=extra)
        rendered = self.render_block(block, ctx)
        if not rendered and ctx.editing:
            return ctx.placeholder(self.placeholder_for(block))
        return rendered

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def placeholder_for(self, block: Block) -> str:  # noqa: ARG002
        return self.placeholder


# ---------------------------------------------------------------------------
# Component implementations


class TextComponent(BaseComponent):
    placeholder = "Type your content here..."

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        return "\n".join(render_lines(block.content))


class HeaderComponent(BaseComponent):
    placeholder = "Enter heading..."

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        text = render_inline(block.content)
        return f"<h2>{text}</h2>" if text else ""


class QuoteComponent(BaseComponent):
    placeholder = "Enter a quote..."

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        body = render_markdown(block.content)
        return f"<blockquote>{body}</blockquote>" if body else ""


class CodeComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        if not block.content.strip():
            return ""
        language = escape(_language_of(block), quote=True)
        return (
            f'<pre data-language="{language}">'
            f'<code class="language-{language}">{escape(block.content, quote=False)}</code>'
            "</pre>"
        )

    def placeholder_for(self, block: Block) -> str:
        return f"Enter your {_language_of(block)} code here..."


class ListComponent(BaseComponent):
    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        items = [render_inline(item) for item in _list_items(block)]
        items = [item for item in items if item]
        if not items:
            return ""
        tag = "ol" if _list_type_of(block) is ListType.NUMBER else "ul"
        body = "".join(f"<li>{item}</li>" for item in items)
        return f"<{tag}>{body}</{tag}>"

    def placeholder_for(self, block: Block) -> str:
        if _list_type_of(block) is ListType.NUMBER:
            return "1. Enter list items (one per line)"
        return "• Enter list items (one per line)"


class ImageComponent(BaseComponent):
    placeholder = "Click to upload an image"

    def render_block(self, block: Block, ctx: RenderContext) -> str:  # noqa: ARG002
        url = block.content.strip()
        if not url:
            return ""
        return f'<img src="{escape(url, quote=True)}" alt="Blog content">'


class NullComponent(RendererComponent):
    """Renders nothing; used for block types without a registered component."""

    def render(
        self,
        block: Block,
        *,
        engine: "HtmlRenderer",
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:  # noqa: ARG002
        return ""


# ---------------------------------------------------------------------------
# Misc helpers (kept local to this module)


def _language_of(block: Block) -> str:
    if isinstance(block, CodeBlock):
        return block.language.value
    return "plaintext"


def _list_type_of(block: Block) -> ListType:
    return block.list_type if isinstance(block, ListBlock) else ListType.BULLET


def _list_items(block: Block) -> list[str]:
    if isinstance(block, ListBlock):
        return block.items
    return [line.strip() for line in block.content.split("\n") if line.strip()]


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
    "RenderContext",
]

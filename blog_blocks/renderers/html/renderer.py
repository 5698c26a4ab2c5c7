"""HTML renderer entry-point wiring block components."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Any, Iterable, Mapping

from blog_blocks.models.blocks import Block, BlockType
from blog_blocks.models.document import Document
from blog_blocks.renderers.base import RenderOptions, Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS, NullComponent


def _default_components() -> dict[BlockType, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class HtmlRenderer(Renderer):
    """Render blocks to sanitized HTML.

    In create/edit mode every block is wrapped in an element carrying its id,
    order and type, and empty blocks show a placeholder. Preview mode renders
    content only and skips empty blocks.
    """

    _components: dict[BlockType, RendererComponent] = field(default_factory=dict)
    _fallback_component: RendererComponent | None = None

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()
        if self._fallback_component is None:
            self._fallback_component = NullComponent()

    def register(self, block_type: BlockType, component: RendererComponent) -> None:
        self._components[block_type] = component

    def render(
        self,
        block: Block,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        opts = options or RenderOptions()
        return self._render_block(block, opts, dict(kwargs)).strip()

    def render_blocks(
        self,
        blocks: Iterable[Block],
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        opts = options or RenderOptions()
        extra = dict(kwargs)
        sections = [self._render_block(block, opts, extra) for block in blocks]
        return "\n".join(section.strip() for section in sections if section.strip())

    def render_document(
        self,
        document: Document,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        opts = options or RenderOptions()
        sections: list[str] = []
        if document.title:
            sections.append(f"<h1>{escape(document.title)}</h1>")
        if document.description:
            sections.append(f'<p class="description">{escape(document.description)}</p>')
        if document.cover_url:
            sections.append(
                f'<img class="cover" src="{escape(document.cover_url, quote=True)}" '
                f'alt="{escape(document.title or "Cover image", quote=True)}">'
            )
        if opts.include_metadata:
            reading = document.metadata.reading_time
            sections.append(f'<p class="reading-time">{escape(reading.text)}</p>')
        body = self.render_blocks(document.blocks, options=opts, **kwargs)
        if body:
            sections.append(f'<article class="blocks">\n{body}\n</article>')
        return "\n".join(sections)

    # Internal helpers -------------------------------------------------
    def _render_block(
        self,
        block: Block,
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        component = self._components.get(block.type)
        if component is None:
            assert self._fallback_component is not None, "Fallback component must be configured"
            return self._fallback_component.render(block, engine=self, options=options, extra=extra)

        rendered = component.render(block, engine=self, options=options, extra=extra)
        if options.mode.is_editing:
            rendered = _wrap_for_editing(block, rendered)
        return rendered


def _wrap_for_editing(block: Block, rendered: str) -> str:
    block_type = block.type.value if isinstance(block.type, BlockType) else str(block.type)
    return (
        f'<div class="block block-{escape(block_type, quote=True)}" '
        f'data-block-id="{escape(block.id, quote=True)}" '
        f'data-block-order="{block.order}" '
        f'data-block-type="{escape(block_type, quote=True)}">'
        f"{rendered}</div>"
    )


__all__ = ["HtmlRenderer"]

"""Renderer entry-point exporting blocks as Markdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from blog_blocks.models.blocks import Block, BlockType
from blog_blocks.models.document import Document
from blog_blocks.renderers.base import RenderOptions, Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS, NullComponent, join_sections


def _default_components() -> dict[BlockType, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class MarkdownRenderer(Renderer):
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
        return join_sections([self._render_block(block, opts, extra) for block in blocks])

    def render_document(
        self,
        document: Document,
        *,
        options: RenderOptions | None = None,
        **kwargs: Any,
    ) -> str:
        opts = options or RenderOptions()
        sections = [f"# {document.title}" if document.title else "# Untitled"]
        if document.description:
            sections.append(document.description)
        if document.cover_url:
            sections.append(f"![{document.title}]({document.cover_url})")
        if opts.include_metadata:
            sections.append(f"_{document.metadata.reading_time.text}_")
        sections.append(self.render_blocks(document.blocks, options=opts, **kwargs))
        return join_sections(sections)

    # Internal helpers -------------------------------------------------
    def _render_block(
        self,
        block: Block,
        options: RenderOptions,
        extra: Mapping[str, Any],
    ) -> str:
        component = self._components.get(block.type, self._fallback_component)
        assert component is not None, "Fallback component must be configured"
        return component.render(block, engine=self, options=options, extra=extra)


__all__ = ["MarkdownRenderer"]

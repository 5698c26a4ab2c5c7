"""Renderer implementations and helpers."""

from .base import RenderMode, RenderOptions, Renderer
from .formatter import BlogFormatter, FormattedBlock
from .html import HtmlRenderer
from .markdown import MarkdownRenderer

__all__ = [
    "BlogFormatter",
    "FormattedBlock",
    "HtmlRenderer",
    "MarkdownRenderer",
    "RenderMode",
    "RenderOptions",
    "Renderer",
]

"""Markdown export of block sequences and documents."""

from .renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]

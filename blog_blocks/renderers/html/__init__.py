"""HTML rendering of block sequences and documents."""

from .renderer import HtmlRenderer

__all__ = ["HtmlRenderer"]

"""Markdown rendering and HTML sanitization shared by renderers and the formatter."""

from __future__ import annotations

import re

import bleach
import mistune

BLOCK_TAGS = frozenset(
    {
        "a", "b", "blockquote", "br", "code", "del", "em", "h1", "h2", "h3", "h4", "h5",
        "h6", "hr", "i", "img", "li", "ol", "p", "pre", "s", "span", "strong", "table",
        "tbody", "td", "th", "thead", "tr", "u", "ul",
    }
)
INLINE_TAGS = frozenset({"a", "b", "br", "code", "del", "em", "i", "s", "span", "strong", "u"})
ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel"],
    "img": ["src", "alt", "title"],
}
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Executable containers are dropped with their contents, not just unwrapped.
_EXECUTABLE_BLOCKS = re.compile(
    r"<(script|style|iframe|object|embed|noscript)\b[^>]*>.*?</\1\s*>",
    re.IGNORECASE | re.DOTALL,
)

_markdown = mistune.create_markdown(escape=False, plugins=["strikethrough", "url"])


def sanitize_html(html: str, *, inline: bool = False) -> str:
    """Strip ``html`` down to the safe tag subset (inline tags only when ``inline``)."""
    without_code = _EXECUTABLE_BLOCKS.sub("", html)
    return bleach.clean(
        without_code,
        tags=INLINE_TAGS if inline else BLOCK_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )


def render_markdown(text: str) -> str:
    """Render Markdown (raw HTML allowed) and sanitize the result."""
    if not text.strip():
        return ""
    return sanitize_html(_markdown(text)).strip()


def render_inline(text: str) -> str:
    """Render Markdown keeping inline markup only; block wrappers are unwrapped."""
    if not text.strip():
        return ""
    return sanitize_html(_markdown(text), inline=True).strip()


def render_lines(text: str) -> list[str]:
    """Render each non-blank line of ``text`` as its own sanitized fragment."""
    return [render_markdown(line) for line in text.split("\n") if line.strip()]


__all__ = [
    "ALLOWED_ATTRIBUTES",
    "ALLOWED_PROTOCOLS",
    "BLOCK_TAGS",
    "INLINE_TAGS",
    "render_inline",
    "render_lines",
    "render_markdown",
    "sanitize_html",
]

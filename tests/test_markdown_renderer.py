from __future__ import annotations

import mistune

from blog_blocks.editor import BlockSequence
from blog_blocks.models import Document
from blog_blocks.models.blocks import (
    Block,
    CodeBlock,
    CodeLanguage,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ListType,
    QuoteBlock,
    TextBlock,
)
from blog_blocks.renderers import MarkdownRenderer, RenderOptions


def test_markdown_renderer_renders_document():
    document = Document(
        title="Sample Doc",
        blocks=BlockSequence([HeaderBlock(content="Intro"), TextBlock(content="Hello world.")]),
    )

    output = MarkdownRenderer().render_document(document)

    assert output == "# Sample Doc\n\n## Intro\n\nHello world."


def test_untitled_document_gets_placeholder_heading():
    output = MarkdownRenderer().render_document(Document())

    assert output == "# Untitled"


def test_reading_time_included_when_requested():
    document = Document(title="T", blocks=BlockSequence([TextBlock(content="a b c")]))

    output = MarkdownRenderer().render_document(document, options=RenderOptions(include_metadata=True))

    assert "_1 min read_" in output


def test_code_block_uses_language_fence():
    block = CodeBlock(content="print('hi')\n", language=CodeLanguage.PYTHON)

    assert MarkdownRenderer().render(block) == "```python\nprint('hi')\n```"


def test_code_containing_fences_uses_longer_fence():
    block = CodeBlock(content="```\nnested\n```", language=CodeLanguage.PLAINTEXT)

    output = MarkdownRenderer().render(block)

    assert output.startswith("````plaintext\n")
    assert output.endswith("\n````")


def test_code_fence_outgrows_longest_backtick_run():
    block = CodeBlock(content="x\n````\ny\n`````inline", language=CodeLanguage.JAVASCRIPT)

    output = MarkdownRenderer().render(block)
    html = mistune.html(output)

    assert output.startswith("``````javascript\n")
    assert output.endswith("\n``````")
    assert html.count("<pre>") == 1
    assert "<p>" not in html
    assert "`````inline" in html


def test_lists_and_quotes():
    renderer = MarkdownRenderer()

    assert renderer.render(ListBlock(content="a\nb")) == "* a\n* b"
    assert renderer.render(ListBlock(content="a\nb", list_type=ListType.NUMBER)) == "1. a\n2. b"
    assert renderer.render(QuoteBlock(content="line one\nline two")) == "> line one\n> line two"


def test_consecutive_lists_are_joined_without_blank_line():
    output = MarkdownRenderer().render_blocks([ListBlock(content="a"), ListBlock(content="b")])

    assert output == "* a\n* b"


def test_image_and_empty_blocks():
    renderer = MarkdownRenderer()

    output = renderer.render_blocks([ImageBlock(content="https://cdn.test/i.png"), TextBlock(content="")])

    assert output == "![](https://cdn.test/i.png)"


def test_unknown_type_renders_nothing():
    unknown = Block.model_construct(id="v", type="video", content="clip", order=0)

    assert MarkdownRenderer().render(unknown) == ""

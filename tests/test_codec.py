from __future__ import annotations

import json

from blog_blocks.editor import (
    BlockSequence,
    deserialize_blocks,
    is_block_content,
    parse_blocks,
    serialize_blocks,
)
from blog_blocks.models.blocks import (
    BlockType,
    CodeBlock,
    CodeLanguage,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ListType,
    QuoteBlock,
    TextBlock,
)


def test_serialize_emits_compact_block_array():
    blocks = [
        TextBlock(id="t1", content="Hello"),
        CodeBlock(id="c1", content="print(1)", order=1, language=CodeLanguage.PYTHON),
        ListBlock(id="l1", content="a\nb", order=2, list_type=ListType.NUMBER),
    ]

    raw = serialize_blocks(blocks)

    assert " " not in raw.replace("print(1)", "")
    assert json.loads(raw) == [
        {"id": "t1", "type": "text", "content": "Hello", "order": 0},
        {"id": "c1", "type": "code", "content": "print(1)", "order": 1, "language": "python"},
        {"id": "l1", "type": "list", "content": "a\nb", "order": 2, "listType": "number"},
    ]


def test_round_trip_preserves_blocks():
    sequence = BlockSequence(
        [
            HeaderBlock(content="Intro"),
            TextBlock(content="Body with ünïcode"),
            QuoteBlock(content="> wise"),
            CodeBlock(content="x = 1", language=CodeLanguage.CPP),
            ListBlock(content="one\ntwo"),
            ImageBlock(content="https://cdn.test/a.png"),
        ]
    )

    restored = BlockSequence.deserialize(sequence.serialize())

    assert restored.blocks == sequence.blocks


def test_serialize_keeps_non_ascii_characters():
    raw = serialize_blocks([TextBlock(id="x", content="café")])

    assert "café" in raw


def test_plain_text_becomes_single_text_block():
    blocks = parse_blocks("Just some legacy prose")

    assert len(blocks) == 1
    assert blocks[0].type is BlockType.TEXT
    assert blocks[0].content == "Just some legacy prose"


def test_legacy_markup_is_preserved_verbatim():
    raw = "<p>Legacy <b>HTML</b></p>"

    sequence = BlockSequence.deserialize(raw)

    assert len(sequence) == 1
    assert sequence[0].content == raw


def test_empty_or_missing_content_yields_empty_text_block():
    for raw in ("", None):
        blocks = parse_blocks(raw)
        assert len(blocks) == 1
        assert blocks[0].type is BlockType.TEXT
        assert blocks[0].content == ""


def test_malformed_json_is_wrapped_not_raised():
    raw = '[{"id": "a", "type": "text"'

    blocks = parse_blocks(raw)

    assert [block.content for block in blocks] == [raw]


def test_json_object_is_wrapped_as_text():
    raw = '{"hello": "world"}'

    assert parse_blocks(raw)[0].content == raw


def test_json_string_uses_decoded_value():
    assert parse_blocks('"quoted legacy text"')[0].content == "quoted legacy text"


def test_empty_array_yields_empty_text_block():
    blocks = parse_blocks("[]")

    assert len(blocks) == 1
    assert blocks[0].content == ""


def test_unknown_fields_fall_back_to_defaults():
    raw = json.dumps(
        [
            {"id": "a", "type": "video", "content": "clip"},
            {"id": "b", "type": "code", "content": "x", "language": "cobol"},
            {"id": "c", "type": "list", "content": "i", "listType": "checkbox"},
            {"id": "d", "type": "header", "content": 42},
        ]
    )

    blocks = parse_blocks(raw, default_language=CodeLanguage.TYPESCRIPT)

    assert blocks[0].type is BlockType.TEXT
    assert blocks[0].content == "clip"
    assert blocks[1].language is CodeLanguage.TYPESCRIPT
    assert blocks[2].list_type is ListType.BULLET
    assert blocks[3].content == ""


def test_missing_or_duplicate_ids_are_regenerated():
    raw = json.dumps(
        [
            {"id": "dup", "type": "text", "content": "a"},
            {"id": "dup", "type": "text", "content": "b"},
            {"type": "text", "content": "c"},
            {"id": 7, "type": "text", "content": "d"},
        ]
    )

    blocks = parse_blocks(raw)
    ids = [block.id for block in blocks]

    assert ids[0] == "dup"
    assert len(set(ids)) == 4
    assert ids[3] == "7"


def test_stored_order_is_replaced_by_position():
    raw = json.dumps(
        [
            {"id": "a", "type": "text", "content": "a", "order": 9},
            {"id": "b", "type": "text", "content": "b", "order": 3},
        ]
    )

    assert [block.order for block in parse_blocks(raw)] == [0, 1]


def test_formatted_content_is_ignored_on_load():
    raw = json.dumps(
        [
            {
                "id": "a",
                "type": "text",
                "content": "**bold**",
                "order": 0,
                "formattedContent": ["<p><strong>bold</strong></p>"],
            }
        ]
    )

    sequence = BlockSequence.deserialize(raw)

    assert "formattedContent" not in sequence.serialize()
    assert sequence[0].content == "**bold**"


def test_non_object_elements_are_tolerated():
    raw = json.dumps(["loose string", 12, None, {"id": "x", "type": "quote", "content": "q"}])

    blocks = parse_blocks(raw)

    assert [block.type for block in blocks] == [BlockType.TEXT, BlockType.QUOTE]
    assert blocks[0].content == "loose string"


def test_language_only_serialized_for_code():
    payload = json.loads(serialize_blocks([TextBlock(id="t"), CodeBlock(id="c")]))

    assert "language" not in payload[0]
    assert payload[1]["language"] == "javascript"


def test_is_block_content_detects_block_arrays():
    assert is_block_content(serialize_blocks([TextBlock(content="x")]))
    assert not is_block_content("plain")
    assert not is_block_content("[]")
    assert not is_block_content("")
    assert not is_block_content('[{"type": "video"}]')


def test_deserialize_blocks_returns_sequence_with_default_language():
    sequence = deserialize_blocks("legacy", default_language="php")

    sequence.insert_block(BlockType.CODE, 0)

    assert sequence[0].content == "legacy"
    assert sequence[1].language is CodeLanguage.PHP

"""Unit tests for core/extract/segment.py"""

import pytest

from blockmark.core.extract.segment import BlockClose, BlockOpen, Line, segment, split_lines, tokenize
from blockmark.core.models import RawBlock


def test_tokenize_event_kinds():
    """Headers, closing fences and content lines become distinct events."""
    events = list(tokenize(':::tips [title="T"]\n- a\n:::'))
    assert events == [
        BlockOpen(type="tips", attrs='title="T"', line=1),
        Line(text="- a", line=2),
        BlockClose(line=3),
    ]


def test_tokenize_lowercases_type():
    """Block type keywords are case-insensitive."""
    assert list(tokenize(":::TABLE"))[0].type == "table"


def test_segment_single_block():
    """One block yields one RawBlock carrying type, attrs, body and header line."""
    blocks = segment(':::text [heading="Intro"]\nHello\n:::')
    assert blocks == [RawBlock("text", 'heading="Intro"', "Hello", 1)]


def test_segment_multiple_blocks_in_order():
    """Blocks come back in source order and do not swallow each other."""
    blocks = segment(":::tips\n- a\n:::\n\n:::notes\n- b\n:::")
    assert [(b.type, b.body) for b in blocks] == [("tips", "- a"), ("notes", "- b")]
    assert blocks[1].line == 5


def test_segment_empty_body():
    """A block with nothing between its fences has an empty body."""
    assert segment(":::tips\n:::") == [RawBlock("tips", "", "", 1)]


def test_segment_text_outside_blocks_ignored():
    """Prose between blocks is not part of any block."""
    blocks = segment("intro\n:::tips\n- a\n:::\ntrailing")
    assert len(blocks) == 1
    assert blocks[0].body == "- a"


def test_segment_unterminated_block_closed_at_end():
    """A block still open at end of input is kept, for mid-typing text."""
    assert segment(":::tips\n- a\n- b") == [RawBlock("tips", "", "- a\n- b", 1)]


def test_segment_header_closes_open_block():
    """Blocks do not nest: a new header ends the block that was open."""
    blocks = segment(":::tips\n- a\n:::notes\n- b\n:::")
    assert [b.type for b in blocks] == ["tips", "notes"]
    assert blocks[0].body == "- a"


def test_segment_stray_close_ignored():
    """A closing fence with no open block is skipped."""
    assert segment(":::\n:::tips\n- a\n:::") == [RawBlock("tips", "", "- a", 2)]


def test_segment_keeps_unknown_types():
    """The segmenter itself does not filter on type."""
    assert segment(":::proscons\nx\n:::")[0].type == "proscons"


def test_segment_blank_input():
    """Empty and whitespace-only input produce no blocks."""
    assert segment("") == []
    assert segment("   \n  ") == []


@pytest.mark.parametrize("text, expected", [
    ("a\nb\n", ["a", "b"]),
    ("a\r\nb", ["a", "b"]),
    ("a\n\nb", ["a", "", "b"]),
    ("a\u2028b\x85c\x0cd", ["a\u2028b\x85c\x0cd"]),
    ("", []),
])
def test_split_lines(text, expected):
    """Only newline separates lines; a trailing carriage return is dropped."""
    assert split_lines(text) == expected

"""
Tests for formatting.lines
"""
import dataclasses

import pytest

from quiz_toolkit.formatting.lines import LineRecord, join_lines, next_content, split_lines


def test_split_keeps_empty_lines():
    records = split_lines("a\n\n  b ")

    assert [r.content for r in records] == ["a", "", "b"]
    assert [r.index for r in records] == [0, 1, 2]
    assert records[1].is_blank
    assert records[2].raw == "  b "


def test_split_line_count_matches_newlines():
    text = "x\n\n\n"

    assert len(split_lines(text)) == text.count("\n") + 1


def test_join_inverts_split():
    text = "def f():\n\n  return 1\n"

    assert join_lines(r.raw for r in split_lines(text)) == text


def test_next_content_skips_blank_lines():
    records = split_lines("a\n  \n\nb\nc")

    assert next_content(records, 0) == "b"
    assert next_content(records, 3) == "c"
    assert next_content(records, 4) is None


def test_line_record_is_frozen():
    record = LineRecord(index=0, raw=" x", content="x")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.content = "y"

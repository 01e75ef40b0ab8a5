import io

import pytest

from moonshot.writer import AdvancedIndexWriter, IndexWriter


def test_writer_interface_is_abstract():
    with pytest.raises(TypeError):
        IndexWriter()


def test_write_returns_sorted_tokens():
    writer = AdvancedIndexWriter(io.StringIO())
    words = ["fox", "brown", "quick", "the"]
    result = writer.write(words, 1, "Body")
    assert result == sorted(words)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_write_reports_document_and_tokens():
    out = io.StringIO()
    AdvancedIndexWriter(out).write(["conf", "2021"], 32, "Title")
    lines = out.getvalue().splitlines()
    assert lines[0] == "Writing document 32 to posting Title"
    assert lines[1:] == ["Token: 2021", "Token: conf"]


def test_write_accepts_any_iterable_and_keeps_duplicates():
    writer = AdvancedIndexWriter(io.StringIO())
    result = writer.write(iter(["b", "a", "b"]), 7, "Body")
    assert result == ["a", "b", "b"]


def test_write_sorts_by_code_point():
    writer = AdvancedIndexWriter(io.StringIO())
    words = ["мир", "world", "hello", "привет"]
    result = writer.write(words, 1, "Body")
    assert [ord(w[0]) for w in result] == sorted(ord(w[0]) for w in words)


def test_empty_document_reports_only_header():
    out = io.StringIO()
    assert AdvancedIndexWriter(out).write([], 5, "Body") == []
    assert len(out.getvalue().splitlines()) == 1
import io

import pytest

from moonshot.block_table import IndexBlock, IndexBlockTable
from moonshot.compiler import EvalTree
from moonshot.executor import IndexSearchExecutor
from moonshot.reader import AdvancedIndexReader


def _executor():
    out = io.StringIO()
    return IndexSearchExecutor(out), out


def _table_with(data):
    table = IndexBlockTable()
    table.cache.add(IndexBlock(data=data), 0)
    return table


def test_default_execute():
    executor, out = _executor()
    assert executor.execute() == []
    assert "Default execute method called" in out.getvalue()


def test_null_target():
    executor, out = _executor()
    assert executor.execute(None) == []
    assert "Null" in out.getvalue()


def test_eval_tree():
    executor, out = _executor()
    assert executor.execute(EvalTree()) == []
    assert "Executing evaluation tree" in out.getvalue()


def test_unopened_reader_yields_nothing():
    executor, out = _executor()
    reader = AdvancedIndexReader(IndexBlockTable())
    assert executor.execute(reader) == []
    assert "Executing with index reader" in out.getvalue()


def test_reader_remaining_postings_are_processed():
    executor, out = _executor()
    reader = AdvancedIndexReader(_table_with(bytes([1, 1, 2, 3, 4, 1])))
    reader.open("term")
    assert reader.document_id == 1
    processed = executor.execute(reader)
    assert processed == [3, 7]
    assert "Processing document ID: 7" in out.getvalue()


def test_reader_closed_after_execute():
    executor, _ = _executor()
    reader = AdvancedIndexReader(_table_with(bytes([1, 1])))
    reader.open("term")
    executor.execute(reader)
    assert reader.word is None


def test_unknown_target():
    executor, _ = _executor()
    with pytest.raises(TypeError):
        executor.execute(3.5)
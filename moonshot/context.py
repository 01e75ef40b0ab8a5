"""The index context hands out readers, writers and executors."""

from __future__ import annotations

import os

from moonshot.block_table import IndexBlockTable
from moonshot.compiler import ConfigParameters, Embeddings, EvalTree
from moonshot.executor import IndexSearchExecutor
from moonshot.reader import AdvancedIndexReader, IndexReader
from moonshot.writer import AdvancedIndexWriter, IndexWriter


class IndexContext:
    """Ties an index's configuration and block table together."""

    def __init__(
        self,
        config_file: str | os.PathLike[str] = "",
        index_file: str | os.PathLike[str] = "",
    ) -> None:
        self.config_file = os.fspath(config_file)
        self.index_file = os.fspath(index_file)
        self.parameters = ConfigParameters()
        self.block_table = IndexBlockTable()

    def get_reader(self, query) -> IndexReader | None:
        """Return a reader for a token; trees and embeddings give no reader yet."""
        if isinstance(query, str):
            return AdvancedIndexReader(self.block_table)
        if query is None or isinstance(query, (EvalTree, Embeddings)):
            return None
        raise TypeError(f"cannot read by {type(query).__name__}")

    def get_writer(self) -> IndexWriter:
        return AdvancedIndexWriter()

    def get_executor(self) -> IndexSearchExecutor:
        return IndexSearchExecutor()
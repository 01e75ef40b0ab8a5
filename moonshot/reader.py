"""Readers that walk the posting list of a term."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from moonshot.block_table import IndexBlock, IndexBlockTable, default_block_table
from moonshot.decoder import UnifiedDecoder

log = logging.getLogger(__name__)


class IndexReader(ABC):
    """Iterates over the documents of one posting list."""

    @abstractmethod
    def go_next(self) -> None: ...

    @abstractmethod
    def go_until(self, target: int = 0, limit: int = 0) -> None: ...

    @abstractmethod
    def is_end(self) -> bool: ...

    @property
    @abstractmethod
    def document_id(self) -> int: ...

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def open(self, word: str) -> None: ...


class AdvancedIndexReader(IndexReader):
    """Reads a term's postings from its index block through a block table."""

    def __init__(self, block_table: IndexBlockTable | None = None) -> None:
        self._table = block_table if block_table is not None else default_block_table()
        self._decoder = UnifiedDecoder()
        self._block: IndexBlock | None = None
        self.word: str | None = None

    def open(self, word: str) -> None:
        """Open the posting list of ``word`` and move to its first document."""
        self.word = word
        self._block = self._table.get_index_block(word)
        log.debug("opened posting: %s", word)
        if self._block is not None:
            self._decoder.open(self._block.data, 0)
        else:
            self._decoder = UnifiedDecoder()
        self.go_next()

    def go_next(self) -> None:
        self._decoder.go_next()

    def go_until(self, target: int = 0, limit: int = 0) -> None:
        self._decoder.go_until(target)

    def is_end(self) -> bool:
        return self._decoder.is_end()

    @property
    def document_id(self) -> int:
        return self._decoder.document_id

    def close(self) -> None:
        self._block = None
        self.word = None
        self._decoder = UnifiedDecoder()
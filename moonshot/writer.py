"""Writers that add a document's tokens to a posting."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Iterable, TextIO


class IndexWriter(ABC):
    """Adds the words of a document to a named posting."""

    @abstractmethod
    def write(self, words: Iterable[str], document_id: int, posting_type: str) -> list[str]: ...


class AdvancedIndexWriter(IndexWriter):
    """Writer that reports each document's tokens in sorted order."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def write(self, words: Iterable[str], document_id: int, posting_type: str) -> list[str]:
        """Sort ``words``, report them with the document and posting, and return them."""
        out = self._out if self._out is not None else sys.stdout
        tokens = sorted(words)
        print(f"Writing document {document_id} to posting {posting_type}", file=out)
        for token in tokens:
            print(f"Token: {token}", file=out)
        return tokens
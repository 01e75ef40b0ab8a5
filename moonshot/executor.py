"""Runs searches over evaluation trees or index readers."""

from __future__ import annotations

import sys
from typing import TextIO

from moonshot.compiler import EvalTree
from moonshot.reader import IndexReader

_NOTHING = object()


class IndexSearchExecutor:
    """Executes a search and reports what it processes."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _say(self, message: str) -> None:
        print(message, file=self._out if self._out is not None else sys.stdout)

    def execute(self, target=_NOTHING) -> list[int]:
        """Execute ``target`` and return the document ids processed.

        With a reader, every remaining posting is visited and the reader is
        closed afterwards; document id 0 is skipped.
        """
        if target is _NOTHING:
            self._say("IndexSearchExecutor: Default execute method called")
            return []
        if target is None:
            self._say("IndexSearchExecutor: Null target")
            return []
        if isinstance(target, EvalTree):
            self._say("IndexSearchExecutor: Executing evaluation tree")
            return []
        if isinstance(target, IndexReader):
            self._say("IndexSearchExecutor: Executing with index reader")
            processed = []
            while not target.is_end():
                target.go_next()
                document_id = target.document_id
                if document_id != 0:
                    self._say(f"Processing document ID: {document_id}")
                    processed.append(document_id)
            target.close()
            return processed
        raise TypeError(f"cannot execute {type(target).__name__}")
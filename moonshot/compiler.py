"""Query compilation: evaluation trees, embeddings and configuration."""

from __future__ import annotations

import array
from dataclasses import dataclass, field

_TYPECODES = frozenset("bBhHiIlLqQfd")


@dataclass(frozen=True)
class EvalItem:
    """One item of an evaluation tree."""


@dataclass
class EvalTree:
    """An evaluation plan made of items, applied in phases."""

    items: list[EvalItem] = field(default_factory=list)


@dataclass
class ConfigParameters:
    """Parameters an index context is configured with."""


class Embeddings:
    """A zero-initialised vector of numbers of one array typecode."""

    def __init__(self, size: int, dtype: str = "f") -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        if dtype not in _TYPECODES:
            raise ValueError(f"unsupported element type: {dtype!r}")
        self.dtype = dtype
        self.values = array.array(dtype, bytes(array.array(dtype).itemsize * size))

    @property
    def nbytes(self) -> int:
        return self.values.itemsize * len(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int):
        return self.values[index]

    def __iter__(self):
        return iter(self.values)


class IndexSearchCompiler:
    """Compiles query strings into evaluation trees or query vectors."""

    def compile(self, query: str) -> EvalTree | None:
        """Compile ``query``; no query form is defined yet, so this gives None."""
        if not isinstance(query, str):
            raise TypeError("query must be a string")
        return None

    def compile_to_vector(self, query: str, dtype: str = "f") -> Embeddings | None:
        """Compile ``query`` to a vector; no encoder is defined yet, so this gives None."""
        if not isinstance(query, str):
            raise TypeError("query must be a string")
        if dtype not in _TYPECODES:
            raise ValueError(f"unsupported element type: {dtype!r}")
        return None
"""Unicode word tokenizers."""

from __future__ import annotations

import unicodedata
from abc import ABC, abstractmethod

import regex

_BOUNDARY = regex.compile(r"\b", flags=regex.WORD)
_WORDLIKE = regex.compile(r"[\p{L}\p{N}]")
_DOTLESS_I_LANGUAGES = frozenset({"tr", "az"})


class Tokenizer(ABC):
    """Splits text into tokens."""

    @abstractmethod
    def tokenize(self, text: str | bytes | None) -> list[str]: ...


class SmartTokenizer(Tokenizer):
    """Splits text on Unicode word boundaries into lower-cased words.

    Text is normalized to NFC first; spaces and punctuation are dropped.
    """

    def __init__(self, locale: str = "en") -> None:
        language = locale.replace("-", "_").split("_")[0].lower()
        if not language.isalpha() or not language.isascii():
            raise ValueError(f"invalid locale: {locale!r}")
        self.locale = locale
        self._language = language

    def _lower(self, word: str) -> str:
        if self._language in _DOTLESS_I_LANGUAGES:
            word = word.replace("I", "ı").replace("İ", "i")
        return word.lower()

    def tokenize(self, text: str | bytes | None) -> list[str]:
        if not text:
            return []
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8", errors="replace")
        normalized = unicodedata.normalize("NFC", text)
        cuts = sorted(
            {0, len(normalized)} | {m.start() for m in _BOUNDARY.finditer(normalized)}
        )
        tokens = []
        for start, end in zip(cuts, cuts[1:]):
            segment = normalized[start:end]
            if _WORDLIKE.search(segment):
                word = self._lower(segment)
                if word:
                    tokens.append(word)
        return tokens
"""Sequential character sources feeding CharacterModel.train."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Protocol

from .text_cleaning import CleanTextConfig, clean_text


logger = logging.getLogger(__name__)


class CharacterSource(Protocol):
    def has_next(self) -> bool: ...

    def read_char(self) -> str: ...


class CharacterStream:
    """
    Forward-only reader over the characters of a corpus.

    Characters are single code points, read in corpus order. The stream never
    rewinds; once exhausted it stays exhausted.

    Args:
        text: Corpus text
        clean: Optional normalization applied before streaming
    """

    def __init__(self, text: str, clean: CleanTextConfig | None = None):
        if clean is not None and not clean.is_noop():
            text = clean_text(text, clean)
        self._text = text
        self._pos = 0

    @classmethod
    def from_file(
        cls,
        path: str | os.PathLike,
        encoding: str = "utf-8",
        clean: CleanTextConfig | None = None,
    ) -> "CharacterStream":
        """Open a corpus file and stream its characters in file order."""
        path = Path(path)
        with open(path, "r", encoding=encoding, newline="") as f:
            text = f.read()
        logger.debug(f"Read {len(text)} characters from {path}")
        return cls(text, clean=clean)

    def __len__(self) -> int:
        return len(self._text)

    def __iter__(self) -> Iterator[str]:
        while self.has_next():
            yield self.read_char()

    @property
    def position(self) -> int:
        return self._pos

    def has_next(self) -> bool:
        return self._pos < len(self._text)

    def read_char(self) -> str:
        if not self.has_next():
            raise EOFError("character stream is exhausted")
        c = self._text[self._pos]
        self._pos += 1
        return c

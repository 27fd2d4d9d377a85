from __future__ import annotations

import os
from pathlib import Path

import pandas as pd

from .streams import CharacterStream
from .text_cleaning import CleanTextConfig


def load_corpus_csv(path: str | os.PathLike, column: str = "text", encoding: str = "utf-8") -> str:
    """Join one text column of a CSV file into a newline-separated corpus."""

    df = pd.read_csv(path, encoding=encoding)
    if column not in df.columns:
        raise ValueError(f"CSV must have a '{column}' column")
    return "\n".join(df[column].dropna().astype(str).tolist())


def open_corpus(
    path: str | os.PathLike,
    *,
    encoding: str = "utf-8",
    csv_column: str | None = None,
    clean: CleanTextConfig | None = None,
) -> CharacterStream:
    """Open a corpus as a character stream, from plain text or a CSV column."""

    if csv_column is not None:
        return CharacterStream(load_corpus_csv(Path(path), csv_column, encoding), clean=clean)
    return CharacterStream.from_file(path, encoding=encoding, clean=clean)

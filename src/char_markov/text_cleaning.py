from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B-\x1F\x7F]")


@dataclass(frozen=True)
class CleanTextConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_control_chars: bool = False
    normalize_whitespace: bool = False

    def is_noop(self) -> bool:
        return not (
            self.lowercase
            or self.strip_accents
            or self.remove_control_chars
            or self.normalize_whitespace
        )


def clean_text(text: str, config: CleanTextConfig | None = None) -> str:
    """Normalize a training corpus before it is streamed into a model.

    The default config returns the text unchanged. Newlines and tabs survive
    control-char removal since they carry structure a character model learns.
    """

    cfg = config or CleanTextConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        # Decompose, then drop the combining marks.
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub(" ", s)

    if cfg.normalize_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s

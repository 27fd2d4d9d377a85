"""Fixed-order character-level Markov text model.

Train a `CharacterModel` on a character stream, then generate text from it.
The command-line entry point lives in `char_markov.cli`.
"""

__version__ = "1.0.0"

from .config import Config
from .distribution import CharCount, CharDistribution
from .model import CharacterModel
from .streams import CharacterStream
from .text_cleaning import CleanTextConfig, clean_text

__all__ = [
    "Config",
    "CharCount",
    "CharDistribution",
    "CharacterModel",
    "CharacterStream",
    "CleanTextConfig",
    "clean_text",
]

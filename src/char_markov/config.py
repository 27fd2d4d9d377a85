"""
Configuration Module for the character model

Holds the settings of one training-and-generation run. Values come from the
dataclass defaults, optionally a JSON file, and finally the command line.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

from .text_cleaning import CleanTextConfig


# Seed used when generation is not requested to be random.
FIXED_SEED = 20


@dataclass
class Config:
    """
    Configuration class for a training-and-generation run.

    Attributes:
        window_length: Context size of the model
        initial_text: Text generation starts from
        text_length: Requested length of the generated text
        random_generation: Seed from system entropy instead of `seed`
        seed: Seed used when `random_generation` is False
        corpus_path: Path of the training corpus
        encoding: Encoding of the corpus file
        csv_column: When set, read the corpus as CSV and use this column
        lowercase: Lowercase the corpus before training
        strip_accents: Drop combining marks from the corpus
        remove_control_chars: Replace control characters other than newline and tab
        normalize_whitespace: Collapse runs of whitespace in the corpus
    """

    window_length: int = 3
    initial_text: str = ""
    text_length: int = 100
    random_generation: bool = False
    seed: int = FIXED_SEED
    corpus_path: Optional[str] = None
    encoding: str = "utf-8"
    csv_column: Optional[str] = None

    # Corpus normalization
    lowercase: bool = False
    strip_accents: bool = False
    remove_control_chars: bool = False
    normalize_whitespace: bool = False

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'Config':
        """Create Config instance from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    @classmethod
    def from_json(cls, path: str) -> 'Config':
        """Load a Config from a JSON object file."""
        with open(Path(path), 'r', encoding='utf-8') as f:
            config_dict = json.load(f)
        if not isinstance(config_dict, dict):
            raise ValueError(f"{path}: configuration must be a JSON object")
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict:
        """Convert Config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def model_seed(self) -> Optional[int]:
        """Seed for the model's random generator; None means non-reproducible."""
        return None if self.random_generation else self.seed

    def clean_config(self) -> CleanTextConfig:
        return CleanTextConfig(
            lowercase=self.lowercase,
            strip_accents=self.strip_accents,
            remove_control_chars=self.remove_control_chars,
            normalize_whitespace=self.normalize_whitespace,
        )

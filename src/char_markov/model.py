"""
Character-level Markov Model

This module implements a fixed-order character model. Training slides a
window of `window_length` characters over a corpus and records, for every
window, which character followed it. Generation repeatedly looks up the last
`window_length` characters of the text so far and samples the next character
from the recorded distribution.

Unseen contexts are not smoothed: generation simply stops when it reaches a
context that never occurred in the corpus.
"""

import logging
import os
from typing import Dict, Optional, Union

import numpy as np

from .distribution import NO_DATA_CHAR, CharDistribution
from .streams import CharacterSource, CharacterStream
from .tokenization import iter_transitions


logger = logging.getLogger(__name__)


class CharacterModel:
    """
    Fixed-order Markov model over characters.

    The random generator is owned by the model and shared by every sampling
    call, so concurrent `generate` calls on one instance must be serialized
    by the caller. `train` must not overlap with `generate`.

    Attributes:
        window_length: Context size; every key of `context_map` has this length
        seed: Seed of the random generator, or None for system entropy
        context_map: Context string to next-character distribution
    """

    def __init__(self, window_length: int, seed: Optional[int] = None):
        """
        Initialize the model.

        Args:
            window_length: Number of preceding characters used as context
                (must be >= 1; training raises ValueError otherwise)
            seed: Makes generation reproducible when given
        """
        self.window_length = window_length
        self.seed = seed
        # default_rng only takes non-negative seeds.
        self.random_generator = np.random.default_rng(
            None if seed is None else seed % 2 ** 64
        )
        self.context_map: Dict[str, CharDistribution] = {}

    def train(self, source: Union[CharacterSource, str, os.PathLike]) -> None:
        """
        Learn next-character counts from a corpus.

        A source shorter than `window_length` leaves the model unchanged.
        Every distribution is re-finalized once the scan completes, so
        training again on more data keeps probabilities consistent.

        Args:
            source: A character source, or the path of a corpus file
        """
        if isinstance(source, (str, os.PathLike)):
            source = CharacterStream.from_file(source)

        transitions = 0
        for window, c in iter_transitions(source, self.window_length):
            probs = self.context_map.get(window)
            if probs is None:
                probs = CharDistribution()
                self.context_map[window] = probs
            probs.update(c)
            transitions += 1

        for probs in self.context_map.values():
            self.calculate_probabilities(probs)

        logger.info(
            f"Trained on {transitions} transitions; "
            f"model has {len(self.context_map)} contexts"
        )

    @staticmethod
    def calculate_probabilities(probs: Optional[CharDistribution]) -> None:
        """Set p and cp of every entry of `probs` from its counts."""
        if probs is None:
            return
        probs.finalize()

    def get_random_char(self, probs: Optional[CharDistribution]) -> str:
        """
        Sample one character by inverse-CDF lookup.

        Args:
            probs: A finalized distribution

        Returns:
            The sampled character, or a single space for a missing or
            empty distribution
        """
        if probs is None or len(probs) == 0:
            return NO_DATA_CHAR

        r = self.random_generator.random()
        return probs.character_at(r)

    def generate(self, initial_text: Optional[str], text_length: int) -> str:
        """
        Generate text that continues `initial_text`.

        Args:
            initial_text: Text to start from
            text_length: Length of the text to return, including
                `initial_text`

        Returns:
            The generated text. It is shorter than `text_length` when a
            context never seen in training is reached, and is
            `initial_text` unchanged when it is shorter than the window.
        """
        if not initial_text:
            return ""
        if text_length <= len(initial_text):
            return initial_text[:text_length]
        if len(initial_text) < self.window_length:
            return initial_text

        generated = list(initial_text)
        while len(generated) < text_length:
            window = "".join(generated[len(generated) - self.window_length:])
            probs = self.context_map.get(window)
            if probs is None:
                logger.debug(
                    f"Unseen context {window!r}; stopping at {len(generated)} characters"
                )
                break
            generated.append(self.get_random_char(probs))

        return "".join(generated)

    def get_distribution(self, context: str) -> Optional[CharDistribution]:
        """Return the distribution recorded for `context`, if any."""
        return self.context_map.get(context)

    def stats(self) -> Dict[str, int]:
        """Return basic statistics about the trained model."""
        return {
            "window_length": self.window_length,
            "contexts": len(self.context_map),
            "transitions": sum(probs.total() for probs in self.context_map.values()),
        }

    def describe(self) -> str:
        """Render the model as one `context : distribution` line per context."""
        lines = [f"{key} : {probs}\n" for key, probs in self.context_map.items()]
        return "".join(lines)

    def __str__(self) -> str:
        return self.describe()

"""
Character-level Markov text generator

Command-line entry point: trains a CharacterModel on a corpus file and
prints text generated from an initial string.

Usage:
    char-markov 3 "The " 200 fixed corpus.txt       # reproducible (seed 20)
    char-markov 3 "The " 200 random corpus.txt      # different every run
    char-markov 2 "ab" 50 fixed reviews.csv --csv-column text
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Config
from .datasets import open_corpus
from .model import CharacterModel


logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging on stderr so stdout carries only generated text."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-markov",
        description="Train a character-level Markov model on a corpus and generate text",
    )

    parser.add_argument("window_length", type=int, help="Context size in characters")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("text_length", type=int, help="Length of the generated text")
    parser.add_argument(
        "mode",
        help="'random' for non-reproducible output; anything else uses a fixed seed",
    )
    parser.add_argument("corpus_path", help="Path to the training corpus")

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed used in fixed mode (default: 20)"
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )
    parser.add_argument("--encoding", type=str, help="Corpus file encoding")
    parser.add_argument(
        "--csv-column",
        type=str,
        help="Read the corpus as CSV and train on this column"
    )
    parser.add_argument(
        "--lowercase",
        action="store_true",
        default=None,
        help="Lowercase the corpus before training"
    )
    parser.add_argument(
        "--show-model",
        action="store_true",
        help="Print the trained model to stderr"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Merge the optional JSON config file with command-line values."""
    config = Config.from_json(args.config) if args.config else Config()

    config.window_length = args.window_length
    config.initial_text = args.initial_text
    config.text_length = args.text_length
    config.random_generation = args.mode == "random"
    config.corpus_path = args.corpus_path

    for name in ("seed", "encoding", "csv_column", "lowercase"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)

    return config


def run(config: Config, show_model: bool = False) -> str:
    """Train a model as configured and return the generated text."""
    model = CharacterModel(config.window_length, seed=config.model_seed())

    source = open_corpus(
        config.corpus_path,
        encoding=config.encoding,
        csv_column=config.csv_column,
        clean=config.clean_config(),
    )
    model.train(source)
    logger.info(f"Model stats: {model.stats()}")

    if show_model:
        sys.stderr.write(model.describe())

    return model.generate(config.initial_text, config.text_length)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        config = config_from_args(args)
        text = run(config, show_model=args.show_model)
    except (OSError, ValueError) as e:
        logger.error(f"{e}")
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

from char_markov import CharacterModel, CharacterStream


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
        "a character model learns which letter comes next. "
    )

    for n in (2, 4, 6):
        model = CharacterModel(n, seed=20)
        model.train(CharacterStream(text))
        print(f"n={n} {model.stats()}")
        print("  ", model.generate("natural"[: max(n, 2)], 120))


if __name__ == "__main__":
    main()

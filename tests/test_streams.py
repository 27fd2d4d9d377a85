"""
Tests for character sources, corpus loading and corpus cleaning.
"""

import unittest
import sys
import tempfile
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_markov.datasets import load_corpus_csv, open_corpus
from char_markov.streams import CharacterStream
from char_markov.text_cleaning import CleanTextConfig, clean_text
from char_markov.tokenization import iter_transitions, read_window


class TestCharacterStream(unittest.TestCase):
    """Tests for CharacterStream."""

    def test_reads_in_order(self):
        stream = CharacterStream("abc")
        out = []
        while stream.has_next():
            out.append(stream.read_char())
        self.assertEqual(out, ['a', 'b', 'c'])
        self.assertFalse(stream.has_next())

    def test_read_past_end_raises(self):
        stream = CharacterStream("")
        self.assertFalse(stream.has_next())
        with self.assertRaises(EOFError):
            stream.read_char()

    def test_iteration_consumes(self):
        stream = CharacterStream("héllo")
        self.assertEqual(list(stream), list("héllo"))
        self.assertEqual(list(stream), [])
        self.assertEqual(stream.position, 5)

    def test_from_file_keeps_newlines(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "corpus.txt"
            path.write_bytes("one\r\ntwo\n".encode("utf-8"))
            stream = CharacterStream.from_file(path)
        self.assertEqual("".join(stream), "one\r\ntwo\n")

    def test_from_file_missing(self):
        with self.assertRaises(FileNotFoundError):
            CharacterStream.from_file("/nonexistent/corpus.txt")

    def test_clean_applied(self):
        stream = CharacterStream("Ab  C", clean=CleanTextConfig(lowercase=True))
        self.assertEqual("".join(stream), "ab  c")


class TestTransitions(unittest.TestCase):
    """Tests for sliding-window helpers."""

    def test_read_window_short_source(self):
        self.assertEqual(read_window(CharacterStream("hi"), 5), "hi")

    def test_transitions(self):
        pairs = list(iter_transitions(CharacterStream("abcd"), 2))
        self.assertEqual(pairs, [("ab", "c"), ("bc", "d")])

    def test_no_transitions_for_short_source(self):
        self.assertEqual(list(iter_transitions(CharacterStream("ab"), 2)), [])
        self.assertEqual(list(iter_transitions(CharacterStream("a"), 2)), [])

    def test_window_must_be_positive(self):
        with self.assertRaises(ValueError):
            list(iter_transitions(CharacterStream("abc"), 0))


class TestCleanText(unittest.TestCase):
    """Tests for corpus normalization."""

    def test_default_is_identity(self):
        raw = "Café\t au  lait\n"
        self.assertEqual(clean_text(raw), raw)
        self.assertTrue(CleanTextConfig().is_noop())

    def test_strip_accents(self):
        cfg = CleanTextConfig(strip_accents=True)
        self.assertEqual(clean_text("Café naïve", cfg), "Cafe naive")

    def test_control_chars_keep_newlines(self):
        cfg = CleanTextConfig(remove_control_chars=True)
        self.assertEqual(clean_text("a\x00b\nc\td", cfg), "a b\nc\td")

    def test_normalize_whitespace(self):
        cfg = CleanTextConfig(normalize_whitespace=True, lowercase=True)
        self.assertEqual(clean_text("  Hello \n\n World ", cfg), "hello world")


class TestCsvCorpus(unittest.TestCase):
    """Tests for CSV corpus loading."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "corpus.csv"
        self.path.write_text("id,text\n1,hello\n2,world\n", encoding="utf-8")

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_column(self):
        self.assertEqual(load_corpus_csv(self.path), "hello\nworld")

    def test_missing_column(self):
        with self.assertRaises(ValueError):
            load_corpus_csv(self.path, column="body")

    def test_open_corpus_csv(self):
        stream = open_corpus(self.path, csv_column="text")
        self.assertEqual("".join(stream), "hello\nworld")

    def test_open_corpus_plain(self):
        stream = open_corpus(self.path)
        self.assertEqual("".join(stream), "id,text\n1,hello\n2,world\n")


if __name__ == '__main__':
    unittest.main()

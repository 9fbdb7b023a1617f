import sys
import unittest
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.explain import DEFAULT_EXPLAIN_CONFIG, normalize_text, split_sentences, tokenize  # noqa: E402


class NormalizeTextTests(unittest.TestCase):
    def test_collapses_whitespace_and_newlines(self):
        self.assertEqual(normalize_text("  Built \n\n APIs\tfor   payments  "), "Built APIs for payments")

    def test_non_string_input_becomes_empty(self):
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text(42), "")
        self.assertEqual(normalize_text("   \n "), "")


class SplitSentencesTests(unittest.TestCase):
    def test_splits_on_punctuation_and_lines(self):
        text = "Led the migration.\nBuilt APIs! Did it scale? yes\n\n  \nShipped   weekly"
        self.assertEqual(
            list(split_sentences(text)),
            ["Led the migration.", "Built APIs!", "Did it scale?", "yes", "Shipped weekly"],
        )

    def test_keeps_decimal_points_inside_sentence(self):
        self.assertEqual(list(split_sentences("Cut latency by 3.5x in 2023.")), ["Cut latency by 3.5x in 2023."])

    def test_generator_is_not_restartable(self):
        sentences = split_sentences("One. Two.")
        self.assertEqual(list(sentences), ["One.", "Two."])
        self.assertEqual(list(sentences), [])

    def test_long_sentences_are_not_truncated(self):
        sentence = "word " * 100
        self.assertEqual(list(split_sentences(sentence)), [sentence.strip()])

    def test_empty_and_missing_input(self):
        self.assertEqual(list(split_sentences("")), [])
        self.assertEqual(list(split_sentences(None)), [])


class TokenizeTests(unittest.TestCase):
    def test_lowercases_and_drops_stopwords_and_short_tokens(self):
        tokens = tokenize("Looking for a Python backend engineer with strong SQL skills.")
        self.assertEqual(tokens, ["python", "backend", "engineer", "sql"])

    def test_keeps_symbol_and_allow_listed_short_tokens(self):
        tokens = tokenize("C# and C++ developers for AI/ML, Go and Node.js")
        self.assertEqual(tokens, ["c#", "c++", "developers", "ai", "ml", "node", "js"])

    def test_drops_symbol_only_runs(self):
        self.assertEqual(tokenize("+++ ### python"), ["python"])

    def test_preserves_order_and_duplicates(self):
        self.assertEqual(tokenize("Python, Django, python"), ["python", "django", "python"])

    def test_stopwords_are_injectable(self):
        config = DEFAULT_EXPLAIN_CONFIG.with_stopwords(remove=["team"], extra=["django"], version="test")
        self.assertEqual(tokenize("Python team Django", config), ["python", "team"])
        self.assertEqual(config.stopwords_version, "test")
        self.assertIn("team", DEFAULT_EXPLAIN_CONFIG.stopwords)

    def test_numeric_tokens_kept_by_default_and_droppable(self):
        self.assertEqual(tokenize("2023 python 10x"), ["2023", "python", "10x"])
        config = replace(DEFAULT_EXPLAIN_CONFIG, drop_numeric_tokens=True)
        self.assertEqual(tokenize("2023 python 10x", config), ["python", "10x"])

    def test_empty_input(self):
        self.assertEqual(tokenize(""), [])


if __name__ == "__main__":
    unittest.main()

"""
Tests for the package-level convenience functions.
"""
import unittest
from concurrent.futures import ThreadPoolExecutor

import esperanto_analyzer
from esperanto_analyzer import (
    AnalysisTrace,
    PartOfSpeech,
    ValidationError,
    analyze_paragraph,
    analyze_sentence,
    analyze_word,
    analyze_word_all,
    get_part_of_speech_summary,
    get_sentence_analyzer,
    get_word_analyzer,
    is_esperanto_sentence,
    is_esperanto_word,
)


class TestPackageInfo(unittest.TestCase):

    def test_constants(self):
        self.assertEqual(esperanto_analyzer.VERSION, "1.0.0")
        self.assertEqual(esperanto_analyzer.__version__, esperanto_analyzer.VERSION)
        self.assertEqual(esperanto_analyzer.LIBRARY_NAME, "esperanto-analyzer")
        self.assertEqual(esperanto_analyzer.SUPPORTED_LANGUAGE, "Esperanto")

    def test_all_exports_exist(self):
        for name in esperanto_analyzer.__all__:
            self.assertTrue(hasattr(esperanto_analyzer, name), name)


class TestSharedAnalyzers(unittest.TestCase):

    def test_same_instance(self):
        """Tests that repeated calls return the shared analyzers."""
        self.assertIs(get_word_analyzer(), get_word_analyzer())
        self.assertIs(get_sentence_analyzer(), get_sentence_analyzer())
        self.assertIs(get_sentence_analyzer().word_analyzer, get_word_analyzer())

    def test_shared_across_threads(self):
        """Tests that concurrent first use still yields one analyzer."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            analyzers = list(pool.map(lambda _: get_word_analyzer(), range(32)))
        self.assertTrue(all(a is analyzers[0] for a in analyzers))

    def test_concurrent_analysis(self):
        words = ["hundon", "kantas", "bela", "kiu", "la", "tri"] * 10
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(analyze_word, words))
        expected = [analyze_word(word) for word in words]
        self.assertEqual(results, expected)


class TestWordFunctions(unittest.TestCase):

    def test_analyze_word(self):
        result = analyze_word("hundojn")
        self.assertEqual(result.part_of_speech, PartOfSpeech.NOUN)
        self.assertEqual(result.morphology.root, "hund")

    def test_analyze_word_invalid(self):
        with self.assertRaises(ValidationError):
            analyze_word("   ")

    def test_analyze_word_all(self):
        self.assertEqual([r.part_of_speech for r in analyze_word_all("bela")], [PartOfSpeech.ADJECTIVE])
        self.assertEqual(len(analyze_word_all("estas")), 2)

    def test_is_esperanto_word(self):
        self.assertTrue(is_esperanto_word("domo"))
        self.assertTrue(is_esperanto_word("bela"))
        self.assertFalse(is_esperanto_word("house"))
        self.assertFalse(is_esperanto_word("beautiful"))

    def test_is_esperanto_word_never_raises(self):
        for bad in ["", "  ", None, 5]:
            self.assertFalse(is_esperanto_word(bad))


class TestSentenceFunctions(unittest.TestCase):

    def test_analyze_sentence(self):
        result = analyze_sentence("Mi amas vin.")
        self.assertEqual(result.statistics.total_words, 3)

    def test_analyze_sentence_with_trace(self):
        trace = AnalysisTrace("La domo.")
        analyze_sentence("La domo.", trace=trace)
        self.assertEqual(trace.steps[0]["name"], "Tokenizer")
        self.assertIsNotNone(trace.result)

    def test_analyze_sentence_invalid(self):
        with self.assertRaises(ValidationError):
            analyze_sentence("")

    def test_analyze_paragraph(self):
        results = analyze_paragraph("Mi amas vin. Vi amas min.")
        self.assertEqual(len(results), 2)

    def test_is_esperanto_sentence(self):
        self.assertTrue(is_esperanto_sentence("Mi estas feliĉa."))
        self.assertFalse(is_esperanto_sentence("I am happy."))
        self.assertFalse(is_esperanto_sentence(None))
        self.assertTrue(is_esperanto_sentence("hundo xyz", threshold=0.5))

    def test_get_part_of_speech_summary(self):
        self.assertEqual(get_part_of_speech_summary("Mi amas la belan hundon."), {
            "Pronoun": 1, "Verb": 1, "Article": 1, "Adjective": 1, "Noun": 1,
        })


if __name__ == '__main__':
    unittest.main()

"""
Tests for text normalization.
"""
import unittest

from esperanto_analyzer.text import convert_x_system, normalize_text


class TestConvertXSystem(unittest.TestCase):

    def test_lowercase(self):
        self.assertEqual(convert_x_system("cxu gxi hxoro jxurnalo sxi auxto"),
                         "ĉu ĝi ĥoro ĵurnalo ŝi aŭto")

    def test_uppercase_and_mixed(self):
        """Tests that the letter case of the base letter decides the result."""
        self.assertEqual(convert_x_system("Cxu CXU cXu"), "Ĉu ĈU ĉu")
        self.assertEqual(convert_x_system("SXI"), "ŜI")

    def test_leaves_other_x_alone(self):
        self.assertEqual(convert_x_system("xenono ekzemplo ax"), "xenono ekzemplo ax")

    def test_no_change(self):
        self.assertEqual(convert_x_system("La domo estas bela."), "La domo estas bela.")


class TestNormalizeText(unittest.TestCase):

    def test_dashes_separate_words(self):
        self.assertEqual(normalize_text("hundo—kato–muso"), "hundo kato muso")

    def test_quotes(self):
        self.assertEqual(normalize_text("“Saluton” ‘amiko’ „jes“ «ne»"),
                         "\"Saluton\" 'amiko' \"jes\" \"ne\"")

    def test_whitespace_collapsed(self):
        self.assertEqual(normalize_text("  Mi \t amas\n\nvin.  "), "Mi amas vin.")

    def test_x_system_applied(self):
        self.assertEqual(normalize_text("Cxu vi sxatas gxin?"), "Ĉu vi ŝatas ĝin?")

    def test_empty(self):
        self.assertEqual(normalize_text(""), "")


if __name__ == '__main__':
    unittest.main()

"""
Noun analyzer.

Esperanto nouns end in -o, optionally followed by the plural -j and the
accusative -n: hundo, hundoj, hundon, hundojn.
"""

import re

from ..errors import ValidationError
from ..types import NounMorphology, PartOfSpeech
from .base import LETTERS, MorphologicalAnalyzer


class NounAnalyzer(MorphologicalAnalyzer):
    name = "NounAnalyzer"
    part_of_speech = PartOfSpeech.NOUN

    # root (2+ letters) + o + (j) + (n)
    match_regex = re.compile(f"^[{LETTERS}]{{2,}}o(j?n?)$")

    def extract_root(self, word: str) -> str:
        root = word
        if root.endswith('n'):
            root = root[:-1]
        if root.endswith('j'):
            root = root[:-1]
        if root.endswith('o'):
            root = root[:-1]
        return root

    def _extract_features(self, word: str) -> NounMorphology:
        return NounMorphology(
            root=self.extract_root(word),
            is_plural=self.check_plural(word),
            is_accusative=self.check_accusative(word),
        )

    def validate_word(self, word: str) -> None:
        super().validate_word(word)
        if len(word) < 3:
            raise ValidationError("Noun must be at least 3 characters long", word)
        if 'o' not in word:
            raise ValidationError('Invalid noun: must contain the vowel "o"', word)

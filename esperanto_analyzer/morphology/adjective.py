"""
Adjective analyzer.

Adjectives end in -a and agree with their noun in number and case:
bela, belaj, belan, belajn.
"""

import re

from ..errors import ValidationError
from ..types import AdjectiveMorphology, Agreement, PartOfSpeech
from .base import LETTERS, MorphologicalAnalyzer


class AdjectiveAnalyzer(MorphologicalAnalyzer):
    name = "AdjectiveAnalyzer"
    part_of_speech = PartOfSpeech.ADJECTIVE

    match_regex = re.compile(f"^[{LETTERS}]{{2,}}a(j?n?)$")

    def extract_root(self, word: str) -> str:
        root = word.lower()
        if root.endswith('n'):
            root = root[:-1]
        if root.endswith('j'):
            root = root[:-1]
        if root.endswith('a'):
            root = root[:-1]
        return root

    def _extract_features(self, word: str) -> AdjectiveMorphology:
        is_plural = self.check_plural(word)
        is_accusative = self.check_accusative(word)
        return AdjectiveMorphology(
            root=self.extract_root(word),
            is_plural=is_plural,
            is_accusative=is_accusative,
            agreement=Agreement(plural=is_plural, accusative=is_accusative),
        )

    def validate_word(self, word: str) -> None:
        super().validate_word(word)
        if len(word) < 3:
            raise ValidationError("Adjective must be at least 3 characters long", word)
        if 'a' not in word.lower():
            raise ValidationError('Invalid adjective: must contain the vowel "a"', word)

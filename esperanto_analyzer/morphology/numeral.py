"""
Numeral analyzer.

Covers:
- Basic roots and their concatenations: unu, du, dek, dudek, tricent
- Ordinals in -a (unua, dua, dekduan)
- Adverbials in -e (unue, due)
- Fractionals in -on (duon)
- Multiplicatives in -obl- (duobla, trioble)
- Collectives in -op- (duope, triopa)
- A handful of special number words (ambaŭ, paro, trio, ...)
"""

import re

from ..types import NumeralMorphology, NumeralType, PartOfSpeech
from .base import MorphologicalAnalyzer

BASIC_NUMBERS = (
    'nul',      # zero
    'unu',      # one
    'du',       # two
    'tri',      # three
    'kvar',     # four
    'kvin',     # five
    'ses',      # six
    'sep',      # seven
    'ok',       # eight
    'naŭ',      # nine
    'dek',      # ten
    'cent',     # hundred
    'mil',      # thousand
    'milion',   # million
    'miliard',  # billion
)

SPECIAL_NUMBERS = (
    'ambaŭ',     # both
    'paro',      # pair
    'duopo',     # duo
    'trio',      # trio
    'kvarteto',  # quartet
    'dekumo',    # decimal
    'pecento',   # percent
    'promilo',   # per mill
)

ORDINAL_ENDING = re.compile(r"a(j?n?)$")
ADVERBIAL_ENDING = re.compile(r"e$")
FRACTIONAL_ENDING = re.compile(r"on(j?n?)$")
MULTIPLICATIVE_ENDING = re.compile(r"obl[ae](j?n?)$")
COLLECTIVE_ENDING = re.compile(r"op[ae](j?n?)$")
AGREEMENT_ENDING = re.compile(r"(j?n?)$")

# The first of these that matches is stripped to get the root
ROOT_ENDINGS = (
    ORDINAL_ENDING,
    ADVERBIAL_ENDING,
    FRACTIONAL_ENDING,
    MULTIPLICATIVE_ENDING,
    COLLECTIVE_ENDING,
    AGREEMENT_ENDING,
)

# Bare cardinals such as "kvin" or "milion" end in -n without being accusative
CARDINAL = re.compile(f"({'|'.join(BASIC_NUMBERS)})+")


class NumeralAnalyzer(MorphologicalAnalyzer):
    name = "NumeralAnalyzer"
    part_of_speech = PartOfSpeech.NUMERAL

    match_regex = re.compile(
        f"^(({'|'.join(BASIC_NUMBERS)})+"
        f"(a(j?n?)|e|on(j?n?)|obl[ae](j?n?)|op[ae](j?n?))?"
        f"|({'|'.join(SPECIAL_NUMBERS)})(j?n?))$",
        re.IGNORECASE,
    )

    def extract_root(self, word: str) -> str:
        normalized = word.lower()
        if CARDINAL.fullmatch(normalized):
            return normalized
        for pattern in ROOT_ENDINGS:
            found = pattern.search(normalized)
            if found:
                return normalized[:len(normalized) - len(found.group(0))]
        return normalized

    def _extract_features(self, word: str) -> NumeralMorphology:
        root = self.extract_root(word)
        return NumeralMorphology(
            root=root,
            is_plural=self.check_plural(word),
            is_accusative=self.check_accusative(word),
            numeral_type=self.numeral_type(word),
            is_ordinal=self.is_ordinal(word),
            is_adverbial=self.is_adverbial(word),
            is_fractional=self.is_fractional(word),
            is_multiplicative=self.is_multiplicative(word),
            is_collective=self.is_collective(word),
            is_compound=self.is_compound(root),
        )

    def numeral_type(self, word: str) -> NumeralType:
        if self.is_ordinal(word):
            return NumeralType.ORDINAL
        if self.is_adverbial(word):
            return NumeralType.ADVERBIAL
        if self.is_fractional(word):
            return NumeralType.FRACTIONAL
        if self.is_multiplicative(word):
            return NumeralType.MULTIPLICATIVE
        if self.is_collective(word):
            return NumeralType.COLLECTIVE
        if self.is_special(word):
            return NumeralType.SPECIAL
        return NumeralType.CARDINAL

    @staticmethod
    def is_ordinal(word: str) -> bool:
        return ORDINAL_ENDING.search(word.lower()) is not None

    def is_adverbial(self, word: str) -> bool:
        return word.lower().endswith('e') and self.extract_root(word) in BASIC_NUMBERS

    @staticmethod
    def is_fractional(word: str) -> bool:
        normalized = word.lower()
        return FRACTIONAL_ENDING.search(normalized) is not None and not CARDINAL.fullmatch(normalized)

    @staticmethod
    def is_multiplicative(word: str) -> bool:
        return MULTIPLICATIVE_ENDING.search(word.lower()) is not None

    @staticmethod
    def is_collective(word: str) -> bool:
        return COLLECTIVE_ENDING.search(word.lower()) is not None

    def is_special(self, word: str) -> bool:
        return self.extract_root(word) in SPECIAL_NUMBERS

    @staticmethod
    def is_compound(root: str) -> bool:
        """
        Count basic roots occurring inside the root.

        Plain substring search: "dekmilion" counts dek, mil and milion.
        """
        found = sum(1 for number in BASIC_NUMBERS if number in root and number != root)
        return found > 1

    def check_plural(self, word: str) -> bool:
        return 'j' in word.lower()

    def check_accusative(self, word: str) -> bool:
        normalized = word.lower()
        return normalized.endswith('n') and not CARDINAL.fullmatch(normalized)

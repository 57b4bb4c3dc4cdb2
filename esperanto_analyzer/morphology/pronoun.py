"""
Pronoun analyzer.

Esperanto pronouns include:
- Personal pronouns: mi, vi, li, ŝi, ĝi, ni, ili, oni, si (+ accusative -n)
- Possessives: mia, via, lia, ... (+ agreement -j, -n)
- The correlative table: ki-/ti-/i-/ĉi-/neni- crossed with -u, -o, -a, -e,
  -al, -am, -om, -el
- A few special forms (mem, sama, ...) and two-word "ĉi tiu" compounds
"""

import re
from typing import List, Optional

from ..types import CorrelativeFunction, PartOfSpeech, PronounMorphology, PronounType
from .base import LETTERS, MorphologicalAnalyzer

PERSONAL_PRONOUNS = (
    'mi',   # I
    'vi',   # you
    'li',   # he
    'ŝi',   # she
    'ĝi',   # it
    'ni',   # we
    'ili',  # they
    'oni',  # one (impersonal)
    'si',   # reflexive
)

POSSESSIVE_ROOTS = PERSONAL_PRONOUNS

CORRELATIVE_BEGINNINGS = (
    'ki',    # interrogative/relative
    'ti',    # demonstrative
    'i',     # indefinite
    'ĉi',    # universal
    'neni',  # negative
)

CORRELATIVE_ENDINGS = (
    'u',   # individual
    'o',   # thing
    'a',   # quality/kind
    'e',   # place
    'al',  # reason
    'am',  # time
    'om',  # quantity
    'el',  # manner
)

SPECIAL_PRONOUNS = (
    'ĉi',    # this (alone)
    'mem',   # self (emphatic)
    'sama',  # same
    'tia',   # such
    'tial',  # therefore
    'tiam',  # then
    'tie',   # there
    'tiel',  # thus, so
    'tiom',  # so much/many
)


def generate_correlatives() -> List[str]:
    """Cross every beginning with every ending; -u forms also get a -uo variant."""
    correlatives = []
    for beginning in CORRELATIVE_BEGINNINGS:
        for ending in CORRELATIVE_ENDINGS:
            correlatives.append(beginning + ending)
            if ending == 'u':
                correlatives.append(beginning + ending + 'o')
    return correlatives


CORRELATIVES = tuple(generate_correlatives())
_CORRELATIVE_SET = frozenset(CORRELATIVES)

# Checked in this order against the root
CORRELATIVE_FUNCTIONS = (
    (('u', 'uo'), CorrelativeFunction.INDIVIDUAL),
    (('o',), CorrelativeFunction.THING),
    (('a',), CorrelativeFunction.QUALITY),
    (('e',), CorrelativeFunction.PLACE_MANNER),
    (('al',), CorrelativeFunction.REASON),
    (('am',), CorrelativeFunction.TIME),
    (('om',), CorrelativeFunction.QUANTITY),
    (('el',), CorrelativeFunction.MANNER),
)

AGREEMENT_ENDING = re.compile(r"j?n?$")
POSSESSIVE_ENDING = re.compile(r"aj?n?$")

COMPOUND_PREFIX = re.compile(r"^ĉi\s+")


class PronounAnalyzer(MorphologicalAnalyzer):
    name = "PronounAnalyzer"
    part_of_speech = PartOfSpeech.PRONOUN

    match_regex = re.compile(
        "^("
        f"({'|'.join(PERSONAL_PRONOUNS)})(n?)|"
        f"({'|'.join(POSSESSIVE_ROOTS)})a(j?n?)|"
        f"({'|'.join(CORRELATIVES)})(j?n?)|"
        f"({'|'.join(SPECIAL_PRONOUNS)})(j?n?)|"
        r"ĉi\s+(ti[uoael]|ti[ao]m|tiel)(j?n?)"
        ")$",
        re.IGNORECASE,
    )

    # "ĉi tiu" and friends contain a space
    valid_chars = re.compile(f"[{LETTERS}\\s]+")

    def extract_root(self, word: str) -> str:
        normalized = COMPOUND_PREFIX.sub('', word.lower().strip())

        if self.is_possessive(normalized):
            return POSSESSIVE_ENDING.sub('', normalized)

        # kiujn -> kiu, min -> mi; table forms like "tia" keep their vowel
        base = AGREEMENT_ENDING.sub('', normalized)
        return base or normalized

    def _extract_features(self, word: str) -> PronounMorphology:
        return PronounMorphology(
            root=self.extract_root(word),
            is_plural=self.check_plural(word),
            is_accusative=self.check_accusative(word),
            pronoun_type=self.pronoun_type(word),
            is_personal=self.is_personal(word),
            is_possessive=self.is_possessive(word),
            is_correlative=self.is_correlative(word),
            is_reflexive=self.is_reflexive(word),
            is_compound=self.is_compound(word),
            correlative_function=self.correlative_function(word),
        )

    def pronoun_type(self, word: str) -> PronounType:
        if self.is_possessive(word):
            return PronounType.POSSESSIVE
        if self.is_reflexive(word):
            return PronounType.REFLEXIVE
        if self.is_personal(word):
            return PronounType.PERSONAL

        root = self.extract_root(word)

        if root.startswith('ti'):
            return PronounType.DEMONSTRATIVE
        if root.startswith('ki'):
            return PronounType.INTERROGATIVE if '?' in word else PronounType.RELATIVE
        if root.startswith('i') and not root.startswith('ili'):
            return PronounType.INDEFINITE
        if root.startswith('ĉi'):
            return PronounType.UNIVERSAL
        if root.startswith('neni'):
            return PronounType.NEGATIVE

        return PronounType.SPECIAL

    def is_personal(self, word: str) -> bool:
        return self.extract_root(word) in PERSONAL_PRONOUNS

    @staticmethod
    def is_possessive(word: str) -> bool:
        normalized = word.lower()
        return (
            POSSESSIVE_ENDING.search(normalized) is not None
            and any(normalized.startswith(root + 'a') for root in POSSESSIVE_ROOTS)
        )

    def is_correlative(self, word: str) -> bool:
        return self.extract_root(word) in _CORRELATIVE_SET

    def is_reflexive(self, word: str) -> bool:
        return self.extract_root(word).startswith('si')

    @staticmethod
    def is_compound(word: str) -> bool:
        """
        Two-word forms such as "ĉi tiu".

        Single words of the ĉi- series (ĉiu, ĉio) are table correlatives,
        not compounds.
        """
        return any(ch.isspace() for ch in word)

    def correlative_function(self, word: str) -> Optional[CorrelativeFunction]:
        if not self.is_correlative(word):
            return None

        root = self.extract_root(word)
        for endings, function in CORRELATIVE_FUNCTIONS:
            if root.endswith(endings):
                return function
        return None

    def check_plural(self, word: str) -> bool:
        return 'j' in word.lower()

    def check_accusative(self, word: str) -> bool:
        return word.lower().endswith('n')

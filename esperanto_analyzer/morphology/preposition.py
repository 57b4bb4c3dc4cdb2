"""
Preposition analyzer.

Prepositions are invariable and come from a closed list, including a few
multi-word forms such as "dank' al" and "rilate al".
"""

import re

from ..types import PartOfSpeech, PrepositionMorphology, SemanticCategory
from .base import LETTERS, InvariableAnalyzer

PREPOSITIONS = (
    'al',        # to, towards
    'anstataŭ',  # instead of
    'antaŭ',     # before, in front of
    'apud',      # beside, near
    'ce',        # at, by (archaic spelling of ĉe)
    'ĉe',        # at, by
    'ĉirkaŭ',    # around
    'da',        # of (quantity)
    'de',        # of, from
    'dum',       # during, while
    'ekster',    # outside of
    'el',        # out of, from
    'en',        # in
    'estas',     # sometimes used prepositionally
    'for',       # away
    'ĝis',       # until, up to
    'inter',     # between, among
    'je',        # universal preposition
    'kontraŭ',   # against
    'krom',      # except, besides
    'kun',       # with
    'laŭ',       # according to, along
    'malgraŭ',   # despite
    'per',       # by means of
    'po',        # at the rate of
    'por',       # for
    'post',      # after
    'preter',    # past, by
    'pri',       # about, concerning
    'pro',       # because of
    'sen',       # without
    'sub',       # under
    'super',     # above, over
    'sur',       # on
    'tra',       # through
    'trans',     # across
    'ĉu',        # whether
)

COMPOUND_PREPOSITIONS = (
    'anstataŭ ol',   # instead of
    "dank' al",      # thanks to
    'danke al',      # thanks to
    'kune kun',      # together with
    'rilate al',     # in relation to
    'spite al',      # in spite of
    'nome pri',      # namely about
    'koncerne pri',  # concerning
)

# Checked in this order; the first group containing the word wins
SEMANTIC_GROUPS = (
    (SemanticCategory.SPATIAL, frozenset({
        'al', 'antaŭ', 'apud', 'ĉe', 'ĉirkaŭ', 'ekster', 'el', 'en', 'inter',
        'kontraŭ', 'post', 'preter', 'sub', 'super', 'sur', 'tra', 'trans',
    })),
    (SemanticCategory.TEMPORAL, frozenset({'antaŭ', 'dum', 'ĝis', 'post'})),
    (SemanticCategory.INSTRUMENTAL, frozenset({'per', 'kun', 'sen', 'laŭ'})),
    (SemanticCategory.CAUSAL, frozenset({'pro', 'malgraŭ', 'anstataŭ'})),
    (SemanticCategory.RELATIONAL, frozenset({'de', 'da', 'pri', 'por', 'krom'})),
    (SemanticCategory.UNIVERSAL, frozenset({'je'})),
)


class PrepositionAnalyzer(InvariableAnalyzer):
    name = "PrepositionAnalyzer"
    part_of_speech = PartOfSpeech.PREPOSITION

    match_regex = re.compile(
        "^(" + "|".join(re.escape(p) for p in PREPOSITIONS + COMPOUND_PREPOSITIONS) + ")$",
        re.IGNORECASE,
    )

    # Compound prepositions contain spaces and the elided "dank'"
    valid_chars = re.compile(f"[{LETTERS}\\s']+")

    def _extract_features(self, word: str) -> PrepositionMorphology:
        normalized = word.lower()
        return PrepositionMorphology(
            root=normalized,
            is_plural=False,
            is_accusative=False,
            is_compound=normalized in COMPOUND_PREPOSITIONS,
            is_universal=normalized == 'je',
            is_archaic=normalized == 'ce',
            semantic_category=self.semantic_category(normalized),
        )

    @staticmethod
    def semantic_category(word: str) -> SemanticCategory:
        for category, members in SEMANTIC_GROUPS:
            if word in members:
                return category
        return SemanticCategory.OTHER

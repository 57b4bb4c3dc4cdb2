"""
Verb analyzer.

Esperanto verb endings:
- Infinitive: -i (esti, havi, fari)
- Indicative: -as present, -is past, -os future
- Conditional: -us
- Imperative/volitive: -u
- Participles: -ant-, -int-, -ont- (active), -at-, -it-, -ot- (passive),
  followed by an adjective or adverb ending (-a, -e, -aj, -ajn, -an)
"""

import re

from ..errors import ValidationError
from ..types import PartOfSpeech, VerbMood, VerbMorphology, VerbTense
from .base import LETTERS, MorphologicalAnalyzer

VERB_ENDINGS = ('i', 'as', 'is', 'os', 'us', 'u')

PARTICIPLE_MARKERS = ('ant', 'int', 'ont', 'at', 'it', 'ot')
PARTICIPLE_FORMS = ('a', 'e', 'aj', 'ajn', 'an')

PARTICIPLE_ENDINGS = tuple(
    marker + form
    for marker in PARTICIPLE_MARKERS
    for form in PARTICIPLE_FORMS
)

# Root extraction strips the first ending (in this order) the word ends with
ALL_ENDINGS = VERB_ENDINGS + PARTICIPLE_ENDINGS


class VerbAnalyzer(MorphologicalAnalyzer):
    name = "VerbAnalyzer"
    part_of_speech = PartOfSpeech.VERB

    match_regex = re.compile(f"^[{LETTERS}]{{2,}}({'|'.join(ALL_ENDINGS)})$")

    def extract_root(self, word: str) -> str:
        normalized = word.lower()
        for ending in ALL_ENDINGS:
            if normalized.endswith(ending):
                return normalized[:-len(ending)]
        return normalized

    def _extract_features(self, word: str) -> VerbMorphology:
        return VerbMorphology(
            root=self.extract_root(word),
            is_plural=self.check_plural(word),
            is_accusative=self.check_accusative(word),
            tense=self.extract_tense(word),
            mood=self.extract_mood(word),
        )

    def extract_tense(self, word: str) -> VerbTense:
        normalized = word.lower()

        if normalized.endswith('i'):
            return VerbTense.INFINITIVE
        if normalized.endswith('us'):
            return VerbTense.CONDITIONAL
        if normalized.endswith('as') or self.is_participle(normalized, 'ant'):
            return VerbTense.PRESENT
        if normalized.endswith('is') or self.is_participle(normalized, 'int'):
            return VerbTense.PAST
        if normalized.endswith('os') or self.is_participle(normalized, 'ont'):
            return VerbTense.FUTURE

        # Imperatives and passive participles carry no tense of their own
        return VerbTense.PRESENT

    def extract_mood(self, word: str) -> VerbMood:
        normalized = word.lower()

        if normalized.endswith('i'):
            return VerbMood.INFINITIVE
        if normalized.endswith('us'):
            return VerbMood.CONDITIONAL
        if normalized.endswith('u'):
            return VerbMood.IMPERATIVE
        if self.is_participle(normalized):
            return VerbMood.PARTICIPLE
        return VerbMood.INDICATIVE

    @staticmethod
    def is_participle(word: str, marker: str = None) -> bool:
        """Check for a participle ending, optionally for one tense marker only."""
        if marker:
            endings = tuple(marker + form for form in PARTICIPLE_FORMS)
        else:
            endings = PARTICIPLE_ENDINGS
        return word.endswith(endings)

    def check_plural(self, word: str) -> bool:
        # Only participles inflect for number
        normalized = word.lower()
        if self.is_participle(normalized):
            return normalized.endswith(('aj', 'ajn'))
        return False

    def check_accusative(self, word: str) -> bool:
        normalized = word.lower()
        if self.is_participle(normalized):
            return normalized.endswith('n')
        return False

    def validate_word(self, word: str) -> None:
        super().validate_word(word)
        if len(word) < 3:
            raise ValidationError("Verb must be at least 3 characters long", word)

"""
Word-level analyzer.

Runs every part-of-speech analyzer against a word, scores the ones that
match, and returns the best analysis with the runners-up as alternatives.
A word nothing matches comes back as Unknown rather than raising.
"""

import logging
import re
from typing import List, Optional, Tuple, Union

from . import config
from .errors import ValidationError
from .morphology import ALL_ANALYZERS, BASIC_NUMBERS, CORRELATIVES, MorphologicalAnalyzer
from .morphology.base import DEFAULT_OPTIONS, LETTERS
from .speech import create_word
from .types import AnalysisOptions, AnalysisResult, Morphology, PartOfSpeech

logger = logging.getLogger(__name__)

_BASIC_NUMBER_SET = frozenset(BASIC_NUMBERS)

# The 5x8 correlative table, without the -uo variants
TABLE_CORRELATIVES = frozenset(c for c in CORRELATIVES if not c.endswith('uo'))

LENGTH_BONUS_TAGS = (PartOfSpeech.VERB, PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE)

# Textbook ending for each open word class
CANONICAL_SHAPES = {
    PartOfSpeech.NOUN: re.compile(f"^[{LETTERS}]+o(j?n?)$"),
    PartOfSpeech.VERB: re.compile(f"^[{LETTERS}]+(as|is|os|us|u|i)$"),
    PartOfSpeech.ADJECTIVE: re.compile(f"^[{LETTERS}]+a(j?n?)$"),
    PartOfSpeech.ADVERB: re.compile(f"^[{LETTERS}]+e$"),
}


def _clean(word) -> str:
    if not isinstance(word, str) or not word:
        raise ValidationError("Word must be a non-empty string", word if isinstance(word, str) else None)

    cleaned = word.strip()
    if not cleaned:
        raise ValidationError("Word cannot be empty or only whitespace", word)
    return cleaned


class WordAnalyzer:
    """
    Dispatches a word to all part-of-speech analyzers and ranks the matches.

    Holds one instance of each analyzer; nothing changes after construction,
    so a single WordAnalyzer can be shared between threads.
    """

    def __init__(self):
        self.analyzers = tuple(cls() for cls in ALL_ANALYZERS)

    def analyze(self, word: str, options: AnalysisOptions = None) -> AnalysisResult:
        """
        Analyze a word and return its most likely reading.

        Args:
            word: The word to analyze (surrounding whitespace is ignored)
            options: Feature extraction and strictness settings

        Returns:
            The best analysis, with up to MAX_ALTERNATIVES lower-ranked
            readings attached. Unknown if no analyzer matches.

        Raises:
            ValidationError: if word is not a string or is blank
        """
        options = options or DEFAULT_OPTIONS
        clean_word = _clean(word)

        matches = self._rank(clean_word, options)
        if not matches:
            return self._unknown(clean_word)

        best, confidence = matches[0]
        try:
            morphology = best.extract_morphology(clean_word, options)
            word_instance = create_word(clean_word, best.part_of_speech)
        except Exception as e:
            logger.debug(f"{best.name} failed to extract '{clean_word}': {e}")
            return self._unknown(clean_word)

        return AnalysisResult(
            word=clean_word,
            part_of_speech=best.part_of_speech,
            morphology=morphology,
            confidence=confidence,
            alternatives=self._alternatives(matches[1:], clean_word, options),
            analyzer=best.name,
            word_instance=word_instance,
        )

    def analyze_all(self, word: str, options: AnalysisOptions = None) -> List[AnalysisResult]:
        """
        Every reading of a word, best first.

        Readings whose extraction fails are left out. Results carry no
        alternatives of their own.

        Raises:
            ValidationError: if word is not a string or is blank
        """
        options = options or DEFAULT_OPTIONS
        clean_word = _clean(word)

        results = []
        for analyzer, confidence in self._rank(clean_word, options):
            try:
                results.append(AnalysisResult(
                    word=clean_word,
                    part_of_speech=analyzer.part_of_speech,
                    morphology=analyzer.extract_morphology(clean_word, options),
                    confidence=confidence,
                    alternatives=[],
                    analyzer=analyzer.name,
                    word_instance=create_word(clean_word, analyzer.part_of_speech),
                ))
            except Exception as e:
                logger.debug(f"{analyzer.name} skipped '{clean_word}': {e}")

        return results

    def can_analyze(self, word) -> bool:
        """True if any analyzer matches the word. Never raises."""
        if not isinstance(word, str) or not word.strip():
            return False
        clean_word = word.strip()
        return any(self._matches(analyzer, clean_word, DEFAULT_OPTIONS) for analyzer in self.analyzers)

    def get_analyzer(self, part_of_speech: Union[PartOfSpeech, str]) -> Optional[MorphologicalAnalyzer]:
        """Look up the analyzer for a part of speech ("Noun" or PartOfSpeech.NOUN)."""
        for analyzer in self.analyzers:
            if analyzer.part_of_speech == part_of_speech:
                return analyzer
        return None

    @staticmethod
    def calculate_confidence(analyzer: MorphologicalAnalyzer, word: str) -> float:
        """
        Score how plausible an analyzer's reading of a word is.

        Exact closed-class hits (la, basic numbers, table correlatives) set
        the base score; long open-class words and textbook endings add to it.
        """
        pos = analyzer.part_of_speech
        lowered = word.lower()
        confidence = 0.5

        if pos == PartOfSpeech.ARTICLE and lowered == 'la':
            confidence = 1.0
        elif pos == PartOfSpeech.NUMERAL and lowered in _BASIC_NUMBER_SET:
            confidence = 0.95
        elif pos == PartOfSpeech.PRONOUN and lowered in TABLE_CORRELATIVES:
            confidence = 0.9

        if len(word) > 5 and pos in LENGTH_BONUS_TAGS:
            confidence += 0.2

        shape = CANONICAL_SHAPES.get(pos)
        if shape and shape.match(word):
            confidence += 0.3

        return min(confidence, 1.0)

    def _matches(self, analyzer: MorphologicalAnalyzer, word: str, options: AnalysisOptions) -> bool:
        try:
            if options.strict_mode:
                analyzer.validate_word(word)
            return analyzer.match(word)
        except Exception as e:
            logger.debug(f"{analyzer.name} rejected '{word}': {e}")
            return False

    def _rank(self, word: str, options: AnalysisOptions) -> List[Tuple[MorphologicalAnalyzer, float]]:
        matches = [
            (analyzer, self.calculate_confidence(analyzer, word))
            for analyzer in self.analyzers
            if self._matches(analyzer, word, options)
        ]
        # Stable: equal scores keep analyzer order
        return sorted(matches, key=lambda m: m[1], reverse=True)

    def _alternatives(self, matches, word: str, options: AnalysisOptions) -> List[AnalysisResult]:
        alternatives = []
        for analyzer, confidence in matches[:config.MAX_ALTERNATIVES]:
            try:
                alternatives.append(AnalysisResult(
                    word=word,
                    part_of_speech=analyzer.part_of_speech,
                    morphology=analyzer.extract_morphology(word, options),
                    confidence=confidence,
                    alternatives=[],
                    analyzer=analyzer.name,
                    word_instance=create_word(word, analyzer.part_of_speech),
                ))
            except Exception as e:
                logger.debug(f"{analyzer.name} alternative failed for '{word}': {e}")
                alternatives.append(AnalysisResult(
                    word=word,
                    part_of_speech=PartOfSpeech.UNKNOWN,
                    morphology=Morphology(root=word),
                    confidence=0.0,
                    alternatives=[],
                    analyzer=analyzer.name,
                ))
        return alternatives

    @staticmethod
    def _unknown(word: str) -> AnalysisResult:
        return AnalysisResult(
            word=word,
            part_of_speech=PartOfSpeech.UNKNOWN,
            morphology=Morphology(root=word),
            confidence=0.0,
            alternatives=[],
            analyzer="Unknown",
        )

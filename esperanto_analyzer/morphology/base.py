"""
Base part-of-speech analyzer interface.

Every analyzer pairs a match predicate with a feature extractor. Analyzers
hold no per-call state, so a single instance can be shared freely.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from ..errors import PatternMismatchError, ValidationError
from ..speech import create_word
from ..types import AnalysisOptions, AnalysisResult, Morphology, PartOfSpeech

# Latin letters plus the six Esperanto letters with diacritics
LETTERS = "a-zA-ZĉĝĵĥŝŭĈĜĴĤŜŬ"

DEFAULT_OPTIONS = AnalysisOptions()


class MorphologicalAnalyzer(ABC):
    """
    Base class for all part-of-speech analyzers.

    Subclasses define `name`, `part_of_speech` and `match_regex`, and build
    their morphology variant in `_extract_features`. Words outside the
    analyzer's pattern are rejected with PatternMismatchError.
    """

    name: str = "MorphologicalAnalyzer"
    part_of_speech: PartOfSpeech = PartOfSpeech.UNDEFINED
    match_regex: re.Pattern = None

    # Characters accepted by validate_word
    valid_chars = re.compile(f"[{LETTERS}]+")

    def match(self, word: str) -> bool:
        """Check whether the word has this analyzer's shape."""
        return self.match_regex.fullmatch(word) is not None

    def analyze(self, word: str, options: AnalysisOptions = None) -> Optional[AnalysisResult]:
        """
        Analyze a word with this analyzer alone.

        Returns:
            None if the word does not match, a full result with confidence 1.0
            otherwise, or an Undefined result if extraction fails.
        """
        if not self.match(word):
            return None

        try:
            morphology = self.extract_morphology(word, options)
            return AnalysisResult(
                word=word,
                part_of_speech=self.part_of_speech,
                morphology=morphology,
                confidence=1.0,
                alternatives=[],
                analyzer=self.name,
                word_instance=create_word(word, self.part_of_speech),
            )
        except Exception:
            return AnalysisResult(
                word=word,
                part_of_speech=PartOfSpeech.UNDEFINED,
                morphology=Morphology(),
                confidence=0.0,
                alternatives=[],
                analyzer=self.name,
            )

    def extract_morphology(self, word: str, options: AnalysisOptions = None) -> Morphology:
        """
        Extract morphological features from a matching word.

        Raises:
            PatternMismatchError: if the word does not match this analyzer
        """
        options = options or DEFAULT_OPTIONS
        if not self.match(word):
            raise PatternMismatchError(
                f"Word does not match {self.part_of_speech.value.lower()} pattern", word
            )

        if not options.include_features:
            return Morphology(root=self.extract_root(word))

        return self._extract_features(word)

    @abstractmethod
    def extract_root(self, word: str) -> str:
        """Strip inflectional endings to get the root."""
        pass

    @abstractmethod
    def _extract_features(self, word: str) -> Morphology:
        """Build the part-of-speech specific morphology for a matching word."""
        pass

    def check_plural(self, word: str) -> bool:
        """Plural marker -j, possibly followed by the accusative -n."""
        base = word[:-1] if word.endswith('n') else word
        return base.endswith('j')

    def check_accusative(self, word: str) -> bool:
        return word.endswith('n')

    def validate_word(self, word: str) -> None:
        """
        Enforce input constraints for strict analysis.

        Raises:
            ValidationError: on empty, padded or badly formed input
        """
        if not word or not isinstance(word, str):
            raise ValidationError("Word must be a non-empty string", word)

        if word.strip() != word:
            raise ValidationError("Word cannot contain leading or trailing whitespace", word)

        if not self.valid_chars.fullmatch(word):
            raise ValidationError("Word contains invalid characters", word)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(part_of_speech='{self.part_of_speech.value}')"


class InvariableAnalyzer(MorphologicalAnalyzer):
    """Base for parts of speech that never take -j or -n."""

    def check_plural(self, word: str) -> bool:
        return False

    def check_accusative(self, word: str) -> bool:
        return False

    def extract_root(self, word: str) -> str:
        return word.lower()

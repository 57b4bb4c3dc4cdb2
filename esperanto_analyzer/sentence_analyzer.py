"""
Sentence-level analysis.

Splits text into word tokens, analyzes each with the WordAnalyzer and
aggregates per-sentence statistics. Failures on individual tokens are
recorded as Unknown words; only invalid input raises.
"""

import logging
import re
from collections import Counter
from dataclasses import replace
from typing import Dict, List

from . import config
from .analyzer import WordAnalyzer
from .errors import ValidationError
from .logging_config import log_with_context
from .speech import create_word
from .text import normalize_text
from .trace import AnalysisTrace
from .types import (
    AnalysisResult,
    Morphology,
    PartOfSpeech,
    SentenceAnalysisOptions,
    SentenceAnalysisResult,
    SentenceStatistics,
)

logger = logging.getLogger(__name__)

DEFAULT_SENTENCE_OPTIONS = SentenceAnalysisOptions()

PUNCTUATION = re.compile(r"([.!?;:,])")
PUNCTUATION_TOKEN = re.compile(r"^[.!?;:,]+$")
SENTENCE_END = re.compile(r"[.!?]+")


def tokenize(sentence: str) -> List[str]:
    """
    Split a sentence into word tokens.

    Punctuation (. ! ? ; : ,) is separated from words and dropped;
    apostrophes and other characters stay inside their word.
    """
    spaced = PUNCTUATION.sub(r" \1 ", sentence)
    return [token for token in spaced.split() if not PUNCTUATION_TOKEN.match(token)]


def split_sentences(paragraph: str) -> List[str]:
    """Split on runs of . ! ? and drop empty pieces."""
    return [s.strip() for s in SENTENCE_END.split(paragraph) if s.strip()]


def calculate_statistics(words: List[AnalysisResult]) -> SentenceStatistics:
    """
    Aggregate counts over analyzed words.

    The average covers every word carrying a confidence; Unknown words
    count with their zero score.
    """
    total = len(words)
    analyzed = sum(1 for w in words if w.part_of_speech != PartOfSpeech.UNKNOWN)

    scored = [w.confidence for w in words if isinstance(w.confidence, (int, float))]
    average = sum(scored) / len(scored) if scored else 0.0

    counts = Counter(w.part_of_speech.value for w in words)

    return SentenceStatistics(
        total_words=total,
        analyzed_words=analyzed,
        unknown_words=total - analyzed,
        average_confidence=average,
        part_of_speech_counts=dict(counts),
    )


def _with_surface(result: AnalysisResult, surface: str) -> AnalysisResult:
    """Swap in the token as it appears in the output, keeping word_instance in step."""
    word_instance = result.word_instance
    if word_instance is not None:
        word_instance = create_word(surface, word_instance.part_of_speech)
    return replace(result, word=surface, word_instance=word_instance)


class SentenceAnalyzer:
    """Analyzes sentences and paragraphs word by word."""

    def __init__(self, word_analyzer: WordAnalyzer = None):
        self.word_analyzer = word_analyzer or WordAnalyzer()

    def analyze_sentence(self, sentence: str, options: SentenceAnalysisOptions = None,
                         trace: AnalysisTrace = None) -> SentenceAnalysisResult:
        """
        Analyze every word of a sentence.

        Args:
            sentence: Text to analyze
            options: What to keep in the per-word results
            trace: Optional trace that receives one step per stage

        Returns:
            SentenceAnalysisResult with per-word results and statistics

        Raises:
            ValidationError: if sentence is not a string or is blank
        """
        if not isinstance(sentence, str) or not sentence:
            raise ValidationError("Sentence must be a non-empty string")

        clean_sentence = sentence.strip()
        if not clean_sentence:
            raise ValidationError("Sentence cannot be empty or only whitespace", sentence)

        options = options or DEFAULT_SENTENCE_OPTIONS
        if options.x_system:
            clean_sentence = normalize_text(clean_sentence)

        tokens = tokenize(clean_sentence)
        if trace:
            trace.add_step(
                "Tokenizer",
                inputs={"text": clean_sentence},
                outputs={"tokens": tokens},
                description="Split the sentence into word tokens.",
            )

        words = []
        for token in tokens:
            result = self._analyze_token(token, options)
            words.append(result)
            if trace:
                trace.add_step(
                    "WordAnalyzer",
                    inputs={"token": token},
                    outputs={
                        "part_of_speech": result.part_of_speech.value,
                        "confidence": result.confidence,
                        "analyzer": result.analyzer,
                    },
                )

        statistics = calculate_statistics(words)
        if trace:
            trace.add_step("Statistics", inputs={"words": len(words)}, outputs=statistics.to_dict())

        log_with_context(
            "Sentence analyzed",
            {"sentence": clean_sentence, "tokens": tokens, "statistics": statistics.to_dict()},
            logger=logger,
        )

        result = SentenceAnalysisResult(
            original_sentence=clean_sentence,
            words=words,
            statistics=statistics,
        )
        if trace:
            trace.set_result(result.to_dict())
        return result

    def analyze_sentences(self, sentences: List[str],
                          options: SentenceAnalysisOptions = None) -> List[SentenceAnalysisResult]:
        return [self.analyze_sentence(sentence, options) for sentence in sentences]

    def analyze_paragraph(self, paragraph: str,
                          options: SentenceAnalysisOptions = None) -> List[SentenceAnalysisResult]:
        """
        Split a paragraph into sentences and analyze each.

        Raises:
            ValidationError: if paragraph is not a string or is blank
        """
        if not isinstance(paragraph, str) or not paragraph.strip():
            raise ValidationError("Paragraph must be a non-empty string")

        return self.analyze_sentences(split_sentences(paragraph), options)

    def get_summary(self, sentence: str) -> Dict[str, int]:
        """Part-of-speech counts for a sentence."""
        result = self.analyze_sentence(sentence, SentenceAnalysisOptions(
            include_confidence=False,
            include_alternatives=False,
            include_morphology=False,
        ))
        return result.statistics.part_of_speech_counts

    def is_valid_esperanto(self, sentence: str,
                           threshold: float = config.DEFAULT_VALIDITY_THRESHOLD) -> bool:
        """
        Check whether enough of a sentence's words are recognized.

        Never raises; invalid input or a sentence without words is simply
        not Esperanto.
        """
        try:
            result = self.analyze_sentence(sentence, SentenceAnalysisOptions(
                include_alternatives=False,
                include_morphology=False,
            ))
            statistics = result.statistics
            if statistics.total_words == 0:
                return False
            return statistics.analyzed_words / statistics.total_words >= threshold
        except Exception as e:
            logger.debug(f"Validity check failed: {e}")
            return False

    def _analyze_token(self, token: str, options: SentenceAnalysisOptions) -> AnalysisResult:
        surface = token if options.preserve_case else token.lower()

        try:
            result = self._best_reading(token, options)
        except Exception as e:
            logger.debug(f"Token '{token}' could not be analyzed: {e}")
            return AnalysisResult(
                word=surface,
                part_of_speech=PartOfSpeech.UNKNOWN,
                morphology=Morphology(root=token.lower()),
                confidence=0.0,
                alternatives=[],
                analyzer="Unknown",
            )

        alternatives = [_with_surface(alt, surface) for alt in result.alternatives]
        return replace(
            _with_surface(result, surface),
            confidence=result.confidence if options.include_confidence else None,
            morphology=result.morphology if options.include_morphology else None,
            alternatives=alternatives if options.include_alternatives else [],
        )

    def _best_reading(self, token: str, options: SentenceAnalysisOptions) -> AnalysisResult:
        if not options.include_alternatives:
            return self.word_analyzer.analyze(token)

        readings = self.word_analyzer.analyze_all(token)
        if not readings:
            return self.word_analyzer.analyze(token)

        best = readings[0]
        return replace(best, alternatives=readings[1:options.max_alternatives + 1])

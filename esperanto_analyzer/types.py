"""
Core data types for morphological analysis.

Results are plain dataclasses. Each part of speech has its own morphology
variant carrying only the fields that make sense for it; all variants share
the root and the plural/accusative flags.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional


class PartOfSpeech(str, Enum):
    """Closed set of part-of-speech tags."""
    NOUN = "Noun"                  # substantivo (hundo, kato)
    VERB = "Verb"                  # verbo (estas, kuri)
    ADJECTIVE = "Adjective"        # adjektivo (bela, granda)
    ADVERB = "Adverb"              # adverbo (rapide, nun)
    PRONOUN = "Pronoun"            # pronomo (mi, vi, kiu)
    PREPOSITION = "Preposition"    # prepozicio (en, sur, de)
    CONJUNCTION = "Conjunction"    # konjunkcio (kaj, sed, ĉar)
    INTERJECTION = "Interjection"  # interjekcio (ho!, ve!)
    ARTICLE = "Article"            # artikolo (la)
    NUMERAL = "Numeral"            # numeralo (unu, du, tri)
    UNKNOWN = "Unknown"
    UNDEFINED = "Undefined"


class VerbTense(str, Enum):
    PRESENT = "present"
    PAST = "past"
    FUTURE = "future"
    CONDITIONAL = "conditional"
    INFINITIVE = "infinitive"


class VerbMood(str, Enum):
    INDICATIVE = "indicative"
    IMPERATIVE = "imperative"
    CONDITIONAL = "conditional"
    INFINITIVE = "infinitive"
    PARTICIPLE = "participle"


class PronounType(str, Enum):
    PERSONAL = "personal"
    POSSESSIVE = "possessive"
    DEMONSTRATIVE = "demonstrative"
    INTERROGATIVE = "interrogative"
    RELATIVE = "relative"
    INDEFINITE = "indefinite"
    UNIVERSAL = "universal"
    NEGATIVE = "negative"
    REFLEXIVE = "reflexive"
    SPECIAL = "special"


class CorrelativeFunction(str, Enum):
    INDIVIDUAL = "individual"
    THING = "thing"
    QUALITY = "quality"
    PLACE_MANNER = "place/manner"
    REASON = "reason"
    TIME = "time"
    QUANTITY = "quantity"
    MANNER = "manner"


class NumeralType(str, Enum):
    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    ADVERBIAL = "adverbial"
    FRACTIONAL = "fractional"
    MULTIPLICATIVE = "multiplicative"
    COLLECTIVE = "collective"
    SPECIAL = "special"


class SemanticCategory(str, Enum):
    SPATIAL = "spatial"
    TEMPORAL = "temporal"
    INSTRUMENTAL = "instrumental"
    CAUSAL = "causal"
    RELATIONAL = "relational"
    UNIVERSAL = "universal"
    OTHER = "other"


def _plain(value: Any) -> Any:
    """Convert enums and nested dataclasses into JSON-ready values."""
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


# -----------------------------------------------------------------------------
# --- Morphology variants
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Morphology:
    """
    Features shared by every part of speech.

    Used directly for unknown words and when feature extraction is disabled.
    """
    root: str = ""
    is_plural: bool = False
    is_accusative: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: _plain(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class NounMorphology(Morphology):
    pass


@dataclass(frozen=True)
class VerbMorphology(Morphology):
    tense: VerbTense = VerbTense.PRESENT
    mood: VerbMood = VerbMood.INDICATIVE


@dataclass(frozen=True)
class Agreement:
    """Adjective agreement markers; always equal to the universal flags."""
    plural: bool = False
    accusative: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {"plural": self.plural, "accusative": self.accusative}


@dataclass(frozen=True)
class AdjectiveMorphology(Morphology):
    agreement: Agreement = field(default_factory=Agreement)


@dataclass(frozen=True)
class AdverbMorphology(Morphology):
    is_special: bool = False


@dataclass(frozen=True)
class ArticleMorphology(Morphology):
    pass


@dataclass(frozen=True)
class ConjunctionMorphology(Morphology):
    is_compound: bool = False


@dataclass(frozen=True)
class InterjectionMorphology(Morphology):
    has_exclamation: bool = False
    is_compound: bool = False


@dataclass(frozen=True)
class NumeralMorphology(Morphology):
    numeral_type: NumeralType = NumeralType.CARDINAL
    is_ordinal: bool = False
    is_adverbial: bool = False
    is_fractional: bool = False
    is_multiplicative: bool = False
    is_collective: bool = False
    is_compound: bool = False


@dataclass(frozen=True)
class PrepositionMorphology(Morphology):
    is_compound: bool = False
    is_universal: bool = False
    is_archaic: bool = False
    semantic_category: SemanticCategory = SemanticCategory.OTHER


@dataclass(frozen=True)
class PronounMorphology(Morphology):
    pronoun_type: PronounType = PronounType.SPECIAL
    is_personal: bool = False
    is_possessive: bool = False
    is_correlative: bool = False
    is_reflexive: bool = False
    is_compound: bool = False
    correlative_function: Optional[CorrelativeFunction] = None


# -----------------------------------------------------------------------------
# --- Options
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisOptions:
    """
    Options for word-level analysis.

    include_features: extract the full per-tag morphology (otherwise only the root)
    strict_mode: run each analyzer's input validator before matching
    """
    include_features: bool = True
    strict_mode: bool = False


@dataclass(frozen=True)
class SentenceAnalysisOptions:
    """Options controlling what a sentence analysis keeps in its results."""
    include_confidence: bool = True
    include_alternatives: bool = False
    include_morphology: bool = True
    max_alternatives: int = 2
    preserve_case: bool = False
    x_system: bool = False


# -----------------------------------------------------------------------------
# --- Results
# -----------------------------------------------------------------------------

@dataclass
class AnalysisResult:
    """Analysis of a single word."""
    word: str
    part_of_speech: PartOfSpeech
    morphology: Optional[Morphology] = None
    confidence: Optional[float] = None
    alternatives: List['AnalysisResult'] = field(default_factory=list)
    analyzer: Optional[str] = None
    word_instance: Any = field(default=None, compare=False)

    @property
    def is_unknown(self) -> bool:
        return self.part_of_speech == PartOfSpeech.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "word": self.word,
            "part_of_speech": self.part_of_speech.value,
        }
        if self.morphology is not None:
            data["morphology"] = self.morphology.to_dict()
        if self.confidence is not None:
            data["confidence"] = self.confidence
        data["alternatives"] = [alt.to_dict() for alt in self.alternatives]
        data["analyzer"] = self.analyzer
        return data


@dataclass
class SentenceStatistics:
    total_words: int = 0
    analyzed_words: int = 0
    unknown_words: int = 0
    average_confidence: float = 0.0
    part_of_speech_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_words": self.total_words,
            "analyzed_words": self.analyzed_words,
            "unknown_words": self.unknown_words,
            "average_confidence": self.average_confidence,
            "part_of_speech_counts": dict(self.part_of_speech_counts),
        }


@dataclass
class SentenceAnalysisResult:
    """Word-by-word analysis of one sentence plus aggregate statistics."""
    original_sentence: str
    words: List[AnalysisResult] = field(default_factory=list)
    statistics: SentenceStatistics = field(default_factory=SentenceStatistics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_sentence": self.original_sentence,
            "words": [w.to_dict() for w in self.words],
            "statistics": self.statistics.to_dict(),
        }

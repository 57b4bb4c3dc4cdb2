#!/usr/bin/env python3
"""
Esperanto Analyzer Demo

Walks through the public API: word analysis, sentence statistics, validity
checks, ambiguous words and part-of-speech summaries.
"""
import sys
import json
from pathlib import Path

# Add parent directory to path to import esperanto_analyzer
sys.path.insert(0, str(Path(__file__).parent.parent))

from esperanto_analyzer import (
    analyze_sentence,
    analyze_word,
    analyze_word_all,
    get_part_of_speech_summary,
    is_esperanto_sentence,
)


def example_1_words():
    """Analyze single words and show their features."""
    print("=" * 60)
    print("Example 1: Word Analysis")
    print("=" * 60)

    for word in ['libro', 'librojn', 'legas', 'bela', 'rapide', 'kaj']:
        result = analyze_word(word)
        print(f"\n  {word}: {result.part_of_speech.value} (confidence: {result.confidence:.2f})")
        print(f"    Features: {json.dumps(result.morphology.to_dict(), ensure_ascii=False)}")


def example_2_sentence():
    """Analyze a sentence and print its statistics."""
    print("\n" + "=" * 60)
    print("Example 2: Sentence Analysis")
    print("=" * 60)

    sentence = "Mi legas la belan libron rapide"
    stats = analyze_sentence(sentence).statistics

    print(f"\n  Sentence: \"{sentence}\"")
    print(f"  Total words:    {stats.total_words}")
    print(f"  Analyzed words: {stats.analyzed_words}")
    print(f"  Unknown words:  {stats.unknown_words}")
    print("  Part of speech counts:")
    for pos, count in stats.part_of_speech_counts.items():
        print(f"    {pos}: {count}")


def example_3_validation():
    """Tell Esperanto apart from other text."""
    print("\n" + "=" * 60)
    print("Example 3: Validation")
    print("=" * 60)

    for text in ['Saluton mondo', 'Hello world', 'La suno brilas', 'This is not Esperanto']:
        mark = "✓ Valid" if is_esperanto_sentence(text) else "✗ Invalid"
        print(f"  \"{text}\": {mark} Esperanto")


def example_4_ambiguous():
    """Show every reading of words several analyzers accept."""
    print("\n" + "=" * 60)
    print("Example 4: Ambiguous Words")
    print("=" * 60)

    for word in ['bona', 'kiu', 'tri', 'estas']:
        analyses = analyze_word_all(word)
        print(f"\n  {word}: {len(analyses)} possible analyses")
        for i, analysis in enumerate(analyses, 1):
            print(f"    {i}. {analysis.part_of_speech.value} ({analysis.confidence:.2f})")


def example_5_summary():
    """Count parts of speech in a longer sentence."""
    print("\n" + "=" * 60)
    print("Example 5: Part of Speech Summary")
    print("=" * 60)

    text = "La rapida bruna vulpo saltas super la malrapida hundo kaj kuras tra la verda kampo"
    print(f"\n  Text: \"{text}\"")
    for pos, count in get_part_of_speech_summary(text).items():
        print(f"    {pos}: {count}")


if __name__ == '__main__':
    example_1_words()
    example_2_sentence()
    example_3_validation()
    example_4_ambiguous()
    example_5_summary()

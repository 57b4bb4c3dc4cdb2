#!/usr/bin/env python3
"""
Analyze an Esperanto text file and report coverage statistics.

Every non-empty paragraph (blank-line separated block) is split into
sentences and analyzed. The script writes aggregate part-of-speech counts,
the share of recognized words and the most frequent unknown words as JSON.

Usage:
    python scripts/analyze_text_file.py book.txt --output stats.json
    python scripts/analyze_text_file.py old_book.txt --x-system --top-unknown 50
"""
import os
import sys
import json
import argparse
import logging
from collections import Counter

# Add project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from tqdm import tqdm

from esperanto_analyzer import get_sentence_analyzer
from esperanto_analyzer.errors import ValidationError
from esperanto_analyzer.logging_config import ProgressLogger, setup_logging
from esperanto_analyzer.types import PartOfSpeech, SentenceAnalysisOptions

logger = logging.getLogger(__name__)


def read_paragraphs(path: str):
    """Blank-line separated blocks of a UTF-8 text file, whitespace collapsed."""
    with open(path, 'r', encoding='utf-8') as f:
        blocks = f.read().split('\n\n')
    return [' '.join(block.split()) for block in blocks if block.strip()]


def analyze_file(path: str, x_system: bool = False, top_unknown: int = 20,
                 log_progress: bool = False) -> dict:
    """
    Analyze every paragraph of a file.

    Returns:
        Dict with sentence/word totals, coverage, part-of-speech counts and
        the most frequent unknown words
    """
    analyzer = get_sentence_analyzer()
    options = SentenceAnalysisOptions(include_morphology=False, x_system=x_system)

    paragraphs = read_paragraphs(path)
    logger.info(f"Analyzing {len(paragraphs)} paragraphs from {path}")

    pos_counts = Counter()
    unknown_words = Counter()
    sentences = 0
    total_words = 0
    analyzed_words = 0
    confidence_sum = 0.0

    if log_progress:
        progress = ProgressLogger(total=len(paragraphs), desc="Analyzing paragraphs",
                                  logger=logger, unit="paragraphs")
        iterator = paragraphs
    else:
        progress = None
        iterator = tqdm(paragraphs, desc="Analyzing paragraphs", unit=" para")

    for paragraph in iterator:
        if progress:
            progress.update()
        try:
            results = analyzer.analyze_paragraph(paragraph, options)
        except ValidationError as e:
            logger.warning(f"Skipping paragraph: {e.message}")
            continue

        for result in results:
            sentences += 1
            stats = result.statistics
            total_words += stats.total_words
            analyzed_words += stats.analyzed_words
            pos_counts.update(stats.part_of_speech_counts)
            for word in result.words:
                confidence_sum += word.confidence or 0.0
                if word.part_of_speech == PartOfSpeech.UNKNOWN:
                    unknown_words[word.word] += 1

    stats = {
        "file": path,
        "paragraphs": len(paragraphs),
        "sentences": sentences,
        "total_words": total_words,
        "analyzed_words": analyzed_words,
        "coverage": analyzed_words / total_words if total_words else 0.0,
        "average_confidence": confidence_sum / total_words if total_words else 0.0,
        "part_of_speech_counts": dict(pos_counts.most_common()),
        "top_unknown_words": dict(unknown_words.most_common(top_unknown)),
    }

    if progress:
        progress.close(summary={
            "sentences": sentences,
            "words": total_words,
            "coverage": f"{stats['coverage']:.1%}",
        })

    return stats


def main():
    parser = argparse.ArgumentParser(description='Analyze an Esperanto text file')
    parser.add_argument('file', help='UTF-8 text file')
    parser.add_argument('--output', '-o', help='Write JSON stats here (default: stdout)')
    parser.add_argument('--x-system', action='store_true', help='Convert cx, gx, ... first')
    parser.add_argument('--top-unknown', type=int, default=20,
                        help='How many unknown words to report (default: 20)')
    parser.add_argument('--log-progress', action='store_true',
                        help='Report progress through logging instead of a progress bar')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args()

    setup_logging(debug=args.debug)

    stats = analyze_file(args.file, x_system=args.x_system, top_unknown=args.top_unknown,
                         log_progress=args.log_progress)

    output = json.dumps(stats, indent=2, ensure_ascii=False)
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"Stats written to {args.output}")
    else:
        print(output)

    logger.info(f"Coverage: {stats['coverage']:.1%} of {stats['total_words']} words")


if __name__ == '__main__':
    main()

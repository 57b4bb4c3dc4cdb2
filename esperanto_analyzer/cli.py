"""
Command-line interface for the Esperanto analyzer.

- Analyzing single words (best reading or all readings)
- Analyzing sentences and paragraphs
- Checking whether text looks like Esperanto
"""
import sys
import json
import argparse
import logging

from esperanto_analyzer import (
    LIBRARY_NAME,
    SUPPORTED_LANGUAGE,
    VERSION,
    get_sentence_analyzer,
    get_word_analyzer,
)
from esperanto_analyzer import config
from esperanto_analyzer.errors import ValidationError
from esperanto_analyzer.logging_config import setup_logging
from esperanto_analyzer.morphology import ALL_ANALYZERS
from esperanto_analyzer.trace import AnalysisTrace
from esperanto_analyzer.types import AnalysisOptions, SentenceAnalysisOptions

logger = logging.getLogger(__name__)


def _read_text(args):
    """Text from the positional argument, a file, or stdin."""
    if args.text is not None:
        return args.text
    if getattr(args, 'file', None):
        with open(args.file, 'r', encoding='utf-8') as f:
            return f.read().strip()

    # Piped input
    if not sys.stdin.isatty():
        return sys.stdin.read().strip()

    print("Enter Esperanto text:")
    try:
        return input().strip()
    except EOFError:
        raise ValidationError("No input text given")


def _format_result(result, indent="  "):
    """One readable line per word."""
    line = f"{indent}{result.word:<15} {result.part_of_speech.value:<13}"
    if result.confidence is not None:
        line += f" {result.confidence:.2f}"
    if result.morphology is not None:
        features = result.morphology.to_dict()
        root = features.pop('root')
        flags = [name for name, value in features.items() if value is True]
        line += f"  root={root}"
        if flags:
            line += f"  [{', '.join(flags)}]"
    return line


def _print_sentence(result):
    print(f"Sentence: {result.original_sentence}")
    for word in result.words:
        print(_format_result(word))
        for alt in word.alternatives:
            print(_format_result(alt, indent="      alt: "))
    stats = result.statistics
    print(f"Words: {stats.total_words}, analyzed: {stats.analyzed_words}, "
          f"unknown: {stats.unknown_words}, average confidence: {stats.average_confidence:.2f}")


def cmd_word(args):
    """Analyze a single word."""
    analyzer = get_word_analyzer()
    options = AnalysisOptions(strict_mode=args.strict)

    if args.all:
        results = analyzer.analyze_all(args.word, options)
        if args.format == 'json':
            print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
        elif not results:
            print(f"{args.word}: no analyzer matched")
        else:
            for result in results:
                print(_format_result(result, indent=""))
        return

    result = analyzer.analyze(args.word, options)
    if args.format == 'json':
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(_format_result(result, indent=""))
        for alt in result.alternatives:
            print(_format_result(alt, indent="  alt: "))


def cmd_sentence(args):
    """Analyze a sentence word by word."""
    text = _read_text(args)
    options = SentenceAnalysisOptions(
        include_alternatives=args.alternatives,
        max_alternatives=args.max_alternatives,
        preserve_case=args.preserve_case,
        x_system=args.x_system,
    )
    trace = AnalysisTrace(text) if args.trace else None

    result = get_sentence_analyzer().analyze_sentence(text, options, trace)

    if trace:
        print(trace.to_json())
    elif args.format == 'json':
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_sentence(result)


def cmd_paragraph(args):
    """Split text into sentences and analyze each."""
    text = _read_text(args)
    options = SentenceAnalysisOptions(x_system=args.x_system)
    results = get_sentence_analyzer().analyze_paragraph(text, options)

    if args.format == 'json':
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
        return

    for i, result in enumerate(results, 1):
        print(f"[{i}] ", end="")
        _print_sentence(result)
        print()


def cmd_check(args):
    """Exit 0 if the text looks like Esperanto, 1 otherwise."""
    threshold = args.threshold if args.threshold is not None else config.get_default_threshold()
    is_esperanto = get_sentence_analyzer().is_valid_esperanto(args.text, threshold)
    print("Esperanto" if is_esperanto else "Not Esperanto")
    return 0 if is_esperanto else 1


def cmd_summary(args):
    """Count parts of speech in a sentence."""
    counts = get_sentence_analyzer().get_summary(args.text)
    if args.format == 'json':
        print(json.dumps(counts, indent=2, ensure_ascii=False))
        return
    for pos, count in sorted(counts.items(), key=lambda item: (-item[1], item[0])):
        print(f"  {pos:<13} {count}")


def cmd_info(args):
    """Display library information."""
    print(f"=== {LIBRARY_NAME} {VERSION} ===\n")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Language: {SUPPORTED_LANGUAGE}")
    print(f"\nAnalyzers ({len(ALL_ANALYZERS)}, in priority order):")
    for analyzer in ALL_ANALYZERS:
        print(f"  {analyzer.name:<22} {analyzer.part_of_speech.value}")
    print(f"\nValidity threshold: {config.get_default_threshold()}")
    print(f"Max alternatives: {config.MAX_ALTERNATIVES}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='esperanto-analyzer',
        description='Rule-based morphological analysis of Esperanto text',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a word
  esperanto-analyzer word hundojn
  esperanto-analyzer word kiu --all --format json

  # Analyze a sentence
  esperanto-analyzer sentence "Mi amas la belan hundon."
  esperanto-analyzer sentence "Cxu vi parolas Esperanton?" --x-system
  esperanto-analyzer sentence --file input.txt --alternatives

  # Paragraphs and checks
  esperanto-analyzer paragraph --file chapter.txt --format json
  esperanto-analyzer check "La domo estas bela." --threshold 0.9
  esperanto-analyzer summary "La bela knabino kantas."

  # Library info
  esperanto-analyzer info
        """
    )
    parser.add_argument('--debug', action='store_true', help='Enable verbose debug logging')
    parser.add_argument('--log-file', help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- word command ---
    parser_word = subparsers.add_parser('word', help='Analyze a single word')
    parser_word.add_argument('word', help='Esperanto word')
    parser_word.add_argument('--all', action='store_true', help='Show every possible reading')
    parser_word.add_argument('--strict', action='store_true',
                             help='Validate characters and length before matching')
    parser_word.add_argument('--format', choices=['text', 'json'], default='text',
                             help='Output format (default: text)')
    parser_word.set_defaults(func=cmd_word)

    # --- sentence command ---
    parser_sentence = subparsers.add_parser('sentence', help='Analyze a sentence')
    parser_sentence.add_argument('text', nargs='?', help='Esperanto sentence')
    parser_sentence.add_argument('-f', '--file', help='Read input from file')
    parser_sentence.add_argument('--alternatives', action='store_true',
                                 help='Include alternative readings')
    parser_sentence.add_argument('--max-alternatives', type=int,
                                 default=config.DEFAULT_MAX_SENTENCE_ALTERNATIVES,
                                 help='Alternatives per word (default: %(default)s)')
    parser_sentence.add_argument('--preserve-case', action='store_true',
                                 help='Keep original casing in results')
    parser_sentence.add_argument('--x-system', action='store_true',
                                 help='Convert cx, gx, ... to ĉ, ĝ, ... first')
    parser_sentence.add_argument('--trace', action='store_true',
                                 help='Print the full analysis trace as JSON')
    parser_sentence.add_argument('--format', choices=['text', 'json'], default='text',
                                 help='Output format (default: text)')
    parser_sentence.set_defaults(func=cmd_sentence)

    # --- paragraph command ---
    parser_paragraph = subparsers.add_parser('paragraph', help='Analyze a paragraph sentence by sentence')
    parser_paragraph.add_argument('text', nargs='?', help='Esperanto paragraph')
    parser_paragraph.add_argument('-f', '--file', help='Read input from file')
    parser_paragraph.add_argument('--x-system', action='store_true',
                                  help='Convert cx, gx, ... to ĉ, ĝ, ... first')
    parser_paragraph.add_argument('--format', choices=['text', 'json'], default='text',
                                  help='Output format (default: text)')
    parser_paragraph.set_defaults(func=cmd_paragraph)

    # --- check command ---
    parser_check = subparsers.add_parser('check', help='Check whether text is Esperanto')
    parser_check.add_argument('text', help='Text to check')
    parser_check.add_argument('--threshold', type=float,
                              help='Share of words that must be recognized (default: 0.8)')
    parser_check.set_defaults(func=cmd_check)

    # --- summary command ---
    parser_summary = subparsers.add_parser('summary', help='Count parts of speech in a sentence')
    parser_summary.add_argument('text', help='Esperanto sentence')
    parser_summary.add_argument('--format', choices=['text', 'json'], default='text',
                                help='Output format (default: text)')
    parser_summary.set_defaults(func=cmd_summary)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display library information')
    parser_info.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        log_file=args.log_file or config.get_log_file(),
        level=config.get_log_level(logging.WARNING),
        debug=args.debug,
    )

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args) or 0
    except ValidationError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())

"""Command-line interface for lazyparse."""

import argparse
import sys
from pathlib import Path

from lazyparse.config.loader import load_config, ConfigLoadError
from lazyparse.config.schema import PipelineConfig
from lazyparse.core.stats import summarize
from lazyparse.core.util import ConsoleLogger, safe_json
from lazyparse.parser.assembler import parse
from lazyparse.sources.text import chars_from_file, open_chars


def parse_command(args):
    """Parse a text file into sentences."""
    try:
        config = load_config(args.config) if args.config else PipelineConfig()
        logger = ConsoleLogger() if args.verbose else None

        if args.text_file == "-":
            chars = chars_from_file(sys.stdin, config.source.read_chunk_size)
            sentences = parse(chars, config, logger=logger)
        else:
            text_path = Path(args.text_file)
            if not text_path.exists():
                print(f"Error: Text file not found: {text_path}", file=sys.stderr)
                return 1
            with open_chars(text_path, config.source) as chars:
                sentences = parse(chars, config, logger=logger)

        summary = summarize(sentences)
        if args.json:
            payload = {"sentences": sentences}
            if args.stats:
                payload["summary"] = summary
            print(safe_json(payload))
            return 0

        for sentence in sentences:
            print(" ".join(sentence))

        if args.stats:
            print(f"\nSentences: {summary.sentence_count}")
            print(f"Words: {summary.word_count}")
            if summary.words_per_sentence:
                wps = summary.words_per_sentence
                print(f"Words per sentence: min={wps['min']:.0f}, "
                      f"mean={wps['mean']:.2f}, max={wps['max']:.0f}")
        return 0

    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Cannot read input: {e}", file=sys.stderr)
        return 1


def validate_config_command(args):
    """Validate a lazyparse config file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1

        print(f"Validating config: {config_path}")
        config = load_config(config_path)

        print("✅ Config validation successful!")
        print(f"   Version: {config.version}")
        print(f"   End of sentence: {config.lexer.end_of_sentence}")
        print(f"   Other punctuation: {config.lexer.other_punctuation}")

        if args.verbose:
            print("\nSource:")
            print(f"   encoding={config.source.encoding}, read_chunk_size={config.source.read_chunk_size}")

        return 0

    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def info_command(args):
    """Display lazyparse version and system information."""
    print("lazyparse CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("lazyparse")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nOptional dependencies:")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lazyparse",
        description="Streaming sentence parser"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Split a text file into sentences"
    )
    parse_parser.add_argument(
        "text_file",
        help="Path to the text file, or - for stdin"
    )
    parse_parser.add_argument(
        "-c", "--config",
        help="Path to a YAML config file"
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as JSON"
    )
    parse_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print sentence and word statistics"
    )
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parse progress to stderr"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a lazyparse config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "parse":
        return parse_command(args)
    elif args.command == "validate":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""CLI for isolang - ISO 639 language code lookups.

Usage:
    python -m isolang lookup de spa "Swahili"
    python -m isolang list
    python -m isolang generate --verbose
"""

import argparse
import json
import sys
from pathlib import Path

from .config import LanguageTableConfig
from .generate import generate
from .language import Language
from .table import LanguageTable, build_table

SOURCE_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_ISO_TABLE = SOURCE_ROOT / "data" / "iso-639-3.tab"
DEFAULT_AUTONYMS_TABLE = SOURCE_ROOT / "data" / "iso639-autonyms.tsv"
DEFAULT_OUTPUT_DIR = Path(__file__).resolve().parent / "tables"
DEFAULT_CONFIG_PATH = Path("isolang.json")


def describe(table: LanguageTable, language: Language) -> str:
    """Format a language as a tab separated line of its available fields.

    Args:
        table: Table providing the optional name lookups
        language: Language to describe

    Returns:
        639-3 code, 639-1 code, English name and autonym, as enabled
    """
    fields = [language.to_639_3(), language.to_639_1() or "-"]
    if table.config.english_names:
        fields.append(table.to_name(language))
    if table.config.local_names:
        fields.append(table.to_autonym(language) or "-")
    return "\t".join(fields)


def run_lookup(table: LanguageTable, values: list[str]) -> int:
    """Print each resolved value; returns the exit status."""
    status = 0
    for value in values:
        language = table.from_str_any(value)
        if language is None:
            print(f"Error: Unknown language: {value!r}", file=sys.stderr)
            status = 1
            continue
        print(describe(table, language))
    return status


def run_list(table: LanguageTable) -> int:
    """Print every language in declaration order."""
    for language in table.all_languages():
        print(describe(table, language))
    return 0


def load_config(config_path: Path | None) -> LanguageTableConfig:
    """Load the table configuration, falling back to defaults.

    Args:
        config_path: JSON file, or None for the default configuration

    Raises:
        FileNotFoundError: If the config file doesn't exist
        json.JSONDecodeError: If the config file is invalid JSON
        TypeError: If the config file has unknown keys
        ValueError: If the configuration is inconsistent
    """
    if config_path is None:
        return LanguageTableConfig()
    return LanguageTableConfig.from_json(config_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="isolang",
        description="isolang - ISO 639 language code and name lookups",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve codes or names (639-1, then 639-3, then English name, then autonym)
  python -m isolang lookup de spa Swahili

  # Case-insensitive names and autonyms, via a config file
  python -m isolang --config isolang.json lookup deutsch

  # List every language
  python -m isolang list

  # Write the default config file
  python -m isolang --create-config

  # Regenerate isolang/tables from data/
  python -m isolang generate --verbose
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="JSON configuration file for the language table",
    )
    parser.add_argument(
        "--create-config",
        action="store_true",
        help=f"Create a default configuration file ({DEFAULT_CONFIG_PATH}) and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print verbose progress information",
    )

    subparsers = parser.add_subparsers(dest="command")

    lookup_parser = subparsers.add_parser("lookup", help="Resolve codes or names")
    lookup_parser.add_argument("values", nargs="+", help="Codes or names to resolve")

    subparsers.add_parser("list", help="List every language")

    generate_parser = subparsers.add_parser(
        "generate", help="Regenerate the static tables from the registry files"
    )
    generate_parser.add_argument(
        "--iso-table",
        type=Path,
        default=DEFAULT_ISO_TABLE,
        help="SIL iso-639-3.tab file",
    )
    generate_parser.add_argument(
        "--autonyms-table",
        type=Path,
        default=DEFAULT_AUTONYMS_TABLE,
        help="Autonyms TSV file",
    )
    generate_parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Directory receiving the generated modules",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Handle --create-config
    if args.create_config:
        LanguageTableConfig().to_json(DEFAULT_CONFIG_PATH)
        print(f"Created default configuration: {DEFAULT_CONFIG_PATH}")
        return 0

    if args.command is None:
        parser.error("a command is required (lookup, list or generate)")

    if args.command == "generate":
        for path in (args.iso_table, args.autonyms_table):
            if not path.exists():
                print(f"Error: Table not found: {path}", file=sys.stderr)
                return 1
        try:
            generate(args.iso_table, args.autonyms_table, args.output_dir, verbose=args.verbose)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    if args.config is not None and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    try:
        config = load_config(args.config)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in config file: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.command == "list":
        config.list_languages = True
    if args.verbose:
        print(f"Using {config}", file=sys.stderr)

    table = build_table(config)
    if args.command == "lookup":
        return run_lookup(table, args.values)
    return run_list(table)


if __name__ == "__main__":
    sys.exit(main())

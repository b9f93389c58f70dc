#!/usr/bin/env python3
"""
xccsv - Xcode String Catalog <-> CSV converter

Modes:
    json2csv - export an .xcstrings catalog to a CSV translation table
    csv2json - rebuild an .xcstrings catalog from a CSV translation table

Example Workflow:
    1. xccsv --mode json2csv --input Localizable.xcstrings --output translations.csv
       → Returns: languages found + stats

    2. [Translators fill in the language columns]

    3. xccsv --mode csv2json --input translations.csv --output Localizable.xcstrings
       → Prints: generated catalog, then languages found + stats

Results are printed as JSON objects. Errors are printed as JSON to stderr
and the process exits with status 1; invalid or missing flags exit with
status 2 after printing usage.
"""

import argparse
import json
import sys
from typing import Optional

from .converter import CSV_TO_JSON, DIRECTIONS, ConversionConfig, run
from .errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xccsv",
        description="xccsv - Xcode String Catalog <-> CSV converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export a catalog for translation
  xccsv --mode json2csv --input Localizable.xcstrings --output translations.csv

  # Import the translated table
  xccsv --mode csv2json --input translations.csv --output Localizable.xcstrings

CSV Layout:
  ,en,de,fr
  greeting,Hello,Hallo,Bonjour

  The first language column is the source language. Keep it first.
        """,
    )
    parser.add_argument("--mode", "-m", required=True, choices=list(DIRECTIONS),
                        help="Conversion direction: 'json2csv' or 'csv2json'")
    parser.add_argument("--input", "-i", required=True, help="Input file path")
    parser.add_argument("--output", "-o", required=True, help="Output file path")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Do not echo the generated catalog (csv2json)")
    return parser


def cmd_convert(args) -> dict:
    """Run the conversion selected by the parsed flags."""
    config = ConversionConfig(
        direction=args.mode,
        input_path=args.input,
        output_path=args.output,
    )
    return run(config)


def main(argv: Optional[list[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input or not args.output:
        parser.error("--input and --output must not be empty")

    try:
        result = cmd_convert(args)
    except ConversionError as e:
        print(json.dumps(e.to_dict()), file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)

    document = result.pop("document")
    if args.mode == CSV_TO_JSON and not args.quiet:
        print(document)
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

"""
Process a pasted board export from the command line.

Reads tab-separated game data from a file (or stdin), normalizes it with the
provider folder map of the chosen market, and writes the catalog import file
to a timestamped path or to stdout.

Usage:
    python process_export.py export.tsv --market ca --output-dir out/
    pbpaste | python process_export.py - --market com --stdout

Exit codes: 0 on success, 1 when no valid rows were found, 2 on input errors.
"""

import argparse
import logging
import sys
from pathlib import Path

from config.input_headers import REQUIRED_COLUMNS_HINT
from config.provider_mappings import MARKET_FOLDER_MAPS
from config.schema import OUTPUT_CSV_COLUMNS
from processing.data_processor import process_for_market
from processing.models import DataProcessingError
from processing.serializer import generate_csv_content
from utils.csv_exporter import save_csv

logger = logging.getLogger(__name__)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="process-export",
        description="Normalize a tab-separated game export into a catalog import file.",
    )
    parser.add_argument("path", nargs="?", default="-", help="Input file path or '-' for stdin")
    parser.add_argument(
        "--market",
        choices=sorted(MARKET_FOLDER_MAPS),
        default="ca",
        help="Market whose provider folder map is used for icon paths",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--output-dir", type=Path, default=Path("."), help="Directory for the output file")
    output.add_argument("--stdout", action="store_true", help="Write the output to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        text = _read_text(args.path)
        result = process_for_market(text, args.market)
        if not result.records:
            sys.stderr.write(f"error: No valid data rows found. {REQUIRED_COLUMNS_HINT}\n")
            return 1

        if args.stdout:
            sys.stdout.write(generate_csv_content(result.records, OUTPUT_CSV_COLUMNS) + "\n")
        else:
            output_path = save_csv(result.records, OUTPUT_CSV_COLUMNS, args.output_dir)
            sys.stderr.write(f"wrote {len(result.records)} records to {output_path}\n")
    except (OSError, DataProcessingError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if result.skipped_rows:
        skipped_lines = ", ".join(str(row.line_number) for row in result.skipped_rows)
        logger.warning(f"Skipped lines: {skipped_lines}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

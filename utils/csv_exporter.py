"""
CSV exporter — preview table and download file for processed records.

Provides what a presentation layer needs after a successful run:
  - a pandas DataFrame in output column order for a preview table,
  - a timestamped download file name,
  - writing the serialized text to disk.

Public API:
    records_to_dataframe(records, columns) → pd.DataFrame
    build_download_filename(now) → str
    save_csv(records, columns, output_dir, now) → Path
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import pandas as pd

from config.schema import OUTPUT_CSV_COLUMNS
from processing.models import GameRecord
from processing.serializer import generate_csv_content

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME_PREFIX: str = "processed_game_data"
_TIMESTAMP_FORMAT: str = "%Y-%m-%d_%H-%M-%S"


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def records_to_dataframe(
    records: Sequence[GameRecord],
    columns: Sequence[str] = OUTPUT_CSV_COLUMNS,
) -> pd.DataFrame:
    """
    Build a preview DataFrame with one row per record.

    Columns follow *columns* exactly; missing values stay None.
    """
    rows = [record.to_row() for record in records]
    return pd.DataFrame(rows, columns=list(columns))


def build_download_filename(now: datetime | None = None) -> str:
    """Return e.g. "processed_game_data_2026-10-19_14-05-09.csv"."""
    now = now or datetime.now()
    return f"{DOWNLOAD_FILENAME_PREFIX}_{now.strftime(_TIMESTAMP_FORMAT)}.csv"


def save_csv(
    records: Sequence[GameRecord],
    columns: Sequence[str],
    output_dir: Path,
    now: datetime | None = None,
) -> Path:
    """
    Serialize records and write them under a timestamped file name.

    Args:
        records: Processed records to write.
        columns: Output field identifiers, in output order.
        output_dir: Directory for the file; created if missing.
        now: Timestamp for the file name (defaults to the current time).

    Returns:
        Path of the written file.

    Raises:
        ValueError: if there are no records to write.
    """
    if not records:
        raise ValueError("No data to download.")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / build_download_filename(now)

    output_path.write_text(generate_csv_content(records, columns), encoding="utf-8")
    logger.info(f"Wrote {len(records)} records to {output_path}")
    return output_path

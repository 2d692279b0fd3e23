"""
Serializer — renders records as a tab-separated text block.

Output is one header line followed by one line per record, joined with "\n"
(no trailing newline). The output columns are chosen by the caller and need
not match the input headers.

Cell rendering:
  - bool → "true" / "false"
  - None → ""
  - tabs and line breaks inside a value → a single space each

An empty record list renders as "" (no header line).

Public API:
    generate_csv_content(records, columns) → str
"""

import logging
from collections.abc import Mapping, Sequence

from config.schema import FIELD_DELIMITER, LINE_DELIMITER
from processing.models import GameRecord

logger = logging.getLogger(__name__)

_BREAKING_CHARACTERS: tuple[str, ...] = (FIELD_DELIMITER, "\r", LINE_DELIMITER)


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def generate_csv_content(
    records: Sequence[GameRecord | Mapping[str, object]],
    columns: Sequence[str],
) -> str:
    """
    Serialize records into tab-separated text.

    Args:
        records: GameRecords (or plain dicts keyed by output field id).
        columns: Output field identifiers, in output order.

    Returns:
        Header line plus one line per record, or "" if there are no records.
    """
    if not records:
        return ""

    header = FIELD_DELIMITER.join(_format_cell(column) for column in columns)
    lines = [header]
    for record in records:
        row = record.to_row() if isinstance(record, GameRecord) else record
        lines.append(
            FIELD_DELIMITER.join(_format_cell(row.get(column)) for column in columns)
        )

    logger.info(f"Serialized {len(records)} records × {len(columns)} columns")
    return LINE_DELIMITER.join(lines)


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _format_cell(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    text = str(value)
    for character in _BREAKING_CHARACTERS:
        text = text.replace(character, " ")
    return text

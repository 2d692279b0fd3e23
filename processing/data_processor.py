"""
Data processor — runs the full paste → records pipeline.

Splits the pasted text into lines, resolves the header row once, then
transforms every data row independently. Rows missing core data are
collected as SkippedRow entries; they never abort the run.

A run that yields zero records is still a success. Whether that deserves a
user-facing message is up to the caller.

Public API:
    parse_pasted_data(text, provider_folder_map) → ProcessingResult
    process_for_market(text, market) → ProcessingResult
"""

import logging
from collections.abc import Mapping

from config.provider_mappings import get_provider_folder_map
from config.schema import FIELD_DELIMITER, LINE_DELIMITER
from processing.header_resolver import resolve_headers
from processing.models import EmptyInputError, MalformedInputError, ProcessingResult
from processing.row_transformer import transform_row

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def parse_pasted_data(
    text: str,
    provider_folder_map: Mapping[str, str],
) -> ProcessingResult:
    """
    Parse a tab-separated paste into normalized game records.

    Args:
        text: Pasted text, header row first.
        provider_folder_map: Raw provider → asset folder name, used for
                             derived icon paths.

    Returns:
        ProcessingResult with the records, the skipped rows and the header
        resolution.

    Raises:
        EmptyInputError: if the text is blank.
        MalformedInputError: if there is no data row after the header.
        MissingHeadersError: if a core-required header is absent.
    """
    if not text or not text.strip():
        raise EmptyInputError("Input data cannot be empty.")

    lines = _trim_blank_lines(text.split(LINE_DELIMITER))
    if len(lines) < 2:
        raise MalformedInputError(
            "Data must include a header row and at least one data row."
        )

    resolution = resolve_headers(lines[0])
    result = ProcessingResult(header_resolution=resolution)

    for line_index, line in enumerate(lines[1:], start=1):
        row_result = transform_row(
            line.split(FIELD_DELIMITER),
            resolution.indices,
            provider_folder_map,
            line_number=line_index + 1,
        )
        if row_result.ok:
            result.records.append(row_result.record)
        else:
            result.skipped_rows.append(row_result.skipped)

    logger.info(
        f"Processing complete: {len(lines) - 1} data rows, "
        f"{len(result.records)} records, {len(result.skipped_rows)} skipped"
    )
    return result


def process_for_market(text: str, market: str) -> ProcessingResult:
    """
    Parse a paste using the built-in provider folder map of a market.

    Args:
        text: Pasted text, header row first.
        market: "ca" or "com" (".CA" / ".COM" also accepted).

    Raises:
        ValueError: for an unknown market, plus everything
                    parse_pasted_data raises.
    """
    folder_map = get_provider_folder_map(market)
    logger.info(f"Processing paste for market '{market}'")
    return parse_pasted_data(text, folder_map)


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _trim_blank_lines(lines: list[str]) -> list[str]:
    """
    Drop whitespace-only lines from both ends.

    Lines themselves are left intact: a leading tab on the header row is a
    blank first column, and stripping it would shift every column index.
    """
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]

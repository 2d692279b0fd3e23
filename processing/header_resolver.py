"""
Header resolver — locates catalog fields in the header row of a paste.

Each logical field in INPUT_HEADER_MAPPINGS is looked up by its exact header
text among the trimmed header cells. The first matching column wins, so a
duplicated header resolves to its left-most occurrence.

Missing optional headers are tolerated (the field stays empty for every row).
Missing core-required headers abort processing with MissingHeadersError,
which lists the expected header texts. For diagnostics only, each missing
required header is paired with the closest unrecognized input header
(thefuzz, threshold 80) so the caller can point at a likely typo; the
suggestion never changes the resolution itself.

Public API:
    split_header_line(header_line) → list[str]
    resolve_headers(header_line) → HeaderResolution
"""

import logging

from config.input_headers import CORE_REQUIRED_INPUT_HEADER_KEYS, INPUT_HEADER_MAPPINGS
from config.schema import FIELD_DELIMITER
from processing.models import HeaderResolution, MissingHeadersError
from utils.fuzzy_match import closest_header

logger = logging.getLogger(__name__)

_SUGGESTION_THRESHOLD: int = 80


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def split_header_line(header_line: str) -> list[str]:
    """Split the header row on tabs and trim every cell."""
    return [cell.strip() for cell in header_line.split(FIELD_DELIMITER)]


def resolve_headers(header_line: str) -> HeaderResolution:
    """
    Map every known logical field to its column index in the header row.

    Args:
        header_line: First line of the pasted text (tab-separated).

    Returns:
        HeaderResolution with the index mapping and the lists of missing
        and unrecognized headers.

    Raises:
        MissingHeadersError: if any core-required header is absent.
    """
    header_cells = split_header_line(header_line)
    result = HeaderResolution()

    for internal_key, expected_header in INPUT_HEADER_MAPPINGS.items():
        index = _first_index(header_cells, expected_header)
        if index is not None:
            result.indices[internal_key] = index
        elif internal_key in CORE_REQUIRED_INPUT_HEADER_KEYS:
            result.missing_required.append(expected_header)
        else:
            result.missing_optional.append(expected_header)

    known_headers = set(INPUT_HEADER_MAPPINGS.values())
    result.unrecognized = [
        cell for cell in header_cells if cell and cell not in known_headers
    ]
    for cell in result.unrecognized:
        logger.debug(f"Ignoring unrecognized header '{cell}'")

    if result.missing_required:
        suggestions = _suggest_headers(result.missing_required, result.unrecognized)
        for expected, found in suggestions.items():
            logger.warning(
                f"Required header '{expected}' not found; did you mean '{found}'?"
            )
        raise MissingHeadersError(result.missing_required, suggestions)

    logger.info(
        f"Header resolution complete: {len(result.indices)} fields found, "
        f"{len(result.missing_optional)} optional fields missing, "
        f"{len(result.unrecognized)} unrecognized columns"
    )
    return result


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _first_index(cells: list[str], expected: str) -> int | None:
    try:
        return cells.index(expected)
    except ValueError:
        return None


def _suggest_headers(missing: list[str], unrecognized: list[str]) -> dict[str, str]:
    """
    Pair each missing header with its closest unrecognized input header.

    Returns:
        expected header → input header, only for pairs at or above the
        suggestion threshold.
    """
    suggestions: dict[str, str] = {}
    for expected in missing:
        found = closest_header(expected, unrecognized, threshold=_SUGGESTION_THRESHOLD)
        if found is not None:
            suggestions[expected] = found
    return suggestions

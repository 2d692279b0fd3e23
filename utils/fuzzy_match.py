"""
Near-miss header lookup for diagnostics.

When a required header is missing, the paste often carries it under a
slightly different spelling ("Game code", "Provider Game"). closest_header
picks that cell out of the unrecognized headers so the error can say
"did you mean ...?". Resolution itself is always exact.
"""

import logging
from collections.abc import Sequence

from thefuzz import fuzz, process

logger = logging.getLogger(__name__)


def closest_header(
    expected: str,
    headers: Sequence[str],
    threshold: int = 80,
) -> str | None:
    """
    Return the input header that most resembles *expected*, if any.

    Scored with token_sort_ratio on lowercased text, so case and word order
    do not matter ("Provider Game" matches "Game Provider"). Blank header
    cells are never suggested. On a tie the left-most header wins.

    Args:
        expected: Header text the catalog expects.
        headers: Header cells from the paste, as typed.
        threshold: Minimum score (0-100) for a suggestion.
    """
    choices = [header for header in headers if header.strip()]
    if not expected or not choices:
        return None

    match = process.extractOne(
        expected,
        choices,
        processor=lambda text: text.strip().lower(),
        scorer=fuzz.token_sort_ratio,
        score_cutoff=threshold,
    )
    if match is None:
        logger.debug(f"No input header resembles '{expected}'")
        return None

    header, score = match[0], match[1]
    logger.debug(f"'{header}' resembles expected header '{expected}' (score={score})")
    return header

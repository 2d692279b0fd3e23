"""
Row transformer — turns one pasted data row into a GameRecord.

Rows are independent: nothing is carried from one row to the next. A row
without a game code, name or provider is skipped (logged as a warning with
its 1-based line number) rather than emitted as a partial record.

Derivation order:
  1. Raw provider, lower-cased for lookups only.
  2. Provider display name (PROVIDER_DISPLAY_NAMES, else raw value).
  3. SEO slug (explicit cell verbatim, else derived from the name).
  4. Default image path (URL passthrough, /library/ rooting, or an icon path
     built from the market folder map).
  5. Mobile game code (defaults to the game code).
  6. Launch types and live launch alias.
  7. Boolean flags via the tolerant parser.
  8. Passthrough of layout images, labels and custom fields.

Public API:
    transform_row(cells, header_indices, provider_folder_map, line_number) → RowResult
    generate_seo_friendly_name(name) → str
    parse_boolean_string(value, default) → bool
    normalize_provider_name(raw_provider) → str
    resolve_launch_types(raw_provider, game_code, live_launch_alias) → tuple
    resolve_default_image(image_value, raw_provider, game_code, provider_folder_map) → str
"""

import logging
import re
from collections.abc import Mapping
from urllib.parse import quote

from config.provider_mappings import (
    DEFAULT_LAUNCH_TYPE,
    LIVE_CASINO_PROVIDER,
    PROVIDER_DISPLAY_NAMES,
    PROVIDER_LAUNCH_TYPES,
)
from config.schema import (
    ABSOLUTE_URL_PREFIXES,
    BOOLEAN_FLAG_DEFAULTS,
    DEMO_MODE_SUPPORT,
    FALSE_TOKENS,
    GAME_MODE,
    ICON_DIRECTORY,
    IMAGE_EXTENSION,
    IMAGE_ROOT,
    LAYOUT_IMAGE_FIELDS,
    TRUE_TOKENS,
)
from processing.models import GameRecord, RowResult, SkippedRow

logger = logging.getLogger(__name__)

# Symbols removed outright before slugging (™ ® © %)
_SLUG_STRIP_SYMBOLS = re.compile(r"[™®©%]")
_SLUG_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")
_SLASH_RUN = re.compile(r"/{2,}")

# encodeURIComponent leaves these unescaped in addition to alphanumerics and -_.~
_FOLDER_SAFE_CHARS = "!*'()"


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def transform_row(
    cells: list[str],
    header_indices: Mapping[str, int],
    provider_folder_map: Mapping[str, str],
    line_number: int,
) -> RowResult:
    """
    Build a GameRecord from one data row.

    Args:
        cells: Raw cells of the row, split on tabs and not yet trimmed.
        header_indices: Logical field id → column index (header_resolver).
        provider_folder_map: Raw provider → asset folder name.
        line_number: 1-based line number of the row in the pasted text.

    Returns:
        RowResult holding the record, or a SkippedRow if the game code,
        name or provider is missing.
    """

    def cell(key: str) -> str | None:
        index = header_indices.get(key)
        if index is None or index >= len(cells):
            return None
        return cells[index].strip() or None

    game_code = cell("GAME_CODE")
    name = cell("NAME")
    raw_provider = cell("GAME_PROVIDER")

    if not game_code or not name or not raw_provider:
        reason = "Missing core data (game code, name, or game provider)"
        logger.warning(f"Skipping line {line_number}: {reason}")
        return RowResult(skipped=SkippedRow(line_number=line_number, reason=reason))

    seo_name = cell("SEO_FRIENDLY_GAME_NAME") or generate_seo_friendly_name(name)
    default_image = resolve_default_image(
        cell("DEFAULT_USER_IMAGE"), raw_provider, game_code, provider_folder_map
    )
    desktop_type, mobile_type, live_alias = resolve_launch_types(
        raw_provider, game_code, cell("LIVE_LAUNCH_ALIAS")
    )

    def flag(key: str) -> bool:
        return parse_boolean_string(cell(key), BOOLEAN_FLAG_DEFAULTS[key])

    record = GameRecord(
        game_code=game_code,
        name=name,
        game_provider=normalize_provider_name(raw_provider),
        mobile_game_code=cell("MOBILE_GAME_CODE") or game_code,
        seo_friendly_game_name=seo_name,
        default_game_image=default_image,
        layout_images={
            output_field: cell(input_key)
            for input_key, output_field in LAYOUT_IMAGE_FIELDS.items()
        },
        is_excluded_from_pgg=flag("IS_EXCLUDED_FROM_PGG"),
        is_game_new=flag("IS_GAME_NEW"),
        is_game_popular=flag("IS_GAME_POPULAR"),
        is_game_hot=flag("IS_GAME_HOT"),
        is_game_exclusive=flag("IS_GAME_EXCLUSIVE"),
        desktop_game_type=desktop_type,
        mobile_game_type=mobile_type,
        live_launch_alias=live_alias,
        bingo_game_type=cell("BINGO_GAME_TYPE"),
        vf_game_type=cell("RTP_GAME_TYPE"),
        jackpot_code=cell("JACKPOT_CODE"),
        demo_mode_support=DEMO_MODE_SUPPORT,
        game_mode=GAME_MODE,
        url_custom_parameters=cell("URL_CUSTOM_PARAMETERS"),
        article_id=cell("ARTICLE_ID"),
        mobile_article_id=cell("MOBILE_ARTICLE_ID"),
        description=cell("DESCRIPTION"),
        label_drops_and_wins=cell("GAMELABELS_DROPS_AND_WINS"),
        label_rising_star=cell("GAMELABELS_RISING_STAR"),
        label_exclusive=cell("GAMELABELS_EXCLUSIVE"),
        label_new=cell("GAMELABELS_NEW"),
        custom_field_provider=cell("GAMESCUSTOMFIELDS_PROVIDER"),
        custom_field_external_provider_game_id=cell("GAMESCUSTOMFIELDS_EXTERNALPROVIDERGAMEID"),
    )

    logger.debug(
        f"Line {line_number}: '{game_code}' → slug '{seo_name}', "
        f"image '{default_image}', launch {desktop_type}/{mobile_type}"
    )
    return RowResult(record=record)


def generate_seo_friendly_name(name: str) -> str:
    """
    Derive a URL slug from a game name.

    Lower-cases, drops ™ ® © %, spells out "&" as "and", removes anything
    that is not a letter, digit, whitespace or hyphen, then joins words with
    single hyphens and trims hyphens from both ends.

    Examples:
        "Book of Ra™"  → "book-of-ra"
        "Fire & Ice"   → "fire-and-ice"
        "--Leading--"  → "leading"
    """
    if not name:
        return ""
    slug = name.lower()
    slug = _SLUG_STRIP_SYMBOLS.sub("", slug)
    slug = slug.replace("&", "and")
    slug = _SLUG_DISALLOWED.sub("", slug)
    slug = slug.strip()
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip("-")


def parse_boolean_string(value: str | None, default: bool = False) -> bool:
    """
    Parse a loosely formatted boolean cell.

    "true"/"1" → True, "false"/"0" → False (case-insensitive, whitespace
    ignored). Anything else, including None, returns *default*.
    """
    if value is None:
        return default
    token = value.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return default


def normalize_provider_name(raw_provider: str) -> str:
    """Return the catalog display name for a raw provider, or the raw value."""
    return PROVIDER_DISPLAY_NAMES.get(raw_provider.strip().lower(), raw_provider)


def resolve_launch_types(
    raw_provider: str,
    game_code: str,
    live_launch_alias: str | None,
) -> tuple[str, str, str | None]:
    """
    Decide the desktop/mobile launch types and the live launch alias.

    The live casino provider always launches through the live client and
    its alias is forced to the game code, whatever the alias cell says.

    Returns:
        (desktop_game_type, mobile_game_type, live_launch_alias)
    """
    provider_key = raw_provider.strip().lower()
    launch_type = PROVIDER_LAUNCH_TYPES.get(provider_key, DEFAULT_LAUNCH_TYPE)
    if provider_key == LIVE_CASINO_PROVIDER:
        live_launch_alias = game_code
    return launch_type, launch_type, live_launch_alias


def resolve_default_image(
    image_value: str | None,
    raw_provider: str,
    game_code: str,
    provider_folder_map: Mapping[str, str],
) -> str:
    """
    Resolve the default game image to a URL or a /library/ rooted path.

    Args:
        image_value: Trimmed image cell, or None when absent/empty.
        raw_provider: Provider exactly as pasted (case preserved).
        game_code: Game code used as the icon file name.
        provider_folder_map: Raw provider → asset folder name.

    Returns:
        - image_value unchanged if it is an http(s) URL;
        - "/library/<path>" for any other explicit value;
        - "/library/Game%20Icons/<folder>/<game_code>.webp" when absent,
          where <folder> is the mapped (else raw) provider, percent-encoded.
        Runs of "/" are collapsed in every non-URL result.
    """
    if image_value:
        if image_value.startswith(ABSOLUTE_URL_PREFIXES):
            return image_value
        path = _SLASH_RUN.sub("/", image_value).lstrip("/")
        if path.lower().startswith(f"{IMAGE_ROOT}/"):
            return f"/{path}"
        return f"/{IMAGE_ROOT}/{path}"

    folder_name = provider_folder_map.get(raw_provider) or raw_provider
    encoded_folder = quote(folder_name, safe=_FOLDER_SAFE_CHARS)
    path = f"/{IMAGE_ROOT}/{ICON_DIRECTORY}/{encoded_folder}/{game_code}{IMAGE_EXTENSION}"
    return _SLASH_RUN.sub("/", path)

"""
Output schema definitions for the catalog import file.

Defines the output column order, the values that are fixed for every record,
boolean parsing tokens, and the constants used to build image paths.
"""

from config.input_headers import (
    LAYOUT_IMAGE_VARIANTS,
    LAYOUT_ORIENTATIONS,
    LAYOUT_SHAPES,
)

# ---------------------------------------------------------------------------
# Layout image output fields, e.g. "landscape_layout1x1_mainImage".
# LAYOUT_IMAGE_FIELDS maps logical input id → output field identifier.
# ---------------------------------------------------------------------------
LAYOUT_IMAGE_FIELDS: dict[str, str] = {
    f"{orientation.upper()}_LAYOUT_{shape.upper()}_{variant}_IMAGE":
        f"{orientation}_layout{shape}_{output_suffix}"
    for orientation in LAYOUT_ORIENTATIONS
    for shape in LAYOUT_SHAPES
    for variant, (_, output_suffix) in LAYOUT_IMAGE_VARIANTS.items()
}

# Output column names in the exact order of the catalog import file.
OUTPUT_CSV_COLUMNS: list[str] = [
    "gameCode",
    "name",
    "gameProvider",
    "mobileGameCode",
    "seoFriendlyGameName",
    "defaultGameImage",
    "isActive",
    "isExcludedFromPGG",
    "isExcludedFromSitemap",
    "deviceAvailability_mobile",
    "deviceAvailability_tablet",
    "deviceAvailability_desktop",
    "browserAvailability_edge",
    "browserAvailability_safari",
    "browserAvailability_chrome",
    "browserAvailability_firefox",
    "browserAvailability_other",
    "osAvailability_ios",
    "osAvailability_macintosh",
    "osAvailability_android",
    "osAvailability_windows",
    "osAvailability_other",
    "isGameNew",
    "isGamePopular",
    "isGameHot",
    "isGameExclusive",
    "desktopGameType",
    "mobileGameType",
    "liveLaunchAlias",
    "bingoGameType",
    "vfGameType",
    "jackpotCode",
    "demoModeSupport",
    "gameMode",
    "urlCustomParameters",
    *LAYOUT_IMAGE_FIELDS.values(),
    "articleId",
    "mobileArticleId",
    "description",
    "gameLabelsData_Drops and Wins",
    "gameLabelsData_RisingStar",
    "gameLabelsData_Exclusive",
    "gameLabelsData_New",
    "gamesCustomFields_provider",
    "gamesCustomFields_externalProviderGameId",
]

# Availability columns: every record is available everywhere.
AVAILABILITY_FIELDS: tuple[str, ...] = (
    "deviceAvailability_mobile",
    "deviceAvailability_tablet",
    "deviceAvailability_desktop",
    "browserAvailability_edge",
    "browserAvailability_safari",
    "browserAvailability_chrome",
    "browserAvailability_firefox",
    "browserAvailability_other",
    "osAvailability_ios",
    "osAvailability_macintosh",
    "osAvailability_android",
    "osAvailability_windows",
    "osAvailability_other",
)

# ---------------------------------------------------------------------------
# Fixed record values
# ---------------------------------------------------------------------------
DEMO_MODE_SUPPORT: str = "unavailable"
GAME_MODE: str = "default"

# Boolean flag id → default used when the cell is absent or unparseable.
BOOLEAN_FLAG_DEFAULTS: dict[str, bool] = {
    "IS_EXCLUDED_FROM_PGG": False,
    "IS_GAME_NEW": True,
    "IS_GAME_POPULAR": False,
    "IS_GAME_HOT": False,
    "IS_GAME_EXCLUSIVE": False,
}

# Tokens compared after strip() + lower().
TRUE_TOKENS: frozenset[str] = frozenset({"true", "1"})
FALSE_TOKENS: frozenset[str] = frozenset({"false", "0"})

# ---------------------------------------------------------------------------
# Image paths
# ---------------------------------------------------------------------------
IMAGE_ROOT: str = "library"
ICON_DIRECTORY: str = "Game%20Icons"  # already percent-encoded
IMAGE_EXTENSION: str = ".webp"
ABSOLUTE_URL_PREFIXES: tuple[str, ...] = ("http://", "https://")

# ---------------------------------------------------------------------------
# Delimited text format
# ---------------------------------------------------------------------------
FIELD_DELIMITER: str = "\t"
LINE_DELIMITER: str = "\n"

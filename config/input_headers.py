"""
Input header catalog.

Maps internal logical field identifiers to the exact header text expected in
the first row of a pasted board export. Matching is exact: no case folding,
no fuzzy matching (see processing/header_resolver.py).

Also lists the core-required identifiers. If any of their headers is missing
the whole paste is rejected; every other header is optional.
"""

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Layout image headers
# Three orientations x four layout shapes x four image variants.
# Logical id:  LANDSCAPE_LAYOUT_1X1_MAIN_IMAGE
# Header text: "Landscape Layout 1x1 Main Image"
# ---------------------------------------------------------------------------
LAYOUT_ORIENTATIONS: tuple[str, ...] = ("landscape", "portrait", "square")
LAYOUT_SHAPES: tuple[str, ...] = ("1x1", "1x2", "2x1", "2x2")

# logical suffix → (header words, output suffix)
LAYOUT_IMAGE_VARIANTS: dict[str, tuple[str, str]] = {
    "MAIN": ("Main Image", "mainImage"),
    "MOBILE": ("Mobile Image", "mobileImage"),
    "GUEST_MAIN": ("Guest Main Image", "guestMainImage"),
    "GUEST_MOBILE": ("Guest Mobile Image", "guestMobileImage"),
}


def _layout_image_headers() -> dict[str, str]:
    headers: dict[str, str] = {}
    for orientation in LAYOUT_ORIENTATIONS:
        for shape in LAYOUT_SHAPES:
            for variant, (header_words, _) in LAYOUT_IMAGE_VARIANTS.items():
                key = f"{orientation.upper()}_LAYOUT_{shape.upper()}_{variant}_IMAGE"
                headers[key] = f"{orientation.capitalize()} Layout {shape} {header_words}"
    return headers


# ---------------------------------------------------------------------------
# Full catalog: logical id → expected header text
# Order matters: missing required headers are reported in this order.
# ---------------------------------------------------------------------------
_HEADERS: dict[str, str] = {
    # Identity
    "GAME_CODE": "Game Code",
    "NAME": "Name",
    "GAME_PROVIDER": "Game Provider",
    "MOBILE_GAME_CODE": "Mobile Game Code",
    "SEO_FRIENDLY_GAME_NAME": "SEO Friendly Game Name",
    # Default image
    "DEFAULT_USER_IMAGE": "Default Game Image",
    # Status flags
    "IS_EXCLUDED_FROM_PGG": "Is Excluded From PGG",
    "IS_GAME_NEW": "Is Game New",
    "IS_GAME_POPULAR": "Is Game Popular",
    "IS_GAME_HOT": "Is Game Hot",
    "IS_GAME_EXCLUSIVE": "Is Game Exclusive",
    # Launch configuration
    "LIVE_LAUNCH_ALIAS": "Live Launch Alias",
    "BINGO_GAME_TYPE": "Bingo Game Type",
    "RTP_GAME_TYPE": "RTP Game Type",
    "JACKPOT_CODE": "Jackpot Code",
    "URL_CUSTOM_PARAMETERS": "URL Custom Parameters",
    # Descriptive
    "ARTICLE_ID": "Article ID",
    "MOBILE_ARTICLE_ID": "Mobile Article ID",
    "DESCRIPTION": "Description",
    # Labels and custom fields
    "GAMELABELS_DROPS_AND_WINS": "Game Label: Drops and Wins",
    "GAMELABELS_RISING_STAR": "Game Label: Rising Star",
    "GAMELABELS_EXCLUSIVE": "Game Label: Exclusive",
    "GAMELABELS_NEW": "Game Label: New",
    "GAMESCUSTOMFIELDS_PROVIDER": "Custom Field: Provider",
    "GAMESCUSTOMFIELDS_EXTERNALPROVIDERGAMEID": "Custom Field: External Provider Game ID",
}
_HEADERS.update(_layout_image_headers())

INPUT_HEADER_MAPPINGS: MappingProxyType = MappingProxyType(_HEADERS)

# Logical ids whose headers must be present for processing to start at all.
CORE_REQUIRED_INPUT_HEADER_KEYS: tuple[str, ...] = (
    "GAME_CODE",
    "NAME",
    "GAME_PROVIDER",
)

# Human-readable hint for callers that show an input placeholder.
REQUIRED_COLUMNS_HINT: str = (
    "Required columns: "
    + ", ".join(INPUT_HEADER_MAPPINGS[key] for key in CORE_REQUIRED_INPUT_HEADER_KEYS)
    + "."
)

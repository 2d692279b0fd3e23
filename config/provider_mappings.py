"""
Provider lookup tables.

Three kinds of provider data live here:
  - PROVIDER_DISPLAY_NAMES: lower-cased raw provider → name shown in the
    catalog output. Providers not listed pass through unchanged.
  - Launch-type rules: which client launch mechanism a provider's games use.
  - Market folder maps: raw provider → asset folder name used when deriving
    a default game icon path. One map per market (.CA, .COM).

Usage:
    from config.provider_mappings import get_provider_folder_map

    folder_map = get_provider_folder_map("ca")
    folder_map.get("Pragmatic")   # "Pragmatic Play"
"""

import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Display names (keys are lower-cased raw provider names)
# ---------------------------------------------------------------------------
PROVIDER_DISPLAY_NAMES: MappingProxyType = MappingProxyType({
    "pragmatic": "Pragmatic Play",
    "konami via sg": "Konami",
    "high5 via sg": "High 5",
    "sg": "Light and Wonder",
    "elk studios via lnw": "ELK Studios",
    "peter & sons": "Peter and Sons",
    "hacksaw": "Hacksaw",
    "hacksaw openrgs": "Hacksaw",
})

# ---------------------------------------------------------------------------
# Launch types
# ---------------------------------------------------------------------------
DEFAULT_LAUNCH_TYPE: str = "POP"
LIVE_LAUNCH_TYPE: str = "LIVE"

# Lower-cased raw provider whose games launch through the live client.
# The live launch alias is forced to the game code for these.
LIVE_CASINO_PROVIDER: str = "playtech live"

# Lower-cased raw provider → launch type for both desktop and mobile.
PROVIDER_LAUNCH_TYPES: MappingProxyType = MappingProxyType({
    LIVE_CASINO_PROVIDER: LIVE_LAUNCH_TYPE,
    "playtech": "GPAS",
})

# ---------------------------------------------------------------------------
# Market folder maps: raw provider (as typed on the board) → asset folder
# ---------------------------------------------------------------------------
PROVIDER_FOLDER_MAP_CA: MappingProxyType = MappingProxyType({
    "Pragmatic": "Pragmatic Play",
    "Playtech": "Playtech",
    "Playtech Live": "Playtech Live",
    "Evolution": "Evolution",
    "NetEnt": "NetEnt",
    "Red Tiger": "Red Tiger",
    "SG": "Light & Wonder",
    "Konami via SG": "Konami",
    "High5 via SG": "High 5 Games",
    "ELK Studios via LNW": "ELK Studios",
    "Peter & Sons": "Peter & Sons",
    "Hacksaw": "Hacksaw Gaming",
    "Hacksaw OpenRGS": "Hacksaw Gaming",
    "Push Gaming": "Push Gaming",
    "Relax Gaming": "Relax Gaming",
})

PROVIDER_FOLDER_MAP_COM: MappingProxyType = MappingProxyType({
    "Pragmatic": "Pragmatic Play",
    "Playtech": "Playtech",
    "Playtech Live": "Playtech Live Casino",
    "Evolution": "Evolution Gaming",
    "NetEnt": "NetEnt",
    "Red Tiger": "Red Tiger Gaming",
    "SG": "Light and Wonder",
    "Konami via SG": "Konami",
    "High5 via SG": "High5",
    "ELK Studios via LNW": "ELK",
    "Peter & Sons": "Peter and Sons",
    "Hacksaw": "Hacksaw Gaming",
    "Hacksaw OpenRGS": "Hacksaw Gaming",
    "Blueprint": "Blueprint Gaming",
    "Big Time Gaming": "Big Time Gaming",
})

MARKET_FOLDER_MAPS: MappingProxyType = MappingProxyType({
    "ca": PROVIDER_FOLDER_MAP_CA,
    "com": PROVIDER_FOLDER_MAP_COM,
})


def get_provider_folder_map(market: str) -> MappingProxyType:
    """
    Return the built-in provider → folder map for a market.

    Args:
        market: Market key, e.g. "ca", ".CA", "com". Case-insensitive, a
                leading dot is ignored.

    Returns:
        The read-only folder mapping for that market.

    Raises:
        ValueError: if the market has no built-in map.
    """
    key = market.strip().lower().lstrip(".")
    if key not in MARKET_FOLDER_MAPS:
        raise ValueError(
            f"Unknown market '{market}'. "
            f"Expected one of: {', '.join(sorted(MARKET_FOLDER_MAPS))}"
        )
    logger.debug(f"Using provider folder map for market '.{key.upper()}'")
    return MARKET_FOLDER_MAPS[key]

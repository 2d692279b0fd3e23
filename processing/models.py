"""
Data classes and error types shared by the processing modules.

GameRecord is the unit of output: one normalized catalog entry built from
one pasted data row. RowResult wraps either a record or the reason the row
was skipped, and ProcessingResult collects everything from one paste.
"""

from dataclasses import dataclass, field

from config.provider_mappings import DEFAULT_LAUNCH_TYPE
from config.schema import AVAILABILITY_FIELDS, DEMO_MODE_SUPPORT, GAME_MODE


# ═══════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════

class DataProcessingError(ValueError):
    """Base error for a paste that cannot be processed at all."""


class MalformedInputError(DataProcessingError):
    """Raised when the input has no header row or no data rows."""


class EmptyInputError(MalformedInputError):
    """Raised when the input is blank."""


class MissingHeadersError(DataProcessingError):
    """Raised when one or more core-required headers are absent."""

    def __init__(self, missing_headers: list[str], suggestions: dict[str, str] | None = None):
        self.missing_headers = list(missing_headers)
        self.suggestions = dict(suggestions or {})
        super().__init__(f"Missing required headers: {', '.join(self.missing_headers)}.")


# ═══════════════════════════════════════════════════════════════════════════
# Data classes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class GameRecord:
    """One normalized game entry."""

    # Identity
    game_code: str
    name: str
    game_provider: str
    mobile_game_code: str
    seo_friendly_game_name: str

    # Image
    default_game_image: str
    layout_images: dict[str, str | None] = field(default_factory=dict)
    """Output field identifier (e.g. "square_layout2x2_mainImage") → path."""

    # Status flags
    is_active: bool = True
    is_excluded_from_pgg: bool = False
    is_excluded_from_sitemap: bool = False
    is_game_new: bool = True
    is_game_popular: bool = False
    is_game_hot: bool = False
    is_game_exclusive: bool = False

    # Launch configuration
    desktop_game_type: str = DEFAULT_LAUNCH_TYPE
    mobile_game_type: str = DEFAULT_LAUNCH_TYPE
    live_launch_alias: str | None = None
    bingo_game_type: str | None = None
    vf_game_type: str | None = None
    jackpot_code: str | None = None
    demo_mode_support: str = DEMO_MODE_SUPPORT
    game_mode: str = GAME_MODE
    url_custom_parameters: str | None = None

    # Descriptive / custom passthrough
    article_id: str | None = None
    mobile_article_id: str | None = None
    description: str | None = None
    label_drops_and_wins: str | None = None
    label_rising_star: str | None = None
    label_exclusive: str | None = None
    label_new: str | None = None
    custom_field_provider: str | None = None
    custom_field_external_provider_game_id: str | None = None

    def to_row(self) -> dict[str, str | bool | None]:
        """Return the record keyed by output field identifiers."""
        row: dict[str, str | bool | None] = {
            "gameCode": self.game_code,
            "name": self.name,
            "gameProvider": self.game_provider,
            "mobileGameCode": self.mobile_game_code,
            "seoFriendlyGameName": self.seo_friendly_game_name,
            "defaultGameImage": self.default_game_image,
            "isActive": self.is_active,
            "isExcludedFromPGG": self.is_excluded_from_pgg,
            "isExcludedFromSitemap": self.is_excluded_from_sitemap,
        }
        # Availability is not configurable per row
        row.update({name: True for name in AVAILABILITY_FIELDS})
        row.update({
            "isGameNew": self.is_game_new,
            "isGamePopular": self.is_game_popular,
            "isGameHot": self.is_game_hot,
            "isGameExclusive": self.is_game_exclusive,
            "desktopGameType": self.desktop_game_type,
            "mobileGameType": self.mobile_game_type,
            "liveLaunchAlias": self.live_launch_alias,
            "bingoGameType": self.bingo_game_type,
            "vfGameType": self.vf_game_type,
            "jackpotCode": self.jackpot_code,
            "demoModeSupport": self.demo_mode_support,
            "gameMode": self.game_mode,
            "urlCustomParameters": self.url_custom_parameters,
        })
        row.update(self.layout_images)
        row.update({
            "articleId": self.article_id,
            "mobileArticleId": self.mobile_article_id,
            "description": self.description,
            "gameLabelsData_Drops and Wins": self.label_drops_and_wins,
            "gameLabelsData_RisingStar": self.label_rising_star,
            "gameLabelsData_Exclusive": self.label_exclusive,
            "gameLabelsData_New": self.label_new,
            "gamesCustomFields_provider": self.custom_field_provider,
            "gamesCustomFields_externalProviderGameId": self.custom_field_external_provider_game_id,
        })
        return row


@dataclass
class SkippedRow:
    """A data row that was dropped instead of producing a record."""

    line_number: int
    """1-based line number in the pasted text (the header is line 1)."""

    reason: str


@dataclass
class RowResult:
    """Outcome of transforming one data row: a record or a skip."""

    record: GameRecord | None = None
    skipped: SkippedRow | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None


@dataclass
class HeaderResolution:
    """Result of matching the header row against the input header catalog."""

    indices: dict[str, int] = field(default_factory=dict)
    """Logical field id → zero-based column index (first match)."""

    missing_required: list[str] = field(default_factory=list)
    """Expected header texts of core-required fields that were not found."""

    missing_optional: list[str] = field(default_factory=list)
    """Expected header texts of optional fields that were not found."""

    unrecognized: list[str] = field(default_factory=list)
    """Input header cells that match no catalog entry."""


@dataclass
class ProcessingResult:
    """Everything produced from one paste."""

    records: list[GameRecord] = field(default_factory=list)
    skipped_rows: list[SkippedRow] = field(default_factory=list)
    header_resolution: HeaderResolution = field(default_factory=HeaderResolution)

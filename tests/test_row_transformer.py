"""
Tests for processing/row_transformer.py

Covers: slug derivation, tolerant boolean parsing, provider display names,
launch-type overrides, default image resolution, passthrough fields, and
skipping rows that lack core data.
"""

import logging

import pytest

from config.input_headers import INPUT_HEADER_MAPPINGS
from config.provider_mappings import PROVIDER_FOLDER_MAP_CA
from processing.row_transformer import (
    generate_seo_friendly_name,
    normalize_provider_name,
    parse_boolean_string,
    resolve_default_image,
    resolve_launch_types,
    transform_row,
)


# ---------------------------------------------------------------------------
# Helper to build a row + header index mapping
# ---------------------------------------------------------------------------

def _make_row(values: dict[str, str]) -> tuple[list[str], dict[str, int]]:
    """Build (cells, header_indices) from logical id → raw cell value."""
    base = {
        "GAME_CODE": "ABC123",
        "NAME": "Book of Ra™",
        "GAME_PROVIDER": "NetEnt",
    }
    base.update(values)
    cells = list(base.values())
    indices = {key: position for position, key in enumerate(base)}
    return cells, indices


def _transform(values: dict[str, str] | None = None, folder_map: dict | None = None):
    cells, indices = _make_row(values or {})
    return transform_row(cells, indices, folder_map or {}, line_number=2)


# ═══════════════════════════════════════════════════════════════════════════
# Slug derivation
# ═══════════════════════════════════════════════════════════════════════════

class TestSeoFriendlyName:
    @pytest.mark.parametrize("name, expected", [
        ("Book of Ra™", "book-of-ra"),
        ("Fire & Ice", "fire-and-ice"),
        ("Multi   Spaces", "multi-spaces"),
        ("--Leading--", "leading"),
        ("Starburst® XXXtreme", "starburst-xxxtreme"),
        ("100% Hot", "100-hot"),
        ("Gates of Olympus 1000!", "gates-of-olympus-1000"),
        ("Big Bass - Hold & Spinner", "big-bass-hold-and-spinner"),
    ])
    def test_examples(self, name, expected):
        assert generate_seo_friendly_name(name) == expected

    def test_empty_name(self):
        assert generate_seo_friendly_name("") == ""

    @pytest.mark.parametrize("name", ["Book of Ra™", "Fire & Ice", "  Wolf_Gold  ", "Café Royale"])
    def test_idempotent(self, name):
        slug = generate_seo_friendly_name(name)
        assert generate_seo_friendly_name(slug) == slug

    def test_only_lowercase_alphanumerics_and_hyphens(self):
        slug = generate_seo_friendly_name("Wolf_Gold: Ultimate (Deluxe) © 2024")
        assert slug == "wolfgold-ultimate-deluxe-2024"


# ═══════════════════════════════════════════════════════════════════════════
# Boolean parsing
# ═══════════════════════════════════════════════════════════════════════════

class TestParseBooleanString:
    @pytest.mark.parametrize("value", ["TRUE", " 1 ", "true", "True"])
    def test_true_values(self, value):
        assert parse_boolean_string(value) is True

    @pytest.mark.parametrize("value", ["False", "0", " false "])
    def test_false_values(self, value):
        assert parse_boolean_string(value, default=True) is False

    @pytest.mark.parametrize("value", ["", None, "maybe", "yes"])
    def test_fallback_to_default(self, value):
        assert parse_boolean_string(value) is False
        assert parse_boolean_string(value, default=True) is True


# ═══════════════════════════════════════════════════════════════════════════
# Provider and launch types
# ═══════════════════════════════════════════════════════════════════════════

class TestProvider:
    @pytest.mark.parametrize("raw", ["Pragmatic", "PRAGMATIC", "pragmatic"])
    def test_pragmatic_any_case(self, raw):
        assert normalize_provider_name(raw) == "Pragmatic Play"

    def test_unknown_provider_passes_through(self):
        assert normalize_provider_name("NetEnt") == "NetEnt"

    def test_display_name_in_record(self):
        result = _transform({"GAME_PROVIDER": "Peter & Sons"})
        assert result.record.game_provider == "Peter and Sons"


class TestLaunchTypes:
    def test_default_launch_type(self):
        assert resolve_launch_types("NetEnt", "ABC", "alias") == ("POP", "POP", "alias")

    def test_playtech_generic(self):
        assert resolve_launch_types("Playtech", "ABC", None) == ("GPAS", "GPAS", None)

    def test_playtech_live_forces_alias(self):
        result = _transform({
            "GAME_CODE": "LIVE42",
            "GAME_PROVIDER": "Playtech Live",
            "LIVE_LAUNCH_ALIAS": "something-else",
        })
        record = result.record
        assert record.desktop_game_type == "LIVE"
        assert record.mobile_game_type == "LIVE"
        assert record.live_launch_alias == "LIVE42"

    def test_alias_passthrough_for_other_providers(self):
        result = _transform({"LIVE_LAUNCH_ALIAS": "my-alias"})
        assert result.record.live_launch_alias == "my-alias"


# ═══════════════════════════════════════════════════════════════════════════
# Default image
# ═══════════════════════════════════════════════════════════════════════════

class TestDefaultImage:
    def test_absolute_url_unchanged(self):
        url = "https://cdn.example.com/x.webp"
        assert resolve_default_image(url, "NetEnt", "ABC123", {}) == url

    def test_http_url_unchanged(self):
        url = "http://cdn.example.com/x.webp"
        assert resolve_default_image(url, "NetEnt", "ABC123", {}) == url

    def test_library_path_gets_leading_slash(self):
        assert resolve_default_image("library/foo.webp", "NetEnt", "A", {}) == "/library/foo.webp"

    def test_library_root_case_insensitive(self):
        assert resolve_default_image("/Library/foo.webp", "NetEnt", "A", {}) == "/Library/foo.webp"

    def test_bare_file_prefixed_with_root(self):
        assert resolve_default_image("foo.webp", "NetEnt", "A", {}) == "/library/foo.webp"

    def test_leading_slash_not_doubled(self):
        assert resolve_default_image("/foo.webp", "NetEnt", "A", {}) == "/library/foo.webp"
        assert resolve_default_image("//foo.webp", "NetEnt", "A", {}) == "/library/foo.webp"

    def test_inner_slash_runs_collapsed(self):
        assert resolve_default_image("library//foo.webp", "NetEnt", "A", {}) == "/library/foo.webp"
        assert resolve_default_image("foo//bar.webp", "NetEnt", "A", {}) == "/library/foo/bar.webp"
        assert resolve_default_image("/library///a//b.webp", "NetEnt", "A", {}) == "/library/a/b.webp"

    def test_url_slashes_untouched(self):
        url = "https://cdn.example.com//x.webp"
        assert resolve_default_image(url, "NetEnt", "A", {}) == url

    def test_derived_path_has_no_slash_runs(self):
        path = resolve_default_image(None, "NetEnt", "a//b", {})
        assert "//" not in path

    def test_derived_from_raw_provider(self):
        path = resolve_default_image(None, "NetEnt", "ABC123", {})
        assert path == "/library/Game%20Icons/NetEnt/ABC123.webp"

    def test_derived_from_folder_map(self):
        path = resolve_default_image(None, "Pragmatic", "vs20olympgate", PROVIDER_FOLDER_MAP_CA)
        assert path == "/library/Game%20Icons/Pragmatic%20Play/vs20olympgate.webp"

    def test_folder_name_percent_encoded(self):
        path = resolve_default_image(None, "Peter & Sons", "PS1", {})
        assert path == "/library/Game%20Icons/Peter%20%26%20Sons/PS1.webp"

    def test_folder_lookup_uses_original_case(self):
        path = resolve_default_image(None, "pragmatic", "X", PROVIDER_FOLDER_MAP_CA)
        assert path == "/library/Game%20Icons/pragmatic/X.webp"


# ═══════════════════════════════════════════════════════════════════════════
# Full row transformation
# ═══════════════════════════════════════════════════════════════════════════

class TestTransformRow:
    def test_minimal_row(self):
        result = _transform()
        assert result.ok
        record = result.record
        assert record.game_code == "ABC123"
        assert record.name == "Book of Ra™"
        assert record.mobile_game_code == "ABC123"
        assert record.seo_friendly_game_name == "book-of-ra"
        assert record.default_game_image == "/library/Game%20Icons/NetEnt/ABC123.webp"
        assert record.desktop_game_type == "POP"
        assert record.demo_mode_support == "unavailable"
        assert record.game_mode == "default"

    def test_flag_defaults(self):
        record = _transform().record
        assert record.is_active is True
        assert record.is_excluded_from_sitemap is False
        assert record.is_excluded_from_pgg is False
        assert record.is_game_new is True
        assert record.is_game_popular is False
        assert record.is_game_hot is False
        assert record.is_game_exclusive is False

    def test_flags_parsed(self):
        record = _transform({
            "IS_GAME_NEW": "0",
            "IS_GAME_HOT": "TRUE",
            "IS_EXCLUDED_FROM_PGG": " 1 ",
            "IS_GAME_POPULAR": "maybe",
        }).record
        assert record.is_game_new is False
        assert record.is_game_hot is True
        assert record.is_excluded_from_pgg is True
        assert record.is_game_popular is False

    def test_explicit_slug_used_verbatim(self):
        record = _transform({"SEO_FRIENDLY_GAME_NAME": "Custom_Slug"}).record
        assert record.seo_friendly_game_name == "Custom_Slug"

    def test_explicit_mobile_code(self):
        record = _transform({"MOBILE_GAME_CODE": " MOB1 "}).record
        assert record.mobile_game_code == "MOB1"

    def test_cells_trimmed(self):
        record = _transform({"GAME_CODE": "  ABC123 ", "NAME": " Fire & Ice "}).record
        assert record.game_code == "ABC123"
        assert record.name == "Fire & Ice"
        assert record.seo_friendly_game_name == "fire-and-ice"

    def test_passthrough_fields(self):
        record = _transform({
            "DESCRIPTION": "A classic slot",
            "JACKPOT_CODE": "JP1",
            "RTP_GAME_TYPE": "rtp96",
            "GAMELABELS_DROPS_AND_WINS": "yes",
            "GAMESCUSTOMFIELDS_EXTERNALPROVIDERGAMEID": "ext-9",
            "PORTRAIT_LAYOUT_1X2_MOBILE_IMAGE": "/img/p.webp",
        }).record
        assert record.description == "A classic slot"
        assert record.jackpot_code == "JP1"
        assert record.vf_game_type == "rtp96"
        assert record.label_drops_and_wins == "yes"
        assert record.custom_field_external_provider_game_id == "ext-9"
        assert record.layout_images["portrait_layout1x2_mobileImage"] == "/img/p.webp"
        assert record.layout_images["square_layout2x2_mainImage"] is None

    def test_empty_passthrough_is_none(self):
        record = _transform({"DESCRIPTION": "   "}).record
        assert record.description is None

    def test_short_row_missing_trailing_cells(self):
        cells = ["ABC", "Game", "NetEnt"]
        indices = {"GAME_CODE": 0, "NAME": 1, "GAME_PROVIDER": 2, "DESCRIPTION": 7}
        result = transform_row(cells, indices, {}, line_number=2)
        assert result.record.description is None

    def test_all_layout_image_fields_present(self):
        record = _transform().record
        assert len(record.layout_images) == 48


class TestSkippedRows:
    @pytest.mark.parametrize("missing", ["GAME_CODE", "NAME", "GAME_PROVIDER"])
    def test_missing_core_value_skips(self, missing):
        result = _transform({missing: "  "})
        assert not result.ok
        assert result.record is None
        assert result.skipped.line_number == 2

    def test_skip_logged_with_line_number(self, caplog):
        cells, indices = _make_row({"GAME_CODE": ""})
        with caplog.at_level(logging.WARNING, logger="processing.row_transformer"):
            transform_row(cells, indices, {}, line_number=7)
        assert "Skipping line 7" in caplog.text

    def test_header_not_resolved_skips(self):
        indices = {"GAME_CODE": 0, "NAME": 1}
        result = transform_row(["ABC", "Game", "NetEnt"], indices, {}, line_number=3)
        assert not result.ok
        assert result.skipped.line_number == 3


def test_catalog_has_header_for_every_transformed_key():
    cells, indices = _make_row({})
    for key in indices:
        assert key in INPUT_HEADER_MAPPINGS

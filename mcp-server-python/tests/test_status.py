"""
Unit tests for the job status vocabulary.

Tests the key/code/label mapping and the lenient vs strict lookups.
"""

import logging

import pytest

from models.status import (
    FALLBACK_STATUS,
    STATUS_BY_KEY,
    VALID_STATUS_KEYS,
    JobStatus,
    lookup_status,
    status_code_for,
    status_label,
)


class TestStatusMapping:
    """Tests for the fixed key <-> code <-> label table."""

    @pytest.mark.parametrize(
        "key,code,label",
        [
            ("expired", 0, "Expired"),
            ("saved", 1, "Saved"),
            ("applied", 2, "Applied"),
            ("initial_interview", 3, "Initial Interview"),
            ("final_interview", 4, "Final Interview"),
            ("offered", 5, "Offered"),
            ("rejected", 6, "Rejected"),
        ],
    )
    def test_key_code_label(self, key, code, label):
        assert status_code_for(key) == code
        assert status_label(code) == label
        assert JobStatus(code).key == key

    def test_mapping_is_bijective(self):
        """Every key maps to a distinct code and back to the same key."""
        codes = {status_code_for(key) for key in VALID_STATUS_KEYS}
        assert codes == set(range(7))
        for key in VALID_STATUS_KEYS:
            assert JobStatus(status_code_for(key)).key == key

    def test_valid_keys_cover_enum(self):
        assert set(VALID_STATUS_KEYS) == set(STATUS_BY_KEY)


class TestLookups:
    """Tests for unknown keys and codes."""

    def test_strict_lookup_rejects_unknown_key(self):
        assert lookup_status("withdrawn") is None
        assert lookup_status(None) is None

    def test_lenient_lookup_falls_back_to_saved(self, caplog):
        with caplog.at_level(logging.WARNING, logger="models.status"):
            assert status_code_for("withdrawn") == int(FALLBACK_STATUS) == 1
        assert "withdrawn" in caplog.text

    def test_missing_key_defaults_to_saved_without_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="models.status"):
            assert status_code_for(None) == 1
        assert caplog.text == ""

    def test_label_accepts_numeric_string(self):
        assert status_label("3") == "Initial Interview"

    @pytest.mark.parametrize("code,expected", [(99, "99"), (-1, "-1"), ("weird", "weird"), (None, "None")])
    def test_unknown_code_renders_raw(self, code, expected):
        assert status_label(code) == expected

"""
Unit tests for the history store.

All operations are copy-on-write: inputs are never mutated.
"""

import json
import logging

import pytest

from food_roulette.domain.history.entities import DailyHistory, MealSlot
from food_roulette.domain.history.exceptions import InvalidHistoryDataError
from food_roulette.domain.history.store import (
    delete_entry,
    deserialize,
    import_merge,
    parse_day,
    parse_history,
    record_result,
    serialize,
    sorted_dates,
)


@pytest.fixture
def history() -> dict:
    """Two recorded days."""
    return {
        "2024-01-01": DailyHistory(date="2024-01-01", lunch="壽司", dinner="雞排"),
        "2024-01-02": DailyHistory(date="2024-01-02", breakfast="蛋餅"),
    }


class TestRecordResult:
    """Test suite for record_result."""

    def test_creates_missing_day(self) -> None:
        """Test recording into a new day."""
        result = record_result({}, "2024-01-01", MealSlot.DINNER, "牛肉麵")

        assert result == {"2024-01-01": DailyHistory(date="2024-01-01", dinner="牛肉麵")}

    def test_sets_only_the_selected_slot(self, history: dict) -> None:
        """Test other slots of the day are kept."""
        result = record_result(history, "2024-01-01", MealSlot.DINNER, "牛肉麵")

        assert result["2024-01-01"].lunch == "壽司"
        assert result["2024-01-01"].dinner == "牛肉麵"
        assert result["2024-01-02"] == history["2024-01-02"]

    def test_input_is_not_mutated(self, history: dict) -> None:
        """Test the original map is left untouched."""
        snapshot = dict(history)

        record_result(history, "2024-01-03", MealSlot.LUNCH, "水餃")

        assert history == snapshot


class TestDeleteEntry:
    """Test suite for delete_entry."""

    def test_removes_day(self, history: dict) -> None:
        """Test the day is gone from the returned map."""
        result = delete_entry(history, "2024-01-01")

        assert list(result) == ["2024-01-02"]
        assert "2024-01-01" in history

    def test_missing_day_is_noop(self, history: dict) -> None:
        """Test deleting an unknown day yields an equal copy."""
        result = delete_entry(history, "1999-12-31")

        assert result == history
        assert result is not history


class TestImportMerge:
    """Test suite for import_merge."""

    def test_incoming_day_replaces_whole_day(self, history: dict) -> None:
        """Test there is no per-meal merge."""
        incoming = {"2024-01-01": DailyHistory(date="2024-01-01", lunch="拉麵")}

        result = import_merge(history, incoming)

        assert result["2024-01-01"] == DailyHistory(date="2024-01-01", lunch="拉麵")
        assert result["2024-01-01"].dinner is None

    def test_days_not_imported_are_kept(self, history: dict) -> None:
        """Test local days absent from the import survive."""
        incoming = {"2024-02-01": DailyHistory(date="2024-02-01", dinner="火鍋")}

        result = import_merge(history, incoming)

        assert set(result) == {"2024-01-01", "2024-01-02", "2024-02-01"}

    def test_empty_import_is_identity(self, history: dict) -> None:
        """Test merging nothing changes nothing."""
        assert import_merge(history, {}) == history

    def test_import_into_empty(self, history: dict) -> None:
        """Test merging into an empty history copies the import."""
        assert import_merge({}, history) == history


class TestSortedDates:
    """Test suite for sorted_dates."""

    def test_most_recent_first(self, history: dict) -> None:
        """Test descending date order."""
        history["2023-12-31"] = DailyHistory(date="2023-12-31")

        assert sorted_dates(history) == ["2024-01-02", "2024-01-01", "2023-12-31"]


class TestSerialization:
    """Test suite for serialize and parse_history."""

    def test_serialize_keeps_unicode(self, history: dict) -> None:
        """Test dish names are written as readable text."""
        raw = serialize(history)

        assert "壽司" in raw
        assert json.loads(raw)["2024-01-02"] == {"date": "2024-01-02", "breakfast": "蛋餅"}

    def test_serialize_pretty(self, history: dict) -> None:
        """Test indent produces a multi-line document."""
        assert "\n  " in serialize(history, indent=2)

    def test_round_trip(self, history: dict) -> None:
        """Test parse_history reads what serialize wrote."""
        assert parse_history(serialize(history)) == history

    def test_missing_date_field_uses_key(self) -> None:
        """Test a record without ``date`` takes its map key."""
        result = parse_history('{"2024-01-01": {"dinner": "牛肉麵"}}')

        assert result["2024-01-01"].date == "2024-01-01"

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "[]",
            '"2024-01-01"',
            '{"2024-13-45": {"dinner": "x"}}',
            '{"yesterday": {"dinner": "x"}}',
            '{"2024-01-01": "牛肉麵"}',
            '{"2024-01-01": {"date": "2024-01-01", "dinner": 42}}',
            '{"2024-01-05": {"date": "2023-05-05", "lunch": "x"}}',
        ],
    )
    def test_malformed_history_rejected(self, raw: str) -> None:
        """Test strict parsing rejects malformed documents."""
        with pytest.raises(InvalidHistoryDataError):
            parse_history(raw)

    def test_error_carries_user_message(self) -> None:
        """Test the user facing message for bad files."""
        with pytest.raises(InvalidHistoryDataError) as exc_info:
            parse_history("{")

        assert exc_info.value.user_message == "無效的檔案格式。"


class TestParseDay:
    """Test suite for parse_day."""

    def test_legacy_record(self) -> None:
        """Test a single stored day record."""
        day = parse_day({"date": "2024-01-01", "lunch": "壽司", "dinner": None})

        assert day == DailyHistory(date="2024-01-01", lunch="壽司")

    def test_record_without_date_rejected(self) -> None:
        """Test a record with no date and no key is invalid."""
        with pytest.raises(InvalidHistoryDataError):
            parse_day({"dinner": "牛肉麵"})


class TestDeserialize:
    """Test suite for deserialize (fail-closed parsing)."""

    def test_valid_data(self, history: dict) -> None:
        """Test valid data is parsed."""
        assert deserialize(serialize(history)) == history

    def test_malformed_returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test malformed data degrades to an empty map with a warning."""
        with caplog.at_level(logging.WARNING):
            assert deserialize("{broken") == {}

        assert "Discarding malformed history data" in caplog.text

    def test_malformed_returns_fallback(self, history: dict) -> None:
        """Test malformed data degrades to the given fallback."""
        result = deserialize("[]", fallback=history)

        assert result == history
        assert result is not history


class TestDateKeyConsistency:
    """Test suite for the date/key match of parsed days."""

    def test_mismatched_date_rejected(self) -> None:
        """Test a day filed under another date's key is invalid."""
        with pytest.raises(InvalidHistoryDataError, match="dated '2023-05-05'"):
            parse_history('{"2024-01-05": {"date": "2023-05-05", "lunch": "x"}}')

    def test_parse_day_checks_key(self) -> None:
        """Test parse_day compares the record date with its key."""
        with pytest.raises(InvalidHistoryDataError):
            parse_day({"date": "2023-05-05"}, "2024-01-05")

    def test_parsed_keys_match_dates(self) -> None:
        """Test every parsed key equals its entry's date."""
        history = parse_history(
            '{"2024-01-05": {"date": "2024-01-05", "lunch": "x"}, "2024-01-06": {"dinner": "y"}}'
        )

        assert all(key == day.date for key, day in history.items())

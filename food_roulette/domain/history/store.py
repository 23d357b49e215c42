"""History store.

Pure, copy-on-write operations over a ``HistoryMap`` (date string ->
DailyHistory). No function here mutates its input map; callers replace their
reference with the returned map and persist it.
"""

import json
import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional

from food_roulette.domain.history.entities import DailyHistory, HistoryMap, MealSlot
from food_roulette.domain.history.exceptions import InvalidHistoryDataError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def record_result(
    history: Mapping[str, DailyHistory],
    date: str,
    slot: MealSlot,
    item_name: str,
) -> HistoryMap:
    """
    Record a spin result for one meal slot of one day.

    Creates the day's entry when missing and overwrites the slot.

    Args:
        history: Current history map (left untouched)
        date: Day key (YYYY-MM-DD)
        slot: Meal slot to set
        item_name: Winning item name

    Returns:
        New history map

    Example:
        >>> record_result({}, "2024-01-01", MealSlot.DINNER, "牛肉麵")
        {'2024-01-01': DailyHistory(date='2024-01-01', breakfast=None, lunch=None, dinner='牛肉麵')}
    """
    current = history.get(date) or DailyHistory(date=date)
    updated = dict(history)
    updated[date] = current.with_meal(slot, item_name)
    return updated


def delete_entry(history: Mapping[str, DailyHistory], date: str) -> HistoryMap:
    """Return a new map without ``date``. Missing dates yield an equal copy."""
    return {key: day for key, day in history.items() if key != date}


def import_merge(
    history: Mapping[str, DailyHistory],
    incoming: Mapping[str, DailyHistory],
) -> HistoryMap:
    """
    Shallow-merge ``incoming`` over ``history``.

    A day present in ``incoming`` replaces the existing day as a whole; there is
    no per-meal merge, so an imported day with only ``lunch`` drops a local
    ``dinner`` for that date. Days absent from ``incoming`` are kept.
    """
    return {**history, **incoming}


def sorted_dates(history: Mapping[str, DailyHistory]) -> List[str]:
    """Date keys, most recent first."""
    return sorted(history, reverse=True)


def serialize(history: Mapping[str, DailyHistory], indent: Optional[int] = None) -> str:
    payload = {date: day.to_dict() for date, day in history.items()}
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def _check_date(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidHistoryDataError(f"Date must be a string, got {type(value).__name__}")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise InvalidHistoryDataError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc
    return value


def parse_day(raw: Any, date_key: Optional[str] = None) -> DailyHistory:
    """
    Build a DailyHistory from its serialized form.

    Args:
        raw: Decoded JSON value for one day
        date_key: Map key the day was stored under; used when ``date`` is missing
            and must match ``date`` when both are present

    Raises:
        InvalidHistoryDataError: If the value is not a well-formed day record
    """
    if not isinstance(raw, dict):
        raise InvalidHistoryDataError(
            f"History entry must be an object, got {type(raw).__name__}"
        )

    date = _check_date(raw.get("date", date_key))
    if date_key is not None and date != date_key:
        raise InvalidHistoryDataError(
            f"Entry under {date_key!r} is dated {date!r}"
        )
    meals = {}
    for slot in MealSlot:
        value = raw.get(slot.value)
        if value is not None and not isinstance(value, str):
            raise InvalidHistoryDataError(
                f"{date}: {slot.value} must be a string, got {type(value).__name__}"
            )
        meals[slot.value] = value
    return DailyHistory(date=date, **meals)


def parse_history(raw: str) -> HistoryMap:
    """
    Strictly parse serialized history.

    Raises:
        InvalidHistoryDataError: On invalid JSON or an unexpected shape
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidHistoryDataError(f"History is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidHistoryDataError(
            f"History must be an object keyed by date, got {type(data).__name__}"
        )

    return {_check_date(key): parse_day(value, key) for key, value in data.items()}


def deserialize(raw: str, fallback: Optional[Mapping[str, DailyHistory]] = None) -> HistoryMap:
    """
    Parse serialized history, failing closed.

    Malformed input is logged and ``fallback`` (empty by default) is returned
    instead of raising.
    """
    try:
        return parse_history(raw)
    except InvalidHistoryDataError as exc:
        logger.warning(
            "Discarding malformed history data",
            extra={"error": str(exc)},
        )
        return dict(fallback) if fallback is not None else {}

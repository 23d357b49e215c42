"""History export document."""

from dataclasses import dataclass
from typing import Mapping

from food_roulette.domain.history.entities import DailyHistory
from food_roulette.domain.history.store import serialize
from food_roulette.infrastructure.export.history_file import export_filename

EXPORT_INDENT = 2


@dataclass(frozen=True)
class HistoryExport:
    """
    Downloadable history file.

    Attributes:
        filename: ``foodie-history-YYYY-MM-DD.json`` for the export day
        content: Full history map as pretty-printed JSON
        days: Number of days in the export
    """

    filename: str
    content: str
    days: int


def build_export(history: Mapping[str, DailyHistory], today: str) -> HistoryExport:
    return HistoryExport(
        filename=export_filename(today),
        content=serialize(history, indent=EXPORT_INDENT),
        days=len(history),
    )

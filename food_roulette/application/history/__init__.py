from food_roulette.application.history.export import HistoryExport, build_export

__all__ = ["HistoryExport", "build_export"]

"""Stub suggestion provider for development and tests.

Returns themed dish lists without calling external APIs.
"""

from typing import Dict, List, Tuple

_THEMED: Dict[str, Tuple[str, ...]] = {
    "日式": ("拉麵", "壽司", "丼飯", "烏龍麵", "天婦羅", "咖哩飯"),
    "韓式": ("石鍋拌飯", "部隊鍋", "炸雞", "辣炒年糕", "冷麵", "豆腐鍋"),
    "早餐": ("蛋餅", "飯糰", "蘿蔔糕", "燒餅油條", "三明治", "鐵板麵"),
}

_DEFAULT: Tuple[str, ...] = ("滷肉飯", "蚵仔煎", "鹽酥雞", "肉圓", "擔仔麵", "臭豆腐")


class StubSuggestionProvider:
    """
    Stub implementation of ISuggestionProvider.

    Picks a hardcoded list by keyword in the theme; anything else gets a list
    of Taiwanese street food. Supports async context manager protocol for
    lifespan compatibility.
    """

    async def __aenter__(self) -> "StubSuggestionProvider":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        return None

    async def suggest_foods(self, theme: str) -> List[str]:
        for keyword, dishes in _THEMED.items():
            if keyword in theme:
                return list(dishes)
        return list(_DEFAULT)

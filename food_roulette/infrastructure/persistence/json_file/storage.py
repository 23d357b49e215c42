"""JSON file key/value storage.

Keeps all keys in one JSON object on disk, the local stand-in for browser
local storage. Each write rewrites the whole file through a temporary file and
``os.replace`` so a crash never leaves a half-written document behind.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """
    File-backed implementation of IKeyValueStorage port.

    Values are read from disk on every access so external edits are picked up;
    the file is small (one history document plus a legacy record at most).

    Thread safety: NOT thread-safe (single local session writes)

    Example:
        >>> storage = JsonFileStorage("~/.food_roulette/storage.json")
        >>> storage.set_item("foodie_history_v2", "{}")
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Initialize storage.

        Args:
            path: Location of the JSON document (``~`` is expanded)
        """
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error(
                "Unreadable storage file, treating as empty",
                extra={"path": str(self._path), "error": str(exc)},
            )
            return {}
        if not isinstance(data, dict):
            logger.error(
                "Storage file is not a JSON object, treating as empty",
                extra={"path": str(self._path)},
            )
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)
        logger.debug(
            "Storage item written",
            extra={"key": key, "size": len(value), "path": str(self._path)},
        )

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

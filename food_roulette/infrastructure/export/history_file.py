"""Writing and reading history export files."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "foodie-history-"


def export_filename(date: str) -> str:
    """Name of the export file for ``date`` (YYYY-MM-DD)."""
    return f"{EXPORT_PREFIX}{date}.json"


def write_export_file(directory: Union[str, Path], filename: str, content: str) -> Path:
    """
    Write an export document into ``directory``.

    Args:
        directory: Target directory (created when missing)
        filename: File name, see export_filename()
        content: Pretty-printed JSON document

    Returns:
        Path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    target_dir = Path(directory).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / filename
    target.write_text(content, encoding="utf-8")
    logger.info("History exported", extra={"path": str(target), "size": len(content)})
    return target


def read_import_file(path: Union[str, Path]) -> str:
    """
    Read a user supplied import file as text.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 text
    """
    return Path(path).expanduser().read_text(encoding="utf-8")

"""JSON array persistence for exported records."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

logger = logging.getLogger(__name__)


def write_json_array(items: Iterable[dict[str, Any]], path: Path) -> None:
    """Write items as one JSON array, replacing any existing file.

    Missing parent directories are created.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    items = list(items)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(items, f)
    logger.debug("Wrote %d items to %s", len(items), path)


def read_json_array(path: Path) -> list[Any]:
    """Read a JSON array from disk.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not valid JSON or not an array.
    """
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {path}, got {type(data).__name__}")
    return data

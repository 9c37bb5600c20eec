"""Launch date lookup against the harvested launch listing file."""

from __future__ import annotations

import logging
from pathlib import Path

from satexport.data.storage import read_json_array
from satexport.utils.constants import NO_DATA

logger = logging.getLogger(__name__)


def lookup_launch_date(path: Path, norad_id: str) -> str:
    """Return the launch date listed for ``norad_id``.

    The file is re-read on every call. The first entry whose id matches
    exactly wins.

    Args:
        path: Launch listing JSON file.
        norad_id: NORAD catalog number as text.

    Returns:
        The launch date, or ``"no data"`` if the file is missing or
        unreadable or has no matching entry.
    """
    if not path.exists():
        return NO_DATA
    try:
        entries = read_json_array(path)
    except (OSError, ValueError) as e:
        logger.warning("Could not read launch dates from %s: %s", path, e)
        return NO_DATA

    for entry in entries:
        if not isinstance(entry, dict) or "norad_id" not in entry:
            continue
        if str(entry["norad_id"]) == norad_id:
            return str(entry.get("launch_date", NO_DATA))
    return NO_DATA

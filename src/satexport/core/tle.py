"""TLE text handling: block splitting and fixed-column field extraction."""

from __future__ import annotations

import logging

from satexport.utils.constants import NO_DATA

logger = logging.getLogger(__name__)

# Catalog number columns of TLE line 1 (0-indexed, end exclusive).
_NORAD_SLICE = slice(2, 7)


def split_tle_blocks(text: str) -> list[tuple[str, str, str]]:
    """Split catalog text into ``(name, line1, line2)`` blocks.

    Blank lines are dropped before grouping, so they never shift the
    block boundaries. Either ``\\n`` or ``\\r\\n`` line endings are
    accepted. A trailing block with fewer than three lines is discarded.

    Args:
        text: Raw 3-line TLE text as served by CelesTrak.

    Returns:
        Trimmed ``(name, line1, line2)`` tuples in input order.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    blocks: list[tuple[str, str, str]] = []

    for i in range(0, len(lines), 3):
        if i + 2 >= len(lines):
            logger.debug("Discarding incomplete trailing block at line %d", i)
            break
        blocks.append((lines[i], lines[i + 1], lines[i + 2]))

    logger.debug("Split %d TLE blocks from text", len(blocks))
    return blocks


def extract_norad_id(line1: str) -> str:
    """Return the catalog number field of TLE line 1.

    Lines shorter than seven characters yield ``"no data"``.
    """
    if len(line1) < _NORAD_SLICE.stop:
        return NO_DATA
    return line1[_NORAD_SLICE].strip()

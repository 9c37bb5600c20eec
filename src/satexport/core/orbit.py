"""Orbit regime classification from TLE mean motion."""

from __future__ import annotations

import logging
import re
from enum import Enum

from satexport.utils.constants import GEO_MAX_MEAN_MOTION, LEO_MIN_MEAN_MOTION, NO_DATA

logger = logging.getLogger(__name__)

# Mean motion is the 8th whitespace-delimited field of line 2.
_MEAN_MOTION_TOKEN = 7
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class OrbitClass(str, Enum):
    """Coarse orbit regime derived from mean motion alone."""

    GEO = "GEO"
    MEO = "MEO"
    LEO = "LEO"
    NO_DATA = NO_DATA


def parse_mean_motion(line2: str) -> float | None:
    """Read mean motion (rev/day) from TLE line 2.

    Only plain decimal tokens (optional sign and exponent) are accepted;
    ``inf``, ``nan`` and underscore-grouped digits are rejected.

    Returns:
        The mean motion, or None if line 2 has fewer than eight tokens
        or the token is not a number.
    """
    tokens = line2.split()
    if len(tokens) <= _MEAN_MOTION_TOKEN:
        return None
    token = tokens[_MEAN_MOTION_TOKEN]
    if _DECIMAL.fullmatch(token) is None:
        logger.debug("Unparseable mean motion %r", token)
        return None
    return float(token)


def classify_orbit(line2: str) -> OrbitClass:
    """Classify a satellite as GEO, MEO or LEO from TLE line 2.

    Mean motion below 2.5 rev/day is GEO, above 11.0 is LEO, anything in
    between (bounds included) is MEO. Short or malformed lines classify
    as ``OrbitClass.NO_DATA``.

    Args:
        line2: TLE line 2.

    Returns:
        The orbit class.
    """
    mean_motion = parse_mean_motion(line2)
    if mean_motion is None:
        return OrbitClass.NO_DATA
    if mean_motion < GEO_MAX_MEAN_MOTION:
        return OrbitClass.GEO
    if mean_motion > LEO_MIN_MEAN_MOTION:
        return OrbitClass.LEO
    return OrbitClass.MEO

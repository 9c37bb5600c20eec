from __future__ import annotations

"""Fixed sources, output locations and orbit-regime thresholds.

Mean-motion values are in revolutions per day.
"""

NO_DATA: str = "no data"
"""Placeholder written for any field that cannot be determined."""

# --- Orbit regime thresholds ---
GEO_MAX_MEAN_MOTION: float = 2.5
"""Mean motion strictly below this is classified GEO."""

LEO_MIN_MEAN_MOTION: float = 11.0
"""Mean motion strictly above this is classified LEO."""

# --- TLE sources ---
CELESTRAK_GP_URL: str = "https://celestrak.org/NORAD/elements/gp.php"

CELESTRAK_GROUPS: tuple[str, ...] = (
    "intelsat",
    "ses",
    "eutelsat",
    "iridium",
    "iridium-NEXT",
    "orbcomm",
    "swarm",
    "globalstar",
    "amateur",
    "satnogs",
    "oneweb",
    "starlink",
    "galileo",
    "beidou",
    "stations",
)

DEFAULT_SOURCE_URLS: tuple[str, ...] = tuple(
    f"{CELESTRAK_GP_URL}?GROUP={group}&FORMAT=tle" for group in CELESTRAK_GROUPS
)

# --- Launch date source ---
N2YO_BROWSE_URL: str = "https://www.n2yo.com/browse/"

HARVEST_START_YEAR: int = 1990
"""First year scanned for launch listings."""

# --- HTTP ---
DEFAULT_USER_AGENT: str = "Mozilla/5.0"
DEFAULT_TIMEOUT_S: float = 30.0

# --- Output files, relative to the base directory ---
LAUNCH_DATES_RELPATH: str = "json/tle/satellite_launch_dates.json"
TLE_RELPATH: str = "json/tle/TLE.json"

"""Output record types and the TLE block to record transformation."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable

from satexport.core.orbit import OrbitClass, classify_orbit
from satexport.core.tle import extract_norad_id
from satexport.utils.constants import NO_DATA

logger = logging.getLogger(__name__)

LaunchDateLookup = Callable[[str], str]
"""Maps a NORAD id to a launch date, or ``"no data"``."""


@dataclass(frozen=True)
class LaunchRecord:
    """One row of a monthly launch listing.

    Attributes:
        name: Satellite name as listed.
        norad_id: NORAD catalog number, kept as text.
        launch_date: Launch date as listed (``YYYY-MM-DD``).
    """

    name: str
    norad_id: str
    launch_date: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class SatelliteRecord:
    """A normalized catalog entry.

    Every field is populated; undeterminable values hold ``"no data"``.

    Attributes:
        company: Upper-cased catalog group the entry was fetched from.
        satellite_name: Name line of the TLE block.
        norad_id: NORAD catalog number from line 1.
        launch_date: Launch date joined from the launch listing.
        type: Orbit regime.
        tle_line1: Raw TLE line 1.
        tle_line2: Raw TLE line 2.
    """

    company: str
    satellite_name: str
    norad_id: str
    launch_date: str
    type: OrbitClass
    tle_line1: str
    tle_line2: str

    def to_dict(self) -> dict[str, str]:
        data = asdict(self)
        data["type"] = self.type.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SatelliteRecord:
        return cls(
            company=data["company"],
            satellite_name=data["satellite_name"],
            norad_id=data["norad_id"],
            launch_date=data["launch_date"],
            type=OrbitClass(data["type"]),
            tle_line1=data["tle_line1"],
            tle_line2=data["tle_line2"],
        )


def _or_no_data(value: str) -> str:
    value = value.strip()
    return value if value else NO_DATA


def transform_block(
    company: str,
    name_line: str,
    line1: str,
    line2: str,
    lookup: LaunchDateLookup,
) -> SatelliteRecord:
    """Build a SatelliteRecord from one 3-line TLE block.

    Args:
        company: Catalog group label for the block's source.
        name_line: TLE line 0 (satellite name).
        line1: TLE line 1.
        line2: TLE line 2.
        lookup: Launch date resolver, called once with the NORAD id.

    Returns:
        The normalized record.
    """
    line1 = line1.strip()
    line2 = line2.strip()
    norad_id = extract_norad_id(line1)

    record = SatelliteRecord(
        company=company,
        satellite_name=_or_no_data(name_line),
        norad_id=norad_id,
        launch_date=lookup(norad_id),
        type=classify_orbit(line2),
        tle_line1=_or_no_data(line1),
        tle_line2=_or_no_data(line2),
    )
    logger.debug("Transformed %s (NORAD %s) as %s", record.satellite_name, norad_id, record.type.value)
    return record

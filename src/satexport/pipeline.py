"""End-to-end export: harvest launch dates, then build the TLE catalog.

Every failure degrades to a skipped unit of work or a ``"no data"``
field; nothing here raises out of :func:`run`.
"""

from __future__ import annotations

import logging
from functools import partial

from satexport.config import ExportConfig
from satexport.core.records import SatelliteRecord
from satexport.data.celestrak import CelesTrakClient, transform_sources
from satexport.data.launch_dates import lookup_launch_date
from satexport.data.n2yo import N2YOClient, harvest_launch_dates
from satexport.data.storage import write_json_array

logger = logging.getLogger(__name__)


def ensure_launch_dates(config: ExportConfig, client: N2YOClient | None = None) -> bool:
    """Harvest launch dates unless the listing file already exists.

    An existing file is never refreshed, so launches added after it was
    written are not picked up until it is deleted. A client created here
    is closed before returning; a caller-supplied one is left open.

    Returns:
        True if a harvest ran, False if it was skipped.
    """
    path = config.launch_dates_path
    if path.exists():
        logger.info("Launch dates file %s exists. Skipping extraction.", path)
        return False

    owned = client is None
    if client is None:
        client = N2YOClient(timeout=config.timeout, user_agent=config.user_agent)

    logger.info("Extracting launch dates from n2yo...")
    try:
        records = harvest_launch_dates(client, start_year=config.start_year, end_year=config.end_year)
    finally:
        if owned:
            client.close()

    try:
        write_json_array((r.to_dict() for r in records), path)
    except OSError:
        logger.exception("Error writing launch dates file %s", path)
    else:
        logger.info("Extracted launch dates saved to %s", path)
    return True


def export_tle_catalog(
    config: ExportConfig, client: CelesTrakClient | None = None
) -> list[SatelliteRecord]:
    """Fetch every configured catalog and write the combined records.

    A client created here is closed before returning.

    Returns:
        The exported records, even if writing them failed.
    """
    owned = client is None
    if client is None:
        client = CelesTrakClient(timeout=config.timeout, user_agent=config.user_agent)

    lookup = partial(lookup_launch_date, config.launch_dates_path)
    try:
        records = transform_sources(config.source_urls, client, lookup)
    finally:
        if owned:
            client.close()

    path = config.tle_path
    try:
        write_json_array((r.to_dict() for r in records), path)
    except OSError:
        logger.exception("Error writing JSON to file %s", path)
    else:
        logger.info("Exported %d satellites to %s", len(records), path)
    return records


def run(
    config: ExportConfig | None = None,
    *,
    n2yo_client: N2YOClient | None = None,
    celestrak_client: CelesTrakClient | None = None,
) -> list[SatelliteRecord]:
    """Run the launch date harvest (if needed) followed by the TLE export."""
    if config is None:
        config = ExportConfig()
    ensure_launch_dates(config, n2yo_client)
    return export_tle_catalog(config, celestrak_client)

"""CelesTrak catalog fetching and conversion to SatelliteRecords."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

import requests

from satexport.core.records import LaunchDateLookup, SatelliteRecord, transform_block
from satexport.core.tle import split_tle_blocks
from satexport.data.http import FetchError, fetch_text
from satexport.utils.constants import DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT, NO_DATA

logger = logging.getLogger(__name__)

_GROUP_PARAM = re.compile(r"GROUP=", re.IGNORECASE)


def extract_group(url: str) -> str:
    """Return the upper-cased ``GROUP`` query value of a catalog URL.

    The parameter name matches in any case. The value runs up to the
    next ``&`` or the end of the URL. URLs without the parameter yield
    ``"NO DATA"``.
    """
    match = _GROUP_PARAM.search(url)
    if match is None:
        return NO_DATA.upper()
    start = match.end()
    end = url.find("&", start)
    if end == -1:
        end = len(url)
    return url[start:end].upper()


@dataclass
class CelesTrakClient:
    """Fetches plain-text TLE catalogs.

    Attributes:
        timeout: Per-request timeout in seconds, or None for no limit.
        user_agent: User-Agent header sent with every request.
    """

    timeout: float | None = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    def __post_init__(self) -> None:
        self._session.headers["User-Agent"] = self.user_agent

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self._session.close()

    def fetch_tle_text(self, url: str) -> str:
        """Fetch the raw 3-line TLE text served at ``url``.

        Raises:
            FetchError: On a non-200 response (status and body attached)
                or a transport failure.
        """
        return fetch_text(self._session, url, timeout=self.timeout)


def transform_source(company: str, text: str, lookup: LaunchDateLookup) -> list[SatelliteRecord]:
    """Convert one catalog's TLE text into records, preserving block order."""
    return [
        transform_block(company, name, line1, line2, lookup)
        for name, line1, line2 in split_tle_blocks(text)
    ]


def transform_sources(
    urls: Iterable[str],
    client: CelesTrakClient,
    lookup: LaunchDateLookup,
) -> list[SatelliteRecord]:
    """Fetch and convert every catalog into one flat record list.

    A catalog that cannot be fetched is logged and skipped; the others
    are still processed.

    Args:
        urls: Catalog URLs, processed in order.
        client: Catalog client.
        lookup: Launch date resolver passed to each block.

    Returns:
        Records in source order, then block order within each source.
    """
    records: list[SatelliteRecord] = []
    for url in urls:
        company = extract_group(url)
        try:
            text = client.fetch_tle_text(url)
        except FetchError as e:
            logger.error("Error processing URL %s: %s", url, e)
            continue
        source_records = transform_source(company, text, lookup)
        logger.info("Processed %d satellites from %s", len(source_records), company)
        records.extend(source_records)
    return records

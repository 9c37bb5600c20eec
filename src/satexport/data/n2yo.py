"""Launch date harvesting from the n2yo.com monthly launch listings.

Each month page holds a table whose rows look like::

    <tr BGCOLOR=#C6FFE2><td><a href="/satellite/?s=58712">STARLINK-31029</a></td>
    <td align="center">58712</td><td align="center">2024-01-03</td>
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator

import requests

from satexport.core.records import LaunchRecord
from satexport.data.http import FetchError, fetch_text
from satexport.utils.constants import (
    DEFAULT_TIMEOUT_S,
    DEFAULT_USER_AGENT,
    HARVEST_START_YEAR,
    N2YO_BROWSE_URL,
)

logger = logging.getLogger(__name__)

LAUNCH_ROW_PATTERN = re.compile(
    r'<tr\s+BGCOLOR=[^>]+><td><a\s+href="[^"]+">([^<]+)</a></td>'
    r"\s*<td[^>]*>([^<]+)</td>"
    r"\s*<td[^>]*>([^<]+)</td>"
)


def parse_launch_page(html: str) -> list[LaunchRecord]:
    """Extract (name, NORAD id, launch date) rows from a listing page.

    Rows that do not match the listing's table shape are ignored.
    """
    return [
        LaunchRecord(
            name=match.group(1).strip(),
            norad_id=match.group(2).strip(),
            launch_date=match.group(3).strip(),
        )
        for match in LAUNCH_ROW_PATTERN.finditer(html)
    ]


def month_windows(start_year: int, end_year: int) -> Iterator[tuple[int, str]]:
    """Yield ``(year, "MM")`` for every month from January of
    ``start_year`` to December of ``end_year`` inclusive."""
    for year in range(start_year, end_year + 1):
        for month in range(1, 13):
            yield year, f"{month:02d}"


@dataclass
class N2YOClient:
    """Fetches monthly launch listing pages.

    Attributes:
        timeout: Per-request timeout in seconds, or None for no limit.
        user_agent: User-Agent header sent with every request.
    """

    timeout: float | None = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    BASE_URL = N2YO_BROWSE_URL

    def __post_init__(self) -> None:
        self._session.headers["User-Agent"] = self.user_agent

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self._session.close()

    def month_url(self, year: int, month: str) -> str:
        return f"{self.BASE_URL}?y={year}&m={month}"

    def fetch_month(self, year: int, month: str) -> str:
        """Fetch the listing page for one month.

        Raises:
            FetchError: If the page cannot be fetched.
        """
        return fetch_text(self._session, self.month_url(year, month), timeout=self.timeout)


def harvest_launch_dates(
    client: N2YOClient,
    *,
    start_year: int = HARVEST_START_YEAR,
    end_year: int | None = None,
) -> list[LaunchRecord]:
    """Collect launch records from every monthly listing.

    Months whose page cannot be fetched are logged and skipped. Records
    are returned in month order and are not deduplicated.

    Args:
        client: Listing page client.
        start_year: First year to scan.
        end_year: Last year to scan, defaulting to the current year.

    Returns:
        All harvested launch records.
    """
    if end_year is None:
        end_year = datetime.now().year

    records: list[LaunchRecord] = []
    for year, month in month_windows(start_year, end_year):
        try:
            html = client.fetch_month(year, month)
        except FetchError as e:
            logger.error("Error fetching launch dates for %d-%s: %s", year, month, e)
            continue
        page = parse_launch_page(html)
        logger.debug("Found %d launches for %d-%s", len(page), year, month)
        records.extend(page)

    logger.info("Harvested %d launch records for %d-%d", len(records), start_year, end_year)
    return records

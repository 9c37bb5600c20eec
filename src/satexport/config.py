"""Run configuration for the export pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from satexport.utils.constants import (
    DEFAULT_SOURCE_URLS,
    DEFAULT_TIMEOUT_S,
    DEFAULT_USER_AGENT,
    HARVEST_START_YEAR,
    LAUNCH_DATES_RELPATH,
    TLE_RELPATH,
)


@dataclass
class ExportConfig:
    """Locations, sources and HTTP settings for one export run.

    Attributes:
        base_dir: Directory the output paths are resolved against.
        launch_dates_relpath: Launch listing file, relative to ``base_dir``.
        tle_relpath: Catalog output file, relative to ``base_dir``.
        source_urls: CelesTrak catalog URLs, processed in order.
        start_year: First year of launch listings to harvest.
        end_year: Last year to harvest; None means the current year.
        timeout: Per-request timeout in seconds; None waits forever.
        user_agent: User-Agent header for all requests.
    """

    base_dir: Path = field(default_factory=Path.cwd)
    launch_dates_relpath: str = LAUNCH_DATES_RELPATH
    tle_relpath: str = TLE_RELPATH
    source_urls: tuple[str, ...] = DEFAULT_SOURCE_URLS
    start_year: int = HARVEST_START_YEAR
    end_year: int | None = None
    timeout: float | None = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        self.base_dir = Path(self.base_dir)

    @property
    def launch_dates_path(self) -> Path:
        return self.base_dir / self.launch_dates_relpath

    @property
    def tle_path(self) -> Path:
        return self.base_dir / self.tle_relpath

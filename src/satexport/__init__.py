"""
satexport — normalized satellite catalog export for Python.

Fetches CelesTrak TLE catalogs, classifies each object's orbit regime
from its mean motion, joins launch dates harvested from n2yo.com, and
writes the result as one JSON dataset.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from satexport.core.orbit import OrbitClass, classify_orbit
from satexport.core.records import LaunchRecord, SatelliteRecord, transform_block
from satexport.core.tle import extract_norad_id, split_tle_blocks
from satexport.config import ExportConfig
from satexport.data.celestrak import CelesTrakClient, extract_group, transform_sources
from satexport.data.http import FetchError
from satexport.data.launch_dates import lookup_launch_date
from satexport.data.n2yo import N2YOClient, harvest_launch_dates, parse_launch_page
from satexport.pipeline import run

__all__ = [
    "__version__",
    "OrbitClass",
    "classify_orbit",
    "LaunchRecord",
    "SatelliteRecord",
    "transform_block",
    "extract_norad_id",
    "split_tle_blocks",
    "ExportConfig",
    "CelesTrakClient",
    "extract_group",
    "transform_sources",
    "FetchError",
    "lookup_launch_date",
    "N2YOClient",
    "harvest_launch_dates",
    "parse_launch_page",
    "run",
]

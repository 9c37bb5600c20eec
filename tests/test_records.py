"""Tests for record types and the block transformation."""

from __future__ import annotations

import json

from satexport.core.orbit import OrbitClass
from satexport.core.records import LaunchRecord, SatelliteRecord, transform_block

ISS_NAME = "ISS (ZARYA)"
ISS_LINE1 = "1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993"
ISS_LINE2 = "2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596"


def _no_launch(norad_id: str) -> str:
    return "no data"


class TestTransformBlock:
    def test_basic_fields(self) -> None:
        rec = transform_block("STATIONS", ISS_NAME, ISS_LINE1, ISS_LINE2, _no_launch)
        assert rec.company == "STATIONS"
        assert rec.satellite_name == ISS_NAME
        assert rec.norad_id == "25544"
        assert rec.type is OrbitClass.LEO
        assert rec.tle_line1 == ISS_LINE1
        assert rec.tle_line2 == ISS_LINE2

    def test_lookup_called_with_norad_id(self) -> None:
        calls: list[str] = []

        def lookup(norad_id: str) -> str:
            calls.append(norad_id)
            return "1998-11-20"

        rec = transform_block("STATIONS", ISS_NAME, ISS_LINE1, ISS_LINE2, lookup)
        assert calls == ["25544"]
        assert rec.launch_date == "1998-11-20"

    def test_empty_fields_become_no_data(self) -> None:
        rec = transform_block("X", "  ", "", "", _no_launch)
        assert rec.satellite_name == "no data"
        assert rec.norad_id == "no data"
        assert rec.type is OrbitClass.NO_DATA
        assert rec.tle_line1 == "no data"
        assert rec.tle_line2 == "no data"

    def test_lines_trimmed(self) -> None:
        rec = transform_block("X", f" {ISS_NAME} ", f"{ISS_LINE1}  ", f"  {ISS_LINE2}", _no_launch)
        assert rec.satellite_name == ISS_NAME
        assert rec.tle_line1 == ISS_LINE1
        assert rec.tle_line2 == ISS_LINE2


class TestSerialization:
    def test_satellite_dict_keys_in_order(self) -> None:
        rec = transform_block("STATIONS", ISS_NAME, ISS_LINE1, ISS_LINE2, _no_launch)
        assert list(rec.to_dict()) == [
            "company",
            "satellite_name",
            "norad_id",
            "launch_date",
            "type",
            "tle_line1",
            "tle_line2",
        ]

    def test_type_serialized_as_string(self) -> None:
        rec = transform_block("STATIONS", ISS_NAME, ISS_LINE1, ISS_LINE2, _no_launch)
        data = rec.to_dict()
        assert data["type"] == "LEO"
        assert type(data["type"]) is str

    def test_satellite_json_roundtrip(self) -> None:
        rec = transform_block("STATIONS", ISS_NAME, ISS_LINE1, ISS_LINE2, lambda _: "1998-11-20")
        restored = SatelliteRecord.from_dict(json.loads(json.dumps(rec.to_dict())))
        assert restored == rec

    def test_launch_record_dict_keys_in_order(self) -> None:
        rec = LaunchRecord(name="ISS (ZARYA)", norad_id="25544", launch_date="1998-11-20")
        assert list(rec.to_dict().items()) == [
            ("name", "ISS (ZARYA)"),
            ("norad_id", "25544"),
            ("launch_date", "1998-11-20"),
        ]

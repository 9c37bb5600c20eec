"""Tests for mean-motion orbit classification."""

import pytest

from satexport.core.orbit import OrbitClass, classify_orbit, parse_mean_motion


def _line2(mean_motion: str) -> str:
    return f"2 25544  51.6412 207.4925 0004948 290.5508 178.9792 {mean_motion}"


ISS_LINE2 = "2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596"
# Intelsat-class geostationary line 2
GEO_LINE2 = "2 28358   0.0153 243.6632 0002413 102.4376 263.1339  1.00271022 70130"
# GPS semi-synchronous line 2; ~2 rev/day sits under the GEO threshold
GPS_LINE2 = "2 32711  55.4684 175.5727 0158406  57.6993 303.9093  2.00563296118932"


class TestClassifyOrbit:
    @pytest.mark.parametrize(
        ("mean_motion", "expected"),
        [
            ("1.0", OrbitClass.GEO),
            ("15.2", OrbitClass.LEO),
            ("6.0", OrbitClass.MEO),
            ("2.5", OrbitClass.MEO),
            ("11.0", OrbitClass.MEO),
            ("2.4999", OrbitClass.GEO),
            ("11.0001", OrbitClass.LEO),
        ],
    )
    def test_thresholds(self, mean_motion: str, expected: OrbitClass) -> None:
        assert classify_orbit(_line2(mean_motion)) is expected

    def test_real_lines(self) -> None:
        assert classify_orbit(ISS_LINE2) is OrbitClass.LEO
        assert classify_orbit(GEO_LINE2) is OrbitClass.GEO
        assert classify_orbit(GPS_LINE2) is OrbitClass.GEO

    def test_short_line(self) -> None:
        assert classify_orbit("2 25544  51.6412 207.4925") is OrbitClass.NO_DATA

    def test_empty_line(self) -> None:
        assert classify_orbit("") is OrbitClass.NO_DATA

    @pytest.mark.parametrize("token", ["abc", "1_5.5", "inf", "infinity", "-inf", "nan", "NaN", "15.5x", "."])
    def test_non_numeric_token(self, token: str) -> None:
        assert classify_orbit(_line2(token)) is OrbitClass.NO_DATA

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("+15.5", OrbitClass.LEO), (".5", OrbitClass.GEO), ("1.5e1", OrbitClass.LEO)],
    )
    def test_decimal_forms_accepted(self, token: str, expected: OrbitClass) -> None:
        assert classify_orbit(_line2(token)) is expected

    def test_value_is_wire_string(self) -> None:
        assert OrbitClass.NO_DATA.value == "no data"
        assert OrbitClass.LEO.value == "LEO"

    def test_deterministic(self) -> None:
        assert classify_orbit(ISS_LINE2) is classify_orbit(ISS_LINE2)


class TestParseMeanMotion:
    def test_iss(self) -> None:
        assert parse_mean_motion(ISS_LINE2) == pytest.approx(15.49583488439596)

    def test_too_few_tokens(self) -> None:
        assert parse_mean_motion("2 25544") is None

    def test_garbage(self) -> None:
        assert parse_mean_motion(_line2("x.y")) is None

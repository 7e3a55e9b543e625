"""Tests for the zone/county reference table loaders."""

import pytest

from src.data.reference_tables import (
    ZONE_COLUMNS,
    ReferenceDataError,
    load_county_rows,
    load_zone_rows,
)
from src.engine.reference_index import ReferenceIndex


@pytest.fixture
def zones_file(tmp_path):
    path = tmp_path / "zones.csv"
    path.write_text(
        "AL|001|HUN|Central Alabama|ALZ001|Lauderdale|01077|C|nc|34.9|-87.6\n"
        "TX|213|HGX|Harris|TXZ213|Harris|48201|C|se|29.8|-95.4\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def counties_file(tmp_path):
    path = tmp_path / "counties.csv"
    path.write_text(
        "001001,Autauga,AL\n"
        "1003,Baldwin,AL\n"
        "002013,NA,AK\n",
        encoding="utf-8",
    )
    return path


class TestLoadZoneRows:
    def test_columns(self, zones_file):
        rows = load_zone_rows(zones_file)
        assert len(rows) == 2
        assert list(rows[0].keys()) == ZONE_COLUMNS
        assert rows[0]["stateZone"] == "ALZ001"
        assert rows[0]["name"] == "Central Alabama"

    def test_values_kept_as_strings(self, zones_file):
        rows = load_zone_rows(zones_file)
        assert rows[0]["zone"] == "001"
        assert rows[0]["fips"] == "01077"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReferenceDataError):
            load_zone_rows(tmp_path / "missing.csv")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ReferenceDataError):
            load_zone_rows(path)


class TestLoadCountyRows:
    def test_leading_zeros_kept(self, counties_file):
        rows = load_county_rows(counties_file)
        assert rows[0] == {"fips": "001001", "name": "Autauga", "state": "AL"}
        assert rows[1]["fips"] == "1003"

    def test_na_name_not_coerced(self, counties_file):
        rows = load_county_rows(counties_file)
        assert rows[2]["name"] == "NA"

    def test_custom_separator(self, tmp_path):
        path = tmp_path / "counties.psv"
        path.write_text("001001|Autauga|AL\n", encoding="utf-8")
        rows = load_county_rows(path, separator="|")
        assert rows[0]["name"] == "Autauga"


class TestBuildFromFiles:
    def test_index_from_loaded_rows(self, zones_file, counties_file):
        index = ReferenceIndex.build(load_zone_rows(zones_file), load_county_rows(counties_file))
        assert index.zone("TXZ213").name == "Harris"
        assert index.county("001001").name == "Autauga"
        assert index.county("01003").name == "Baldwin"

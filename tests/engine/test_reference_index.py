"""Tests for the zone/county reference index."""

import pytest

from src.engine.reference_index import ReferenceIndex, pad_county_fips
from src.models.region import CountyRecord, ZoneRecord


class TestPadCountyFips:
    def test_four_digits_padded(self):
        assert pad_county_fips("1001") == "01001"

    def test_five_digits_unchanged(self):
        assert pad_county_fips("48201") == "48201"

    def test_six_digits_unchanged(self):
        assert pad_county_fips("001001") == "001001"

    def test_short_values_unchanged(self):
        assert pad_county_fips("101") == "101"


class TestReferenceIndex:
    def test_zones_keyed_by_state_zone(self, reference_index):
        assert reference_index.zone("ALZ001") == ZoneRecord(key="ALZ001", name="Central Alabama", state="AL")
        assert reference_index.zone("TXZ213").name == "Harris"

    def test_counties_keyed_by_padded_fips(self, reference_index):
        assert reference_index.county("01001") == CountyRecord(key="01001", name="Autauga", state="AL")
        assert reference_index.county("1001") is None

    def test_six_digit_county_key_kept(self, reference_index):
        assert reference_index.county("048201").name == "Harris"

    def test_missing_keys(self, reference_index):
        assert reference_index.zone("ALZ999") is None
        assert reference_index.county("99999") is None

    def test_last_duplicate_wins(self):
        zone_rows = [
            {"stateZone": "ALZ001", "name": "First", "state": "AL"},
            {"stateZone": "ALZ001", "name": "Second", "state": "AL"},
        ]
        county_rows = [
            {"fips": "1001", "name": "Autauga", "state": "AL"},
            {"fips": "01001", "name": "Autauga County", "state": "AL"},
        ]
        index = ReferenceIndex.build(zone_rows, county_rows)
        assert index.zone("ALZ001").name == "Second"
        assert index.county("01001").name == "Autauga County"
        assert len(index.counties) == 1

    def test_empty_tables(self):
        index = ReferenceIndex.build([], [])
        assert len(index.zones) == 0
        assert len(index.counties) == 0

    def test_index_is_read_only(self, reference_index):
        with pytest.raises(TypeError):
            reference_index.zones["ALZ003"] = ZoneRecord(key="ALZ003", name="X", state="AL")

"""Canonical fixtures shared across engine and data tests.

Reference index: two Alabama zones, one Texas zone; counties keyed both in
5-digit FIPS form (01001) and 6-digit SAME form (048201).
"""

import pytest

from src.engine.reference_index import ReferenceIndex
from src.engine.region_resolver import RegionResolver
from src.models.alert import AlertItem, GeocodeEntry


def zone_row(state: str, zone: str, name: str) -> dict[str, str]:
    return {
        "state": state,
        "zone": zone,
        "cwa": "BMX",
        "name": name,
        "stateZone": f"{state}Z{zone}",
        "county": "",
        "fips": "",
        "timeZone": "C",
        "feArea": "",
        "latitude": "33.5",
        "longitude": "-86.8",
    }


def ugc_geocode(value: str) -> tuple[GeocodeEntry, ...]:
    """A single-entry geocode list the way the national feed delivers it."""
    return (GeocodeEntry(type_labels=("FIPS6", "UGC"), values=("001001", value)),)


@pytest.fixture
def make_geocode():
    return ugc_geocode


@pytest.fixture
def zone_rows() -> list[dict[str, str]]:
    return [
        zone_row("AL", "001", "Central Alabama"),
        zone_row("AL", "002", "Colbert"),
        zone_row("TX", "213", "Harris"),
    ]


@pytest.fixture
def county_rows() -> list[dict[str, str]]:
    return [
        {"fips": "1001", "name": "Autauga", "state": "AL"},
        {"fips": "048201", "name": "Harris", "state": "TX"},
    ]


@pytest.fixture
def reference_index(zone_rows, county_rows) -> ReferenceIndex:
    return ReferenceIndex.build(zone_rows, county_rows)


@pytest.fixture
def resolver(reference_index) -> RegionResolver:
    return RegionResolver(reference_index)


@pytest.fixture
def hail_alert() -> AlertItem:
    return AlertItem(
        summary="SEVERE THUNDERSTORM WARNING...QUARTER SIZE HAIL...60 MPH WINDS",
        link="https://alerts.weather.gov/cap/wwacapget.php?x=AL1",
        geocode=ugc_geocode("ALZ001 ALZ002"),
    )

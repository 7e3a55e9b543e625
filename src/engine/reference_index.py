"""Keyed lookup tables for NWS forecast zones and counties.

Pure functions. No I/O. Rows come from src.data.reference_tables.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from src.models.region import CountyRecord, ZoneRecord


def pad_county_fips(fips: str) -> str:
    """Left-pad a 4-digit county FIPS to 5 digits; other lengths pass through."""
    if len(fips) == 4:
        return f"0{fips}"
    return fips


@dataclass(frozen=True)
class ReferenceIndex:
    zones: Mapping[str, ZoneRecord] = field(default_factory=lambda: MappingProxyType({}))
    counties: Mapping[str, CountyRecord] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(
        cls,
        zone_rows: Iterable[Mapping[str, str]],
        county_rows: Iterable[Mapping[str, str]],
    ) -> "ReferenceIndex":
        """Index zone rows by stateZone and county rows by padded FIPS.

        Duplicate keys: the later row wins.
        """
        zones: dict[str, ZoneRecord] = {}
        for row in zone_rows:
            key = row["stateZone"]
            zones[key] = ZoneRecord(key=key, name=row["name"], state=row["state"])

        counties: dict[str, CountyRecord] = {}
        for row in county_rows:
            key = pad_county_fips(row["fips"])
            counties[key] = CountyRecord(key=key, name=row["name"], state=row["state"])

        return cls(zones=MappingProxyType(zones), counties=MappingProxyType(counties))

    def zone(self, key: str) -> ZoneRecord | None:
        return self.zones.get(key)

    def county(self, key: str) -> CountyRecord | None:
        return self.counties.get(key)

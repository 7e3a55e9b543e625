"""UGC region resolution: alert geocode → human-readable areas.

A UGC code is 2-letter state + kind character + 3 digits, where the kind
is Z (forecast zone) or C (county). Zone codes are looked up verbatim.
County codes are turned into a FIPS lookup key via the state prefix table.
Codes missing from the reference index resolve to placeholder regions.
"""

import logging
from collections.abc import Sequence

from src.data.state_fips import UnknownStateError, state_fips_prefix
from src.engine.reference_index import ReferenceIndex
from src.models.alert import (
    UGC_LABEL,
    GeocodeEntry,
    GeocodeShape,
    UgcGeocode,
    UnsupportedGeocode,
)
from src.models.region import ResolvedRegion

logger = logging.getLogger(__name__)

ZONE_KIND = "Z"
COUNTY_KIND = "C"


def classify_geocode(geocode: Sequence[GeocodeEntry]) -> GeocodeShape:
    """Validate an alert's geocode list into a UGC code list or an unsupported shape."""
    if len(geocode) != 1:
        return UnsupportedGeocode(reason="count")

    entry = geocode[0]
    if entry.kind_label != UGC_LABEL:
        return UnsupportedGeocode(reason="label", label=entry.kind_label)

    return UgcGeocode(codes=tuple(entry.value_string.split()))


def county_lookup_key(code: str) -> str:
    """Derive the county table key for a county UGC code.

    "0" + state FIPS prefix + county number, e.g. ALC001 → 001001. This is
    the 6-digit SAME form, so it only hits county tables keyed that way.
    """
    return f"0{state_fips_prefix(code[:2])}{code[3:]}"


class RegionResolver:
    def __init__(self, index: ReferenceIndex):
        self.index = index

    def resolve(self, geocode: Sequence[GeocodeEntry], link: str) -> list[ResolvedRegion]:
        """Resolve an alert's geocode list into regions, preserving code order."""
        shape = classify_geocode(geocode)

        if isinstance(shape, UnsupportedGeocode):
            if shape.reason == "label":
                logger.warning(
                    "Did not recognize geocoding of type '%s', skipping affected regions. Link: %s",
                    shape.label, link,
                )
            return []

        regions: list[ResolvedRegion] = []
        for code in shape.codes:
            region = self.resolve_code(code, link)
            if region is not None:
                regions.append(region)
        return regions

    def resolve_code(self, code: str, link: str = "") -> ResolvedRegion | None:
        """Resolve one UGC code. None when the kind character is not recognized."""
        kind = code[2:3]

        if kind == ZONE_KIND:
            zone = self.index.zone(code)
            if zone is None:
                return ResolvedRegion.unknown_zone(code)
            return ResolvedRegion.from_record(zone)

        if kind == COUNTY_KIND:
            try:
                key = county_lookup_key(code)
            except UnknownStateError as e:
                logger.warning("%s, county code %s unresolved. Link: %s", e, code, link)
                return ResolvedRegion.unknown_county(code)

            county = self.index.county(key)
            if county is None:
                return ResolvedRegion.unknown_county(code)
            return ResolvedRegion.from_record(county)

        logger.warning(
            "UGC region code '%s' was not recognized, third character should be Z (zone) "
            "or C (county). Skipping in affected areas. Link: %s",
            code, link,
        )
        return None

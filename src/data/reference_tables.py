"""NWS zone and county reference tables.

Zones: pipe-separated zone/county correlation file from
https://www.weather.gov/gis/ZoneCounty. Counties: SAME code list from
https://www.weather.gov/source/nwr/SameCode.txt. Neither file has a header.
"""

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)

ZONE_COLUMNS = [
    "state",
    "zone",
    "cwa",
    "name",
    "stateZone",
    "county",
    "fips",
    "timeZone",
    "feArea",
    "latitude",
    "longitude",
]

COUNTY_COLUMNS = ["fips", "name", "state"]


class ReferenceDataError(Exception):
    """A reference table could not be read."""


def _read_table(path: str | Path, separator: str, columns: list[str]) -> list[dict[str, str]]:
    # dtype=str keeps FIPS leading zeros; keep_default_na stops "NA" names becoming NaN
    try:
        df = pd.read_csv(
            path,
            sep=separator,
            header=None,
            names=columns,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8",
        )
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise ReferenceDataError(f"Could not read reference table {path}: {e}") from e

    rows = df.to_dict(orient="records")
    logger.info("Loaded %d rows from %s", len(rows), path)
    return rows


def load_zone_rows(path: str | Path, separator: str = "|") -> list[dict[str, str]]:
    return _read_table(path, separator, ZONE_COLUMNS)


def load_county_rows(path: str | Path, separator: str = ",") -> list[dict[str, str]]:
    return _read_table(path, separator, COUNTY_COLUMNS)

from dataclasses import dataclass, field

UGC_LABEL = "UGC"


@dataclass(frozen=True)
class GeocodeEntry:
    """One cap:geocode element: ordered valueName labels and their values.

    The national feed lists FIPS6 first and UGC second, so the region
    label and code string are read from position 1.
    """

    type_labels: tuple[str, ...] = ()
    values: tuple[str, ...] = ()

    @property
    def kind_label(self) -> str:
        return self.type_labels[1] if len(self.type_labels) > 1 else ""

    @property
    def value_string(self) -> str:
        return self.values[1] if len(self.values) > 1 else ""


@dataclass(frozen=True)
class UnsupportedGeocode:
    reason: str  # "count" | "label"
    label: str = ""


@dataclass(frozen=True)
class UgcGeocode:
    codes: tuple[str, ...]


GeocodeShape = UnsupportedGeocode | UgcGeocode


@dataclass(frozen=True)
class AlertItem:
    summary: str
    link: str
    geocode: tuple[GeocodeEntry, ...] = ()

    # CAP fields carried through but unused by resolution/extraction
    title: str = ""
    event: str = ""
    severity: str = ""
    urgency: str = ""
    certainty: str = ""
    area_desc: str = ""
    effective: str = ""
    expires: str = ""


@dataclass(frozen=True)
class AlertFeed:
    title: str
    items: list[AlertItem] = field(default_factory=list)

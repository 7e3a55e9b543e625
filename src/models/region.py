from dataclasses import dataclass


@dataclass(frozen=True)
class ZoneRecord:
    key: str  # e.g. ALZ001
    name: str
    state: str


@dataclass(frozen=True)
class CountyRecord:
    key: str  # county FIPS
    name: str
    state: str


@dataclass(frozen=True)
class ResolvedRegion:
    name: str
    state: str

    @classmethod
    def from_record(cls, record: ZoneRecord | CountyRecord) -> "ResolvedRegion":
        return cls(name=record.name, state=record.state)

    @classmethod
    def unknown_zone(cls, code: str) -> "ResolvedRegion":
        return cls(name=f"Unknown Zone ({code})", state=code[:2])

    @classmethod
    def unknown_county(cls, code: str) -> "ResolvedRegion":
        return cls(name=f"Unknown County ({code})", state=code[:2])

"""Hazard keyword extraction from alert summaries.

NWS summaries are run together with "..." between clauses, e.g.
"SEVERE THUNDERSTORM WARNING...QUARTER SIZE HAIL...60 MPH WINDS". Each
clause is scanned separately so a phrase never spans two of them.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

SEGMENT_SEPARATOR = "..."

DEFAULT_HAZARD_KEYWORDS: tuple[str, ...] = ("hail",)


@dataclass(frozen=True)
class TermMatch:
    keyword: str
    clause: str | None = None  # free text between the connector and the keyword

    @property
    def phrase(self) -> str:
        return f"{self.clause or ''}{self.keyword}".strip()


def build_hazard_pattern(keyword: str) -> re.Pattern[str]:
    """Case-insensitive keyword, optionally preceded by a connector and a clause.

    The connector is lowercase "and" + whitespace, a comma, or a period; only
    the keyword ignores case, so "WINDS AND LARGE HAIL" yields just "HAIL".
    Text after the connector (letters, digits, spaces) up to the keyword is
    captured as the clause.
    """
    return re.compile(
        r"(?:(?:and\s+|,|\.)(?P<clause>[a-zA-Z0-9 ]+))?(?P<keyword>(?i:" + re.escape(keyword) + r"))"
    )


DEFAULT_HAZARD_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    build_hazard_pattern(k) for k in DEFAULT_HAZARD_KEYWORDS
)


def split_segments(summary: str) -> list[str]:
    return summary.split(SEGMENT_SEPARATOR)


def match_terms(segment: str, patterns: Sequence[re.Pattern[str]]) -> list[TermMatch]:
    """First match of each pattern in the segment, in pattern order."""
    matches: list[TermMatch] = []
    for pattern in patterns:
        m = pattern.search(segment)
        if m is not None:
            matches.append(TermMatch(keyword=m.group("keyword"), clause=m.group("clause")))
    return matches


class TermExtractor:
    def __init__(self, patterns: Sequence[re.Pattern[str]] = DEFAULT_HAZARD_PATTERNS):
        self.patterns = tuple(patterns)

    @classmethod
    def for_keywords(cls, keywords: Iterable[str]) -> "TermExtractor":
        return cls([build_hazard_pattern(k) for k in keywords])

    def extract(self, summary: str) -> list[str]:
        """Hazard phrases found in the summary, in segment then pattern order."""
        terms: list[str] = []
        for segment in split_segments(summary):
            terms.extend(m.phrase for m in match_terms(segment, self.patterns))
        return terms

"""Report sinks for flagged alerts.

Sinks only render and write; nothing is stored or delivered elsewhere.
"""

import sys
from typing import Protocol, TextIO, runtime_checkable

from src.models.report import AlertReport


@runtime_checkable
class ReportSink(Protocol):
    def emit(self, report: AlertReport) -> None:
        """Render and write one flagged alert."""
        ...


def render_report(report: AlertReport) -> str:
    terms = ", ".join(f'"{t}"' for t in report.terms)
    areas = ", ".join(f"{r.name} ({r.state.strip()})" for r in report.regions)
    return (
        "Potential Event:\n"
        f"\tTerms: {terms}\n"
        f"\tDescription: {report.summary}\n"
        f"\tAffected Areas: {areas}\n"
        f"\tLink: {report.link}\n"
    )


class TextReportSink:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def emit(self, report: AlertReport) -> None:
        print(render_report(report), file=self.stream)


class JsonReportSink:
    """One JSON object per line."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def emit(self, report: AlertReport) -> None:
        print(report.model_dump_json(), file=self.stream)

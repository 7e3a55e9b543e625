"""Alert pipeline: resolve regions, extract hazard terms, report flagged alerts.

Flow per alert: geocode → RegionResolver, summary → TermExtractor →
sink (only when at least one term was found).
"""

import logging
from collections.abc import Iterable

from src.data.report import ReportSink
from src.engine.region_resolver import RegionResolver
from src.engine.term_extractor import TermExtractor
from src.models.alert import AlertItem
from src.models.region import ResolvedRegion
from src.models.report import AlertReport, RegionSummary

logger = logging.getLogger(__name__)


class AlertPipeline:
    def __init__(self, resolver: RegionResolver, extractor: TermExtractor, sink: ReportSink):
        self.resolver = resolver
        self.extractor = extractor
        self.sink = sink

    def evaluate(self, item: AlertItem) -> tuple[list[str], list[ResolvedRegion]]:
        """Hazard terms and resolved regions for one alert."""
        regions = self.resolver.resolve(item.geocode, item.link)
        terms = self.extractor.extract(item.summary)
        return terms, regions

    @staticmethod
    def build_report(item: AlertItem, terms: list[str], regions: list[ResolvedRegion]) -> AlertReport:
        return AlertReport(
            terms=terms,
            summary=item.summary,
            regions=[RegionSummary(name=r.name, state=r.state) for r in regions],
            link=item.link,
        )

    def process(self, items: Iterable[AlertItem]) -> list[AlertReport]:
        """Run every alert in feed order. Returns the reports that were emitted."""
        emitted: list[AlertReport] = []
        for item in items:
            terms, regions = self.evaluate(item)
            if not terms:
                continue

            try:
                report = self.build_report(item, terms, regions)
                self.sink.emit(report)
            except Exception as e:
                logger.warning("Failed to serialize affected regions for %s: %s", item.link, e)
                continue
            emitted.append(report)

        logger.info("Flagged %d alert(s)", len(emitted))
        return emitted

"""CLI: scan the NWS national alert feed for hazard keywords.

Usage:
    python -m src.cli
    python -m src.cli --zones data/zones.csv --counties data/counties.csv
    python -m src.cli --feed-file saved_feed.xml --keyword hail --keyword tornado
    python -m src.cli --format json
"""

import argparse
import asyncio
import logging
import sys

from src.config import settings
from src.data.nws_feed import FeedError, NWSAlertFeedClient, load_alert_feed
from src.data.reference_tables import ReferenceDataError, load_county_rows, load_zone_rows
from src.data.report import JsonReportSink, ReportSink, TextReportSink
from src.engine.pipeline import AlertPipeline
from src.engine.reference_index import ReferenceIndex
from src.engine.region_resolver import RegionResolver
from src.engine.term_extractor import TermExtractor
from src.models.alert import AlertFeed

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Flag NWS alerts that mention hazard keywords")
    parser.add_argument("--feed-url", default=settings.feed_url, help="Alert feed URL")
    parser.add_argument("--feed-file", help="Read a saved copy of the feed instead of fetching")
    parser.add_argument("--zones", default=settings.zones_path, help="Zone reference table")
    parser.add_argument("--counties", default=settings.counties_path, help="County reference table")
    parser.add_argument(
        "--keyword",
        dest="keywords",
        action="append",
        help="Hazard keyword to scan for (repeatable, default: %s)" % ", ".join(settings.hazard_keywords),
    )
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Report format")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def build_index(zones_path: str, counties_path: str) -> ReferenceIndex:
    zone_rows = load_zone_rows(zones_path, settings.zones_separator)
    county_rows = load_county_rows(counties_path, settings.counties_separator)
    return ReferenceIndex.build(zone_rows, county_rows)


async def load_feed(args: argparse.Namespace) -> AlertFeed:
    if args.feed_file:
        return load_alert_feed(args.feed_file)
    return await NWSAlertFeedClient(url=args.feed_url).fetch()


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        index = build_index(args.zones, args.counties)
        feed = await load_feed(args)
    except (ReferenceDataError, FeedError) as e:
        logger.error("%s", e)
        return 1

    sink: ReportSink = JsonReportSink() if args.format == "json" else TextReportSink()
    pipeline = AlertPipeline(
        resolver=RegionResolver(index),
        extractor=TermExtractor.for_keywords(args.keywords or settings.hazard_keywords),
        sink=sink,
    )

    if args.format == "text":
        print(feed.title)
    pipeline.process(feed.items)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

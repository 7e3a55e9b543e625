"""NWS national CAP alert feed client.

The feed is Atom with CAP 1.1 extension elements on each entry. Region
codes sit in cap:geocode as alternating valueName/value children, e.g.

    <cap:geocode>
        <valueName>FIPS6</valueName><value>001001 001003</value>
        <valueName>UGC</valueName><value>ALZ001 ALZ002</value>
    </cap:geocode>

Free, no API key, but NWS asks for an identifying User-Agent.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import httpx

from src.config import settings
from src.models.alert import AlertFeed, AlertItem, GeocodeEntry

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """The alert feed could not be fetched or parsed."""


def _localname(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _child_text(el: ET.Element, name: str) -> str:
    for child in el:
        if _localname(child.tag) == name:
            return (child.text or "").strip()
    return ""


def _entry_link(entry: ET.Element) -> str:
    for child in entry:
        if _localname(child.tag) != "link":
            continue
        # Atom carries the URL in href, RSS in the element text
        href = child.get("href")
        if href:
            return href.strip()
        if child.text and child.text.strip():
            return child.text.strip()
    return ""


def _parse_geocode(el: ET.Element) -> GeocodeEntry:
    labels: list[str] = []
    values: list[str] = []
    for child in el:
        name = _localname(child.tag)
        if name == "valueName":
            labels.append((child.text or "").strip())
        elif name == "value":
            values.append((child.text or "").strip())
    return GeocodeEntry(type_labels=tuple(labels), values=tuple(values))


def _parse_entry(entry: ET.Element) -> AlertItem:
    geocode = tuple(
        _parse_geocode(child) for child in entry if _localname(child.tag) == "geocode"
    )
    return AlertItem(
        summary=_child_text(entry, "summary") or _child_text(entry, "description"),
        link=_entry_link(entry),
        geocode=geocode,
        title=_child_text(entry, "title"),
        event=_child_text(entry, "event"),
        severity=_child_text(entry, "severity"),
        urgency=_child_text(entry, "urgency"),
        certainty=_child_text(entry, "certainty"),
        area_desc=_child_text(entry, "areaDesc"),
        effective=_child_text(entry, "effective"),
        expires=_child_text(entry, "expires"),
    )


def parse_alert_feed(xml_text: str) -> AlertFeed:
    """Parse an Atom (or RSS) CAP alert feed into an AlertFeed."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise FeedError(f"Alert feed is not valid XML: {e}") from e

    # Atom: <feed><title>; RSS: <rss><channel><title>
    container = root
    if _localname(root.tag) == "rss":
        container = next((c for c in root if _localname(c.tag) == "channel"), root)
    title = _child_text(container, "title")

    items = [
        _parse_entry(el)
        for el in container
        if _localname(el.tag) in ("entry", "item")
    ]
    logger.info("Parsed %d alert(s) from feed '%s'", len(items), title)
    return AlertFeed(title=title, items=items)


def load_alert_feed(path: str | Path) -> AlertFeed:
    """Parse a saved copy of the alert feed."""
    try:
        xml_text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FeedError(f"Could not read alert feed {path}: {e}") from e
    return parse_alert_feed(xml_text)


class NWSAlertFeedClient:
    def __init__(
        self,
        url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url or settings.feed_url
        self.user_agent = user_agent or settings.user_agent
        self.timeout = timeout or settings.request_timeout_seconds
        self.transport = transport

    async def fetch(self) -> AlertFeed:
        """Fetch and parse the current alert feed. Raises FeedError on failure."""
        headers = {"User-Agent": self.user_agent, "Accept": "application/atom+xml"}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise FeedError(f"Alert feed request failed: {e}") from e

        return parse_alert_feed(resp.text)

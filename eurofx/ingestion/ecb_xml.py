"""Decoder for the ECB euro foreign exchange reference rates XML feeds."""

from __future__ import annotations

from bs4 import BeautifulSoup

from eurofx.errors import DecodeError
from eurofx.ingestion.models import SnapshotEntry
from eurofx.records.dated_record import DatedRecord
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _parse_rate(currency: str, value: str | None) -> float:
    if value is None:
        raise DecodeError(f"rate of {currency} is missing")
    try:
        return float(value)
    except ValueError as exc:
        raise DecodeError(f"rate of {currency} is not numeric: {value!r}") from exc


def parse_ecb_xml(raw: bytes | str) -> list[SnapshotEntry]:
    """Decode an ECB ``gesmes:Envelope`` document into snapshot entries.

    The feeds nest three levels of ``Cube`` elements: an anonymous container,
    one ``Cube time="YYYY-MM-DD"`` per day and one
    ``Cube currency="USD" rate="1.0813"`` per currency. Entries are returned
    in document order, which is newest first for every ECB feed. Dates are
    not validated here.
    """

    # html.parser lower-cases tag and attribute names, hence ``cube``.
    soup = BeautifulSoup(raw, "html.parser")
    container = soup.find("cube")
    if container is None:
        raise DecodeError("document does not contain a Cube element")

    entries: list[SnapshotEntry] = []
    for day_cube in container.find_all("cube", recursive=False):
        day = day_cube.get("time")
        if not day:
            raise DecodeError("snapshot Cube element has no time attribute")
        rates: list[tuple[str, float]] = []
        for rate_cube in day_cube.find_all("cube", attrs={"currency": True}):
            currency = rate_cube["currency"].strip()
            rates.append((currency, _parse_rate(currency, rate_cube.get("rate"))))
        entries.append(SnapshotEntry(date=day.strip(), rates=tuple(rates)))

    LOGGER.debug("Decoded %s rates snapshots", len(entries))
    return entries


def parse_latest(raw: bytes | str) -> DatedRecord:
    """Decode a document and return its first (most recent) snapshot."""

    entries = parse_ecb_xml(raw)
    if not entries:
        raise DecodeError("document does not contain any rates records")
    return DatedRecord.from_entry(entries[0])


__all__ = ["parse_ecb_xml", "parse_latest"]

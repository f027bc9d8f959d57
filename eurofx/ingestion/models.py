"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SnapshotEntry:
    """A single decoded rates snapshot, before its date has been validated.

    ``date`` keeps the raw ``YYYY-MM-DD`` string from the source document and
    ``rates`` holds ``(currency, rate)`` pairs in document order.
    """

    date: str
    rates: tuple[tuple[str, float], ...] = field(default_factory=tuple)

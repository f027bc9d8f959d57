"""Rates record bound to the day it was published for."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from eurofx.ingestion.models import SnapshotEntry
from eurofx.records.rate_record import BASE_CURRENCY, RateRecord
from eurofx.utils.dates import format_date, parse_date


@dataclass(frozen=True, slots=True)
class DatedRecord:
    """Exchange rates published for a specific ``date``."""

    date: date
    rates: RateRecord

    @classmethod
    def from_entry(cls, entry: SnapshotEntry, *, base_currency: str = BASE_CURRENCY) -> "DatedRecord":
        """Validate a decoded snapshot and build its record.

        Raises :class:`eurofx.errors.DateParseError` if the entry date is
        malformed.
        """

        return cls(
            date=parse_date(entry.date),
            rates=RateRecord.from_pairs(entry.rates, base_currency=base_currency),
        )

    def rate(self, currency: str) -> float | None:
        return self.rates.rate(currency)

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        return self.rates.convert(amount, from_currency, to_currency)

    def convert_minor_units(self, amount: int, from_currency: str, to_currency: str) -> int:
        return self.rates.convert_minor_units(amount, from_currency, to_currency)

    def __str__(self) -> str:
        return f"{format_date(self.date)}: {dict(self.rates)}"

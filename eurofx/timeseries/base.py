"""Common contract and query algorithm for rates time series."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Final

from eurofx.errors import ApproximationFailedError, RatesRecordNotFoundError
from eurofx.ingestion.models import SnapshotEntry
from eurofx.records import BASE_CURRENCY, DatedRecord, RateRecord, mean_record
from eurofx.utils.dates import DateLike, parse_date

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    import pandas as pd

# The largest gap between two consecutive ECB snapshots is 5 days.
DEFAULT_DAY_RANGE_LIMIT: Final[int] = 100

RecordSource = Iterable[SnapshotEntry | DatedRecord]


def build_records(
    entries: RecordSource, *, base_currency: str = BASE_CURRENCY
) -> list[DatedRecord]:
    """Turn decoded entries into dated records, keeping their order.

    Already built :class:`DatedRecord` values are passed through. A malformed
    date aborts the whole build with :class:`eurofx.errors.DateParseError`.
    """

    records: list[DatedRecord] = []
    for entry in entries:
        if isinstance(entry, DatedRecord):
            records.append(entry)
        else:
            records.append(DatedRecord.from_entry(entry, base_currency=base_currency))
    return records


def deduplicate(records: Iterable[DatedRecord]) -> dict[date, RateRecord]:
    """Index records by date; a later record replaces an earlier one on the same day."""

    indexed: dict[date, RateRecord] = {}
    for record in records:
        indexed[record.date] = record.rates
    return indexed


class RateTimeSeries(ABC):
    """Historical rates records with lookup, approximation and conversion.

    Layouts only provide exact lookups and the bounded nearest-earlier /
    nearest-later search; everything else is shared.
    """

    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of records."""

    @abstractmethod
    def all_records_newest_first(self) -> list[DatedRecord]:
        """Return every record in anti-chronological order."""

    @abstractmethod
    def as_date_map(self) -> dict[date, RateRecord]:
        """Return every record indexed by its date."""

    @abstractmethod
    def _lookup(self, day: date) -> RateRecord | None:
        """Return the record published exactly on ``day``."""

    @abstractmethod
    def _nearest_earlier(self, day: date, day_range_limit: int) -> RateRecord | None:
        """Return the closest record strictly before ``day`` within range."""

    @abstractmethod
    def _nearest_later(self, day: date, day_range_limit: int) -> RateRecord | None:
        """Return the closest record strictly after ``day`` within range."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self)})"

    def dates(self) -> list[date]:
        """Return the dates of all records, newest first."""

        return [record.date for record in self.all_records_newest_first()]

    def rates_on(self, day: DateLike) -> RateRecord | None:
        """Return the rates record published on ``day`` or ``None``."""

        return self._lookup(parse_date(day))

    def rate_on(self, day: DateLike, currency: str) -> float | None:
        """Return the ``currency`` rate published on ``day`` or ``None``."""

        rates = self.rates_on(day)
        if rates is None:
            return None
        return rates.rate(currency)

    def approximate_rates(
        self, day: DateLike, day_range_limit: int = DEFAULT_DAY_RANGE_LIMIT
    ) -> RateRecord | None:
        """Approximate the rates record on ``day`` from its neighbours.

        The closest earlier and later records within ``day_range_limit`` days
        are looked up. With no neighbour ``None`` is returned, with a single
        neighbour its record is returned as is, and with both neighbours
        their rates are merged: shared currencies get the plain (unweighted)
        mean and currencies listed on one side only are copied over.
        """

        target = parse_date(day)
        earlier = self._nearest_earlier(target, day_range_limit)
        later = self._nearest_later(target, day_range_limit)
        if earlier is None:
            return later
        if later is None:
            return earlier
        return mean_record(earlier, later)

    def approximate_rate(
        self, day: DateLike, currency: str, day_range_limit: int = DEFAULT_DAY_RANGE_LIMIT
    ) -> float | None:
        """Approximate a single currency rate, see :meth:`approximate_rates`."""

        target = parse_date(day)
        earlier = self._nearest_earlier(target, day_range_limit)
        later = self._nearest_later(target, day_range_limit)
        earlier_rate = earlier.rate(currency) if earlier is not None else None
        later_rate = later.rate(currency) if later is not None else None
        if earlier_rate is None:
            return later_rate
        if later_rate is None:
            return earlier_rate
        return (earlier_rate + later_rate) / 2

    def convert(self, day: DateLike, amount: float, from_currency: str, to_currency: str) -> float:
        """Convert ``amount`` using the rates published exactly on ``day``."""

        return self._require_rates(day).convert(amount, from_currency, to_currency)

    def convert_approximate(
        self,
        day: DateLike,
        amount: float,
        from_currency: str,
        to_currency: str,
        day_range_limit: int = DEFAULT_DAY_RANGE_LIMIT,
    ) -> float:
        """Convert ``amount`` using rates approximated around ``day``."""

        rates = self._require_approximate_rates(day, day_range_limit)
        return rates.convert(amount, from_currency, to_currency)

    def convert_minor_units(
        self, day: DateLike, amount: int, from_currency: str, to_currency: str
    ) -> int:
        return self._require_rates(day).convert_minor_units(amount, from_currency, to_currency)

    def convert_minor_units_approximate(
        self,
        day: DateLike,
        amount: int,
        from_currency: str,
        to_currency: str,
        day_range_limit: int = DEFAULT_DAY_RANGE_LIMIT,
    ) -> int:
        rates = self._require_approximate_rates(day, day_range_limit)
        return rates.convert_minor_units(amount, from_currency, to_currency)

    def to_frame(self) -> "pd.DataFrame":
        """Return the records as a DataFrame indexed by date, newest first.

        Currencies missing from a record show up as ``NaN``.
        """

        import pandas as pd

        records = self.all_records_newest_first()
        frame = pd.DataFrame(
            [dict(record.rates) for record in records],
            index=pd.Index([record.date for record in records], name="date"),
        )
        return frame.reindex(columns=sorted(frame.columns))

    def _require_rates(self, day: DateLike) -> RateRecord:
        target = parse_date(day)
        rates = self._lookup(target)
        if rates is None:
            raise RatesRecordNotFoundError(target)
        return rates

    def _require_approximate_rates(self, day: DateLike, day_range_limit: int) -> RateRecord:
        target = parse_date(day)
        rates = self.approximate_rates(target, day_range_limit)
        if rates is None:
            raise ApproximationFailedError(target, day_range_limit)
        return rates


__all__ = [
    "DEFAULT_DAY_RANGE_LIMIT",
    "RateTimeSeries",
    "RecordSource",
    "build_records",
    "deduplicate",
]

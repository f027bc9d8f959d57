"""Time series kept as a mapping of date to record."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from types import MappingProxyType

from eurofx.records import BASE_CURRENCY, DatedRecord, RateRecord
from eurofx.timeseries.base import RateTimeSeries, RecordSource, build_records, deduplicate
from eurofx.utils.dates import shift_days
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)


class UnorderedRateSeries(RateTimeSeries):
    """Records indexed by date with constant time lookups.

    No order is kept: :meth:`all_records_newest_first` sorts on every call.
    The nearest-neighbour search probes one day at a time, so its cost grows
    with ``day_range_limit`` rather than with the number of records.
    """

    __slots__ = ("_records",)

    def __init__(self, entries: RecordSource = (), *, base_currency: str = BASE_CURRENCY) -> None:
        self._records: Mapping[date, RateRecord] = MappingProxyType(
            deduplicate(build_records(entries, base_currency=base_currency))
        )
        LOGGER.debug("Built unordered series with %s records", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def all_records_newest_first(self) -> list[DatedRecord]:
        return [
            DatedRecord(date=day, rates=self._records[day])
            for day in sorted(self._records, reverse=True)
        ]

    def as_date_map(self) -> dict[date, RateRecord]:
        return dict(self._records)

    def _lookup(self, day: date) -> RateRecord | None:
        return self._records.get(day)

    def _probe(self, day: date, day_range_limit: int, step: int) -> RateRecord | None:
        for offset in range(1, day_range_limit + 1):
            try:
                candidate = shift_days(day, step * offset)
            except OverflowError:
                # Walked past date.min / date.max.
                return None
            rates = self._records.get(candidate)
            if rates is not None:
                return rates
        return None

    def _nearest_earlier(self, day: date, day_range_limit: int) -> RateRecord | None:
        return self._probe(day, day_range_limit, -1)

    def _nearest_later(self, day: date, day_range_limit: int) -> RateRecord | None:
        return self._probe(day, day_range_limit, 1)


__all__ = ["UnorderedRateSeries"]

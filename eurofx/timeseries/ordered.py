"""Time series kept as a sequence of records, newest first."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from datetime import date

from eurofx.records import BASE_CURRENCY, DatedRecord, RateRecord
from eurofx.timeseries.base import RateTimeSeries, RecordSource, build_records, deduplicate
from eurofx.utils.dates import days_between
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)


class OrderedRateSeries(RateTimeSeries):
    """Records stored as a tuple sorted in anti-chronological order.

    Use it when the records are mostly consumed in order. Lookups and the
    nearest-neighbour search are binary searches over a parallel ascending
    list of dates.
    """

    __slots__ = ("_records", "_ascending_dates")

    def __init__(self, entries: RecordSource = (), *, base_currency: str = BASE_CURRENCY) -> None:
        indexed = deduplicate(build_records(entries, base_currency=base_currency))
        ordered = sorted(indexed.items(), key=lambda item: item[0], reverse=True)
        self._records: tuple[DatedRecord, ...] = tuple(
            DatedRecord(date=day, rates=rates) for day, rates in ordered
        )
        self._ascending_dates: list[date] = [day for day, _ in reversed(ordered)]
        LOGGER.debug("Built ordered series with %s records", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def all_records_newest_first(self) -> list[DatedRecord]:
        return list(self._records)

    def as_date_map(self) -> dict[date, RateRecord]:
        return {record.date: record.rates for record in self._records}

    def _record_at(self, ascending_index: int) -> RateRecord:
        return self._records[len(self._records) - 1 - ascending_index].rates

    def _lookup(self, day: date) -> RateRecord | None:
        index = bisect_left(self._ascending_dates, day)
        if index < len(self._ascending_dates) and self._ascending_dates[index] == day:
            return self._record_at(index)
        return None

    def _nearest_earlier(self, day: date, day_range_limit: int) -> RateRecord | None:
        index = bisect_left(self._ascending_dates, day) - 1
        if index < 0:
            return None
        if days_between(day, self._ascending_dates[index]) > day_range_limit:
            return None
        return self._record_at(index)

    def _nearest_later(self, day: date, day_range_limit: int) -> RateRecord | None:
        index = bisect_right(self._ascending_dates, day)
        if index >= len(self._ascending_dates):
            return None
        if days_between(self._ascending_dates[index], day) > day_range_limit:
            return None
        return self._record_at(index)


__all__ = ["OrderedRateSeries"]

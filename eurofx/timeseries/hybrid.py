"""Date-indexed time series that also remembers the ingestion order."""

from __future__ import annotations

from datetime import date

from eurofx.records import BASE_CURRENCY, DatedRecord, RateRecord
from eurofx.timeseries.base import RateTimeSeries, RecordSource, build_records
from eurofx.timeseries.unordered import UnorderedRateSeries
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)


class HybridRateSeries(RateTimeSeries):
    """An :class:`UnorderedRateSeries` plus the order records arrived in.

    Queries are answered by the underlying date index. The tuple of dates
    holds exactly one entry per indexed date, in the position where that
    date first appeared in the input.
    """

    __slots__ = ("_index", "_dates", "_newest_first")

    def __init__(self, entries: RecordSource = (), *, base_currency: str = BASE_CURRENCY) -> None:
        records = build_records(entries, base_currency=base_currency)
        self._index = UnorderedRateSeries(records)
        self._dates: tuple[date, ...] = tuple(dict.fromkeys(record.date for record in records))
        self._newest_first = all(
            earlier > later for earlier, later in zip(self._dates, self._dates[1:])
        )
        LOGGER.debug(
            "Built hybrid series with %s records (newest first: %s)",
            len(self._dates),
            self._newest_first,
        )

    def __len__(self) -> int:
        return len(self._dates)

    @property
    def ingestion_dates(self) -> tuple[date, ...]:
        return self._dates

    def records_in_ingestion_order(self) -> list[DatedRecord]:
        """Return every record in the order the input listed them."""

        date_map = self._index.as_date_map()
        return [DatedRecord(date=day, rates=date_map[day]) for day in self._dates]

    def all_records_newest_first(self) -> list[DatedRecord]:
        if self._newest_first:
            return self.records_in_ingestion_order()
        return self._index.all_records_newest_first()

    def as_date_map(self) -> dict[date, RateRecord]:
        return self._index.as_date_map()

    def _lookup(self, day: date) -> RateRecord | None:
        return self._index._lookup(day)

    def _nearest_earlier(self, day: date, day_range_limit: int) -> RateRecord | None:
        return self._index._nearest_earlier(day, day_range_limit)

    def _nearest_later(self, day: date, day_range_limit: int) -> RateRecord | None:
        return self._index._nearest_later(day, day_range_limit)


__all__ = ["HybridRateSeries"]

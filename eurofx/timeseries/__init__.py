"""Rates time series layouts sharing the :class:`RateTimeSeries` contract."""

from __future__ import annotations

from enum import Enum

from eurofx.records import BASE_CURRENCY
from eurofx.timeseries.base import DEFAULT_DAY_RANGE_LIMIT, RateTimeSeries, RecordSource
from eurofx.timeseries.hybrid import HybridRateSeries
from eurofx.timeseries.ordered import OrderedRateSeries
from eurofx.timeseries.unordered import UnorderedRateSeries

__all__ = [
    "DEFAULT_DAY_RANGE_LIMIT",
    "HybridRateSeries",
    "OrderedRateSeries",
    "RateTimeSeries",
    "SeriesLayout",
    "UnorderedRateSeries",
    "build_series",
]


class SeriesLayout(str, Enum):
    """Available in-memory layouts for a rates time series."""

    ORDERED = "ordered"
    UNORDERED = "unordered"
    HYBRID = "hybrid"

    @classmethod
    def resolve(cls, value: "SeriesLayout | str") -> "SeriesLayout":
        """Normalise user input (enum member or case-insensitive name)."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise ValueError(
                "layout must be one of: ordered, unordered, hybrid"
            ) from exc

    @property
    def series_class(self) -> type[RateTimeSeries]:
        return _LAYOUT_CLASSES[self]


_LAYOUT_CLASSES: dict[SeriesLayout, type[RateTimeSeries]] = {
    SeriesLayout.ORDERED: OrderedRateSeries,
    SeriesLayout.UNORDERED: UnorderedRateSeries,
    SeriesLayout.HYBRID: HybridRateSeries,
}


def build_series(
    entries: RecordSource,
    layout: SeriesLayout | str = SeriesLayout.UNORDERED,
    *,
    base_currency: str = BASE_CURRENCY,
) -> RateTimeSeries:
    """Build a time series of the requested ``layout`` from decoded entries."""

    series_class = SeriesLayout.resolve(layout).series_class
    return series_class(entries, base_currency=base_currency)

"""Public interface for the eurofx package."""

from __future__ import annotations

from enum import Enum
from importlib import metadata as importlib_metadata

from eurofx.errors import (
    ApproximationFailedError,
    DateParseError,
    DecodeError,
    EuroFxError,
    InvalidRateError,
    ProviderError,
    RateNotFoundError,
    RatesRecordNotFoundError,
    UnexpectedDataKindError,
    UnexpectedPeriodError,
)
from eurofx.ingestion.ecb_xml import parse_ecb_xml, parse_latest
from eurofx.ingestion.models import SnapshotEntry
from eurofx.providers import DataKind, FileSystemProvider, HTTPProvider, RatesProvider
from eurofx.records import BASE_CURRENCY, DatedRecord, RateRecord
from eurofx.timeseries import (
    DEFAULT_DAY_RANGE_LIMIT,
    HybridRateSeries,
    OrderedRateSeries,
    RateTimeSeries,
    SeriesLayout,
    UnorderedRateSeries,
    build_series,
)
from eurofx.utils.dates import MIN_DATE, format_date, parse_date
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "__version__",
    "ApproximationFailedError",
    "BASE_CURRENCY",
    "DEFAULT_DAY_RANGE_LIMIT",
    "DataKind",
    "DateParseError",
    "DatedRecord",
    "DecodeError",
    "EuroFx",
    "EuroFxError",
    "FileSystemProvider",
    "HTTPProvider",
    "HybridRateSeries",
    "InvalidRateError",
    "MIN_DATE",
    "OrderedRateSeries",
    "Period",
    "ProviderError",
    "RateNotFoundError",
    "RateRecord",
    "RateTimeSeries",
    "RatesProvider",
    "RatesRecordNotFoundError",
    "SeriesLayout",
    "SnapshotEntry",
    "UnexpectedDataKindError",
    "UnexpectedPeriodError",
    "UnorderedRateSeries",
    "build_series",
    "format_date",
    "parse_date",
    "parse_ecb_xml",
]

try:
    __version__ = importlib_metadata.version("eurofx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class Period(str, Enum):
    """Time windows of historical rates published by the ECB."""

    WHOLE = "whole"
    LAST_90_DAYS = "last_90_days"

    @classmethod
    def resolve(cls, value: "Period | str") -> "Period":
        """Return the matching member or raise :class:`UnexpectedPeriodError`."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnexpectedPeriodError(value)

    def data_kind(self) -> DataKind:
        """Return the provider document holding this period."""

        if self is Period.WHOLE:
            return DataKind.TIME_SERIES
        if self is Period.LAST_90_DAYS:
            return DataKind.TIME_SERIES_LAST_90_DAYS
        raise UnexpectedPeriodError(self)  # pragma: no cover - exhaustive


class EuroFx:
    """Package facade wiring a provider, the XML decoder and the time series.

    The provider is an explicit dependency: every instance owns its own and
    nothing is shared process-wide. When omitted an :class:`HTTPProvider`
    pointing at the ECB website is created.
    """

    __slots__ = ("provider",)

    __version__ = __version__

    def __init__(self, provider: RatesProvider | None = None) -> None:
        self.provider: RatesProvider = provider if provider is not None else HTTPProvider()

    def fetch_latest(self) -> DatedRecord:
        """Fetch the most recent rates record."""

        raw = self.provider.get_rates_data(DataKind.LATEST)
        record = parse_latest(raw)
        LOGGER.info("Fetched latest rates published on %s", format_date(record.date))
        return record

    def fetch_time_series(
        self,
        period: Period | str = Period.WHOLE,
        layout: SeriesLayout | str = SeriesLayout.UNORDERED,
    ) -> RateTimeSeries:
        """Fetch the rates records of ``period`` stored with ``layout``."""

        resolved = Period.resolve(period)
        raw = self.provider.get_rates_data(resolved.data_kind())
        series = build_series(parse_ecb_xml(raw), layout)
        LOGGER.info(
            "Fetched %s rates records (%s) as %s",
            len(series),
            resolved.value,
            type(series).__name__,
        )
        return series

    def fetch_ordered_time_series(self, period: Period | str = Period.WHOLE) -> OrderedRateSeries:
        series = self.fetch_time_series(period, SeriesLayout.ORDERED)
        assert isinstance(series, OrderedRateSeries)
        return series

    def fetch_hybrid_time_series(self, period: Period | str = Period.WHOLE) -> HybridRateSeries:
        series = self.fetch_time_series(period, SeriesLayout.HYBRID)
        assert isinstance(series, HybridRateSeries)
        return series

    def close(self) -> None:
        self.provider.close()

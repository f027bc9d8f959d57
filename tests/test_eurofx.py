from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock

import pytest

import eurofx
from eurofx import (
    DataKind,
    DecodeError,
    EuroFx,
    FileSystemProvider,
    HTTPProvider,
    HybridRateSeries,
    OrderedRateSeries,
    Period,
    ProviderError,
    RatesProvider,
    SeriesLayout,
    UnexpectedPeriodError,
    UnorderedRateSeries,
)


class BrokenProvider(RatesProvider):
    def get_rates_data(self, kind):
        raise ProviderError("broken provider")


class InvalidProvider(RatesProvider):
    def __init__(self) -> None:
        self.requested: list[DataKind] = []

    def get_rates_data(self, kind):
        self.requested.append(kind)
        return b"some invalid data"


def test_version_is_exposed() -> None:
    assert isinstance(eurofx.__version__, str)
    assert EuroFx.__version__ == eurofx.__version__


def test_default_provider_is_http() -> None:
    client = EuroFx()

    assert isinstance(client.provider, HTTPProvider)
    client.close()


def test_fetch_latest(fs_provider: FileSystemProvider) -> None:
    record = EuroFx(fs_provider).fetch_latest()

    assert record.date == date(2024, 4, 12)
    assert record.rates == {"USD": 1.0656, "JPY": 163.16, "GBP": 0.85405, "CHF": 0.9737, "EUR": 1.0}
    assert str(record).startswith("2024-04-12: ")


@pytest.mark.parametrize(
    "period, expected_count",
    [(Period.WHOLE, 5), ("last_90_days", 4)],
)
def test_fetch_time_series_periods(fs_provider: FileSystemProvider, period, expected_count: int) -> None:
    series = EuroFx(fs_provider).fetch_time_series(period)

    assert isinstance(series, UnorderedRateSeries)
    assert len(series) == expected_count
    assert series.rate_on("2024-04-11", "USD") == 1.0729


@pytest.mark.parametrize(
    "layout, expected",
    [
        (SeriesLayout.ORDERED, OrderedRateSeries),
        ("unordered", UnorderedRateSeries),
        ("hybrid", HybridRateSeries),
    ],
)
def test_fetch_time_series_layouts(fs_provider: FileSystemProvider, layout, expected) -> None:
    series = EuroFx(fs_provider).fetch_time_series(Period.WHOLE, layout)

    assert isinstance(series, expected)
    assert series.dates()[0] == date(2024, 4, 12)
    assert series.dates()[-1] == eurofx.MIN_DATE


def test_fetch_ordered_and_hybrid_helpers(fs_provider: FileSystemProvider) -> None:
    client = EuroFx(fs_provider)

    ordered = client.fetch_ordered_time_series(Period.LAST_90_DAYS)
    hybrid = client.fetch_hybrid_time_series(Period.LAST_90_DAYS)

    assert isinstance(ordered, OrderedRateSeries)
    assert isinstance(hybrid, HybridRateSeries)
    assert hybrid.ingestion_dates == tuple(ordered.dates())
    assert ordered.approximate_rate("2024-04-07", "USD", 2) == pytest.approx((1.0831 + 1.0823) / 2)


def test_fetch_time_series_from_history_fixture(fs_provider: FileSystemProvider) -> None:
    series = EuroFx(fs_provider).fetch_time_series()

    assert series.rates_on("2000-02-14") == {
        "USD": 0.9749,
        "JPY": 106.65,
        "GBP": 0.6059,
        "DEM": 1.9558,
        "EUR": 1.0,
    }
    assert series.convert("2000-02-14", 100, "DEM", "EUR") == pytest.approx(100 * 1.9558)


def test_period_resolve() -> None:
    assert Period.resolve("WHOLE") is Period.WHOLE
    assert Period.resolve(Period.LAST_90_DAYS) is Period.LAST_90_DAYS
    assert Period.WHOLE.data_kind() is DataKind.TIME_SERIES
    assert Period.LAST_90_DAYS.data_kind() is DataKind.TIME_SERIES_LAST_90_DAYS


@pytest.mark.parametrize("period", ["weekly", 100])
def test_unexpected_period(period) -> None:
    provider = MagicMock(spec=RatesProvider)

    with pytest.raises(UnexpectedPeriodError):
        EuroFx(provider).fetch_time_series(period)

    provider.get_rates_data.assert_not_called()


def test_unknown_layout_is_rejected(fs_provider: FileSystemProvider) -> None:
    with pytest.raises(ValueError, match="layout must be one of"):
        EuroFx(fs_provider).fetch_time_series(Period.WHOLE, "sorted")


def test_broken_provider_propagates() -> None:
    client = EuroFx(BrokenProvider())

    with pytest.raises(ProviderError, match="broken provider"):
        client.fetch_latest()
    with pytest.raises(ProviderError):
        client.fetch_time_series(Period.LAST_90_DAYS)


def test_invalid_provider_fails_decoding() -> None:
    provider = InvalidProvider()
    client = EuroFx(provider)

    with pytest.raises(DecodeError):
        client.fetch_latest()
    with pytest.raises(DecodeError):
        client.fetch_time_series(Period.LAST_90_DAYS)

    assert provider.requested == [DataKind.LATEST, DataKind.TIME_SERIES_LAST_90_DAYS]


def test_close_delegates_to_provider() -> None:
    provider = MagicMock(spec=RatesProvider)

    EuroFx(provider).close()

    provider.close.assert_called_once_with()

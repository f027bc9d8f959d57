from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from eurofx.providers.fs_provider import FileSystemProvider
from eurofx.timeseries import RateTimeSeries, SeriesLayout, build_series

DATA_DIR = Path(__file__).resolve().with_name("data")


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def fs_provider() -> FileSystemProvider:
    return FileSystemProvider.from_directory(DATA_DIR)


@pytest.fixture(params=list(SeriesLayout), ids=lambda layout: layout.value)
def layout(request: pytest.FixtureRequest) -> SeriesLayout:
    return request.param


@pytest.fixture
def make_series(layout: SeriesLayout) -> Callable[[Iterable], RateTimeSeries]:
    """Build a series of the parametrised layout from decoded entries."""

    def _make(entries: Iterable) -> RateTimeSeries:
        return build_series(list(entries), layout)

    return _make

"""Provider interface for raw rates documents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Mapping, TypeVar

from eurofx.errors import UnexpectedDataKindError

T = TypeVar("T")


class DataKind(str, Enum):
    """Rates documents published by the ECB."""

    LATEST = "latest"
    TIME_SERIES = "time_series"
    TIME_SERIES_LAST_90_DAYS = "time_series_last_90_days"

    @classmethod
    def resolve(cls, value: "DataKind | str") -> "DataKind":
        """Return the matching member or raise :class:`UnexpectedDataKindError`."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnexpectedDataKindError(value)


class RatesProvider(ABC):
    """Common interface implemented by every rates data provider."""

    @abstractmethod
    def get_rates_data(self, kind: DataKind | str) -> bytes:
        """Return the raw document for ``kind``."""

    def close(self) -> None:  # pragma: no cover - optional cleanup hook
        """Providers may override to release connections/resources."""


class KindMappedProvider(RatesProvider, Generic[T]):
    """Provider whose sources (URLs, paths, ...) are keyed by :class:`DataKind`."""

    def __init__(self, sources: Mapping[DataKind | str, T]) -> None:
        self.sources: dict[DataKind, T] = {
            DataKind.resolve(kind): source for kind, source in sources.items()
        }

    def source_for(self, kind: DataKind | str) -> T:
        resolved = DataKind.resolve(kind)
        try:
            return self.sources[resolved]
        except KeyError as exc:
            raise UnexpectedDataKindError(kind) from exc


__all__ = ["DataKind", "KindMappedProvider", "RatesProvider"]

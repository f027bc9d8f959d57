"""Exception hierarchy shared across eurofx."""

from __future__ import annotations

from datetime import date
from typing import Literal

ConversionSide = Literal["from", "to"]


class EuroFxError(Exception):
    """Base class for every error raised by eurofx."""


class RateNotFoundError(EuroFxError, LookupError):
    """Raised when a currency is absent from a rates record."""

    def __init__(self, currency: str, side: ConversionSide | None = None) -> None:
        self.currency = currency
        self.side = side
        if side is None:
            message = f"exchange rate for {currency} was not found"
        else:
            message = f"exchange rate for {currency} ({side} currency) was not found"
        super().__init__(message)


class RatesRecordNotFoundError(EuroFxError, LookupError):
    """Raised when no rates record exists on an exact date."""

    def __init__(self, day: date) -> None:
        self.day = day
        super().__init__(f"exchange rates record was not found on {day.isoformat()}")


class ApproximationFailedError(EuroFxError, LookupError):
    """Raised when no record exists within the day range around a date."""

    def __init__(self, day: date, day_range_limit: int) -> None:
        self.day = day
        self.day_range_limit = day_range_limit
        super().__init__(
            f"approximation of exchange rates on {day.isoformat()} failed within "
            f"a range of {day_range_limit} days"
        )


class InvalidRateError(EuroFxError, ValueError):
    """Raised when a conversion would use a zero or negative rate."""

    def __init__(self, currency: str, rate: float) -> None:
        self.currency = currency
        self.rate = rate
        super().__init__(f"exchange rate for {currency} must be positive, got {rate!r}")


class DateParseError(EuroFxError, ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"cannot parse {value!r} as a YYYY-MM-DD date")


class DecodeError(EuroFxError, ValueError):
    """Raised when a rates document cannot be decoded."""


class UnexpectedDataKindError(EuroFxError, ValueError):
    """Raised when a provider is asked for an unknown data kind."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"unexpected data kind: {kind!r}")


class UnexpectedPeriodError(EuroFxError, ValueError):
    """Raised when a period outside of :class:`eurofx.Period` is requested."""

    def __init__(self, period: object) -> None:
        self.period = period
        super().__init__(f"unexpected period: {period!r}")


class ProviderError(EuroFxError, RuntimeError):
    """Raised when a provider cannot return rates data."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "ApproximationFailedError",
    "ConversionSide",
    "DateParseError",
    "DecodeError",
    "EuroFxError",
    "InvalidRateError",
    "ProviderError",
    "RateNotFoundError",
    "RatesRecordNotFoundError",
    "UnexpectedDataKindError",
    "UnexpectedPeriodError",
]

"""Exchange rates of a single snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Final

from eurofx.errors import ConversionSide, InvalidRateError, RateNotFoundError

BASE_CURRENCY: Final[str] = "EUR"


class RateRecord(Mapping[str, float]):
    """Read-only mapping of currency code to its rate against the base currency.

    The base currency is always present with a rate of exactly ``1.0`` when
    the record is built through :meth:`from_pairs`.
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[str, float] | Iterable[tuple[str, float]] = ()) -> None:
        self._rates: Mapping[str, float] = MappingProxyType(
            {currency: float(rate) for currency, rate in dict(rates).items()}
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Mapping[str, float] | Iterable[tuple[str, float]],
        *,
        base_currency: str = BASE_CURRENCY,
    ) -> "RateRecord":
        """Build a record and force ``base_currency`` to a rate of ``1.0``."""

        rates = dict(pairs)
        rates[base_currency] = 1.0
        return cls(rates)

    def __getitem__(self, currency: str) -> float:
        return self._rates[currency]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"RateRecord({dict(self._rates)!r})"

    def rate(self, currency: str) -> float | None:
        """Return the rate of ``currency`` or ``None`` when it is not listed."""

        return self._rates.get(currency)

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        """Convert ``amount`` of ``from_currency`` into ``to_currency``."""

        from_rate = self._require_rate(from_currency, "from")
        to_rate = self._require_rate(to_currency, "to")
        return amount * (from_rate / to_rate)

    def convert_minor_units(self, amount: int, from_currency: str, to_currency: str) -> int:
        """Convert an integer amount of minor units (e.g. cents).

        The result is rounded with :func:`round`, i.e. half to even on the
        binary value of the product: ``0.5`` becomes ``0`` and ``1.5``
        becomes ``2``.
        """

        return round(self.convert(float(amount), from_currency, to_currency))

    def _require_rate(self, currency: str, side: ConversionSide) -> float:
        rate = self._rates.get(currency)
        if rate is None:
            raise RateNotFoundError(currency, side)
        if rate <= 0:
            raise InvalidRateError(currency, rate)
        return rate


def mean_record(earlier: RateRecord, later: RateRecord) -> RateRecord:
    """Merge two neighbouring records.

    Currencies listed in both records get the plain mean of the two rates,
    currencies listed in only one record are copied as they are.
    """

    merged: dict[str, float] = {}
    for currency, earlier_rate in earlier.items():
        later_rate = later.rate(currency)
        merged[currency] = earlier_rate if later_rate is None else (earlier_rate + later_rate) / 2
    for currency, later_rate in later.items():
        merged.setdefault(currency, later_rate)
    return RateRecord(merged)


__all__ = ["BASE_CURRENCY", "RateRecord", "mean_record"]

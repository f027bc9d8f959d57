"""Rates record value types."""

from __future__ import annotations

from eurofx.records.dated_record import DatedRecord
from eurofx.records.rate_record import BASE_CURRENCY, RateRecord, mean_record

__all__ = ["BASE_CURRENCY", "DatedRecord", "RateRecord", "mean_record"]

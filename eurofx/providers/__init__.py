"""Rates data providers."""

from __future__ import annotations

from eurofx.providers.base import DataKind, KindMappedProvider, RatesProvider
from eurofx.providers.fs_provider import FileSystemProvider
from eurofx.providers.http_provider import ECB_URLS, HTTPProvider

__all__ = [
    "DataKind",
    "ECB_URLS",
    "FileSystemProvider",
    "HTTPProvider",
    "KindMappedProvider",
    "RatesProvider",
]

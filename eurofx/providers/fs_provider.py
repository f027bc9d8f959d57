"""Provider reading rates documents from local files."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from eurofx.errors import ProviderError
from eurofx.providers.base import DataKind, KindMappedProvider
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_FILENAMES: dict[DataKind, str] = {
    DataKind.LATEST: "eurofxref-daily.xml",
    DataKind.TIME_SERIES: "eurofxref-hist.xml",
    DataKind.TIME_SERIES_LAST_90_DAYS: "eurofxref-hist-90d.xml",
}


class FileSystemProvider(KindMappedProvider[Path]):
    """Read previously downloaded ECB documents from disk."""

    def __init__(self, paths: Mapping[DataKind | str, str | Path]) -> None:
        super().__init__({kind: Path(path).expanduser() for kind, path in paths.items()})

    @classmethod
    def from_directory(cls, directory: str | Path) -> "FileSystemProvider":
        """Use the ECB file names (``eurofxref-daily.xml`` ...) inside ``directory``."""

        base = Path(directory)
        return cls({kind: base / filename for kind, filename in DEFAULT_FILENAMES.items()})

    def get_rates_data(self, kind: DataKind | str) -> bytes:
        path = self.source_for(kind)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ProviderError(f"Unable to read rates data from {path}: {exc}") from exc
        LOGGER.info("Read %s bytes of rates data from %s", len(data), path)
        return data


__all__ = ["DEFAULT_FILENAMES", "FileSystemProvider"]

"""Provider downloading rates documents over HTTP."""

from __future__ import annotations

from typing import Final, Mapping

import requests
from tenacity import RetryCallState, Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from eurofx.errors import ProviderError
from eurofx.providers.base import DataKind, KindMappedProvider
from eurofx.utils.logger import get_logger

LOGGER = get_logger(__name__)

ECB_URLS: Final[dict[DataKind, str]] = {
    DataKind.LATEST: "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml",
    DataKind.TIME_SERIES: "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-hist.xml",
    DataKind.TIME_SERIES_LAST_90_DAYS: "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-hist-90d.xml",
}
DEFAULT_TIMEOUT: Final[float] = 30.0
DEFAULT_MAX_ATTEMPTS: Final[int] = 3
DEFAULT_BACKOFF_SECONDS: Final[float] = 1.0
USER_AGENT: Final[str] = "eurofx/1.0"


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, ProviderError):
        return exc.status_code is not None and exc.status_code >= 500
    return False


class HTTPProvider(KindMappedProvider[str]):
    """Download ECB documents with ``requests``, retrying transient failures.

    Connection errors, timeouts and 5xx responses are retried with an
    exponential backoff; any other non-200 response fails immediately.
    """

    def __init__(
        self,
        urls: Mapping[DataKind | str, str] = ECB_URLS,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff_seconds: float = DEFAULT_BACKOFF_SECONDS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        super().__init__(urls)
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", USER_AGENT)
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds

    def get_rates_data(self, kind: DataKind | str) -> bytes:
        url = self.source_for(kind)
        LOGGER.info("Downloading %s rates from %s", DataKind.resolve(kind).value, url)
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.backoff_seconds, max=30),
            retry=retry_if_exception(_is_retryable),
            before_sleep=self._log_retry,
            reraise=True,
        )
        try:
            for attempt in retrying:
                with attempt:
                    response = self.session.get(url, timeout=self.timeout)
                    self._raise_with_context(response, url)
        except requests.RequestException as exc:
            raise ProviderError(f"GET {url} failed: {exc}") from exc
        return response.content

    def close(self) -> None:
        self.session.close()

    def _log_retry(self, retry_state: RetryCallState) -> None:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        LOGGER.warning(
            "Attempt %s/%s to download rates failed: %s",
            retry_state.attempt_number,
            self.max_attempts,
            exc,
        )

    @staticmethod
    def _raise_with_context(response: requests.Response, url: str) -> None:
        status = response.status_code
        if status != 200:
            raise ProviderError(f"GET {url}: unexpected HTTP status {status}", status_code=status)

    def __enter__(self) -> "HTTPProvider":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["ECB_URLS", "HTTPProvider"]

"""HTTP client for the Chronicler API.

The client is constructed explicitly and owns its ``httpx.Client``; use it
as a context manager (or call ``close()``) so the connection pool is
released. Transient failures (connection errors, timeouts, 5xx) are retried
with exponential backoff; validation failures are raised immediately.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable, Sequence
from pathlib import Path
from types import TracebackType
from typing import Any, TypeVar

import httpx

from chronicler import __version__
from chronicler.config import Settings
from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.models import CalculationResult, ParsedLists

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChroniclerClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        timeout: float = 30.0,
        retry_attempts: int = 3,
        retry_delay: float = 1.0,
        backoff: float = 2.0,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.retry_attempts = retry_attempts
        self.retry_delay = retry_delay
        self.backoff = backoff
        self._sleep = sleep
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"User-Agent": f"chronicler-client/{__version__}", "Accept": "application/json"},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> ChroniclerClient:
        return cls(
            settings.api_url,
            timeout=settings.request_timeout_seconds,
            retry_attempts=settings.retry_attempts,
            retry_delay=settings.retry_delay_seconds,
            **kwargs,
        )

    def __enter__(self) -> ChroniclerClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # -- public API ---------------------------------------------------------

    def health(self) -> dict[str, Any]:
        data: dict[str, Any] = self._request("GET", "/api/health")
        return data

    def calculate_distance(self, list1: Sequence[int], list2: Sequence[int]) -> CalculationResult:
        data = self._request("POST", "/api/distance/calculate", json={"list1": list(list1), "list2": list(list2)})
        return CalculationResult.model_validate(data)

    def parse(self, content: str) -> ParsedLists:
        data = self._request("POST", "/api/distance/parse", json={"content": content})
        return ParsedLists(list1=data["list1"], list2=data["list2"])

    def upload_file(self, source: str | Path | bytes, filename: str | None = None) -> dict[str, Any]:
        """Upload a file (path or raw bytes) and return the parsed upload payload."""
        if isinstance(source, bytes):
            content = source
            name = filename or "upload.txt"
        else:
            path = Path(source)
            content = path.read_bytes()
            name = filename or path.name
        files = {"file": (name, content, "text/plain")}
        data: dict[str, Any] = self._request("POST", "/api/upload", files=files)
        return data

    # -- plumbing -----------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        def _send() -> Any:
            headers = {"X-Request-ID": uuid.uuid4().hex}
            try:
                response = self._http.request(method, path, headers=headers, **kwargs)
            except httpx.TimeoutException as exc:
                raise ChroniclerError(ErrorKind.TIMEOUT_ERROR, f"Request timed out: {exc}") from exc
            except httpx.TransportError as exc:
                raise ChroniclerError(ErrorKind.NETWORK_ERROR, f"Network error: {exc}") from exc
            return self._unwrap(response)

        return self._with_retry(_send)

    def _with_retry(self, fn: Callable[[], T]) -> T:
        attempt = 1
        while True:
            try:
                return fn()
            except ChroniclerError as exc:
                if not exc.retryable or attempt > self.retry_attempts:
                    raise
                delay = self.retry_delay * self.backoff ** (attempt - 1)
                logger.warning(
                    "Retrying request (attempt %d/%d) after %.2fs: %s",
                    attempt,
                    self.retry_attempts,
                    delay,
                    exc.message,
                )
                self._sleep(delay)
                attempt += 1

    @staticmethod
    def _unwrap(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_success and isinstance(body, dict) and body.get("success") is True:
            return body.get("data")

        if response.status_code >= 500:
            message = body.get("message") if isinstance(body, dict) else None
            raise ChroniclerError(
                ErrorKind.INTERNAL_ERROR,
                message or f"Server error {response.status_code}",
                {"status_code": response.status_code},
            )

        if isinstance(body, dict):
            try:
                kind = ErrorKind(body.get("code") or "")
            except ValueError:
                kind = ErrorKind.INVALID_FORMAT
            message = body.get("message") or body.get("error") or f"Request failed with {response.status_code}"
            raise ChroniclerError(kind, str(message), {"status_code": response.status_code})

        raise ChroniclerError(
            ErrorKind.INVALID_FORMAT,
            f"Unexpected response {response.status_code} from server",
            {"status_code": response.status_code},
        )

"""HTTP client with timeouts and a fixed identifying user agent."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import requests

from colomap.common.constants import USER_AGENT
from colomap.common.errors import StageError


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 20.0
    read: float = 60.0

    @classmethod
    def from_config(cls, cfg: dict) -> "TimeoutConfig":
        timeout = cfg["http"]["timeout"]
        return cls(connect=float(timeout["connect"]), read=float(timeout["read"]))


class HttpRequestError(StageError):
    error_code = "HTTP_ERROR"


class NetworkError(HttpRequestError):
    error_code = "NETWORK_ERROR"


class UnexpectedStatusError(HttpRequestError):
    error_code = "UNEXPECTED_STATUS"

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"unexpected status code while fetching URL {url}: {status_code}")
        self.url = url
        self.status_code = status_code


class HttpClient:
    def __init__(self, *, timeout: TimeoutConfig | None = None) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        out = {"User-Agent": USER_AGENT}
        if headers:
            out.update(headers)
        return out

    def get_bytes(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> bytes:
        req_timeout = timeout or self.timeout
        try:
            response = self.session.request(
                method="GET",
                url=url,
                headers=self._headers(headers),
                timeout=(req_timeout.connect, req_timeout.read),
            )
        except requests.RequestException as exc:
            raise NetworkError(f"GET {url} failed: {exc}") from exc

        try:
            if response.status_code != 200:
                raise UnexpectedStatusError(url, response.status_code)
            try:
                return response.content
            except requests.RequestException as exc:
                raise NetworkError(f"Reading body of {url} failed: {exc}") from exc
        finally:
            response.close()

from __future__ import annotations

from pathlib import Path

import pytest

from colomap.common.constants import LOCATIONS_URL, STATUS_PAGE_URL
from colomap.common.http import UnexpectedStatusError

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class FakeHttpClient:
    def __init__(self, bodies: dict[str, bytes], statuses: dict[str, int] | None = None):
        self.bodies = bodies
        self.statuses = statuses or {}
        self.calls: list[str] = []
        self.closed = False

    def get_bytes(self, url: str, **_kwargs) -> bytes:
        self.calls.append(url)
        status = self.statuses.get(url, 200)
        if status != 200:
            raise UnexpectedStatusError(url, status)
        return self.bodies[url]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fixture_bodies() -> dict[str, bytes]:
    return {
        STATUS_PAGE_URL: (FIXTURES / "status_page.html").read_bytes(),
        LOCATIONS_URL: (FIXTURES / "locations.json").read_bytes(),
    }


@pytest.fixture
def fake_http_client(fixture_bodies) -> FakeHttpClient:
    return FakeHttpClient(fixture_bodies)


@pytest.fixture
def http_client_factory() -> type[FakeHttpClient]:
    return FakeHttpClient

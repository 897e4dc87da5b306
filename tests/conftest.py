"""Pytest configuration - loads .env for integration tests, stubs HTTP for the rest."""

import json
from pathlib import Path
from typing import Any, Callable, List, Optional

import httpx
import pytest
from dotenv import load_dotenv

from ucode_sdk import Config, UcodeAPI

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

BASE_URL = "https://api.test.local"
AUTH_BASE_URL = "https://auth.test.local"
APP_ID = "P-test-app-id"
PROJECT_ID = "462baeca-37b0-4355-addc-b8ae5d26995d"


class FakeBackend:
    """Records every request and answers with the queued (or default) response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._queue: List[Callable[[httpx.Request], httpx.Response]] = []

    def reply(self, payload: Any = None, *, status: int = 200, content: Optional[bytes] = None) -> None:
        if content is None:
            content = json.dumps(payload if payload is not None else {}).encode()
        self._queue.append(lambda request: httpx.Response(status, content=content))

    def fail(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        self._queue.append(handler)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._queue:
            return self._queue.pop(0)(request)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def config() -> Config:
    return Config(
        app_id=APP_ID,
        base_url=BASE_URL,
        auth_base_url=AUTH_BASE_URL,
        project_id=PROJECT_ID,
        function_name="default-function",
    )


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(config: Config, backend: FakeBackend):
    http_client = httpx.Client(transport=httpx.MockTransport(backend))
    with UcodeAPI(config, http_client=http_client) as client:
        yield client
    http_client.close()

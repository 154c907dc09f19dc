"""Pytest fixtures for the voting web tests.

Each test gets its own VoteStore and application, so counts never leak
between tests.
"""

from typing import AsyncGenerator, Callable, Dict

import httpx
import pytest
from fastapi import FastAPI
from fastapi import Request

from voting_web.main import create_app
from voting_web.store import VoteStore


@pytest.fixture
def store() -> VoteStore:
    """Fresh vote store with all counters at zero."""
    return VoteStore()


@pytest.fixture
def app(store: VoteStore) -> FastAPI:
    """Application serving the test's store."""
    return create_app(store=store)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the application in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Helper fixture building raw Starlette requests.

    Returns a function that creates a Request whose body is delivered in a
    single ASGI message, or a disconnect when disconnect=True.
    """
    def _make(method: str = "GET", body: bytes = b"", path: str = "/", disconnect: bool = False) -> Request:
        async def receive() -> Dict:
            if disconnect:
                return {"type": "http.disconnect"}
            return {"type": "http.request", "body": body, "more_body": False}

        scope = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [(b"content-type", b"application/json")],
        }
        return Request(scope, receive)

    return _make


@pytest.fixture
def invalid_votes():
    """JSON bodies that parse but do not carry a valid option."""
    return [
        {},
        {"vote": "bogus"},
        {"vote": "option4"},
        {"vote": ""},
        {"vote": None},
        {"vote": 1},
        {"vote": True},
        {"vote": ["option1"]},
        {"choice": "option1"},
        ["option1"],
        "option1",
    ]

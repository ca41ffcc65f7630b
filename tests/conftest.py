"""
Shared fixtures for QQ Connect client tests.

HTTP traffic is served by httpx.MockTransport, so no test touches the network.
"""
import os
import sys

import httpx
import pytest

# Add the project root to Python path so qq_connect imports without install
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from qq_connect import QQProvider  # noqa: E402

# Configure pytest for async tests
pytest_plugins = ('pytest_asyncio',)

APP_ID = "101234567"
APP_KEY = "secret-app-key"
REDIRECT_URI = "https://example.com/auth/qq/callback"


@pytest.fixture
def requests_seen():
    """Requests captured by the mock transport, in order."""
    return []


@pytest.fixture
def make_provider(requests_seen):
    """
    Build a QQProvider whose HTTP calls are answered by a handler.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx exception to simulate transport failure).
    """
    def factory(handler):
        def record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return QQProvider(APP_ID, APP_KEY, REDIRECT_URI, transport=httpx.MockTransport(record))

    return factory


def respond(body, status_code: int = 200):
    """Handler returning a fixed body for every request."""
    def handler(request: httpx.Request) -> httpx.Response:
        content = body.encode() if isinstance(body, str) else body
        return httpx.Response(status_code, content=content)

    return handler


def refuse_connection(request: httpx.Request) -> httpx.Response:
    """Handler simulating a refused connection."""
    raise httpx.ConnectError("Connection refused", request=request)


def callback(payload: str) -> str:
    """Wrap a JSON payload the way graph.qq.com does."""
    return f"callback( {payload} );\n"

"""
Shared pytest fixtures for errandctl tests.

This module provides common fixtures including:
- FakeDeployment / FakeDownloader: recording collaborators with scripted results
- RecordingUI: captures rendered lines
- Director HTTP mocking through httpx.MockTransport
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from errandctl.config.provider import DirectorConfig
from errandctl.modules.api import ErrandResult


# =============================================================================
# Collaborator Fakes
# =============================================================================

class FakeDeployment:
    """
    Records run_errand calls and returns a scripted result or error.

    Usage:
        def test_something(deployment):
            deployment.returns(ErrandResult(exit_code=0))
            ...
            assert deployment.calls == [("errand-name", True)]
    """

    def __init__(self):
        self.calls: List[Tuple[str, bool]] = []
        self._result = ErrandResult(exit_code=0)
        self._error: Optional[Exception] = None

    def returns(self, result: ErrandResult, error: Optional[Exception] = None) -> "FakeDeployment":
        self._result = result
        self._error = error
        return self

    def run_errand(self, name: str, keep_alive: bool) -> ErrandResult:
        self.calls.append((name, keep_alive))
        if self._error is not None:
            raise self._error
        return self._result

    @property
    def call_count(self) -> int:
        return len(self.calls)


class FakeDownloader:
    """Records download calls; optionally raises a scripted error."""

    def __init__(self):
        self.calls: List[Tuple[str, str, str, str]] = []
        self.error: Optional[Exception] = None

    def download(self, blob_id: str, sha1: str, prefix: str, destination_dir: str) -> None:
        self.calls.append((blob_id, sha1, prefix, destination_dir))
        if self.error is not None:
            raise self.error

    @property
    def call_count(self) -> int:
        return len(self.calls)


@dataclass
class RecordingUI:
    """UI sink that keeps every line it was asked to show."""
    said: List[str] = field(default_factory=list)

    def say(self, line: str) -> None:
        self.said.append(line)


@pytest.fixture
def deployment():
    return FakeDeployment()


@pytest.fixture
def downloader():
    return FakeDownloader()


@pytest.fixture
def ui():
    return RecordingUI()


# =============================================================================
# Director HTTP Mocking Infrastructure
# =============================================================================

DIRECTOR_URL = "https://director.example.com:25555"


@pytest.fixture
def director_config():
    return DirectorConfig(
        url=DIRECTOR_URL,
        deployment="fake-deployment",
        client="admin",
        client_secret="secret",
        poll_interval=0,
    )


class DirectorMocker:
    """
    Route table for a fake director, served through httpx.MockTransport.

    Handlers are keyed by (method, path). A list of responses for the
    same route is served in order, the last one repeating.
    """

    def __init__(self):
        self._routes: Dict[Tuple[str, str], List] = {}
        self.requests: List[httpx.Request] = []

    def register(self, method: str, path: str, *responses) -> "DirectorMocker":
        self._routes[(method, path)] = list(responses)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responses = self._routes.get((request.method, request.url.path))
        if not responses:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")

        response = responses[0] if len(responses) == 1 else responses.pop(0)
        if callable(response):
            return response(request)
        # Fresh copy per request; a Response can only be sent once
        return httpx.Response(
            response.status_code, headers=response.headers, content=response.content
        )

    def client(self) -> httpx.Client:
        return httpx.Client(base_url=DIRECTOR_URL, transport=httpx.MockTransport(self.handler))

    def requests_to(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]


@pytest.fixture
def director_mocker():
    return DirectorMocker()


@pytest.fixture
def http_client(director_mocker):
    client = director_mocker.client()
    yield client
    client.close()


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "director_mock: Tests using a mocked director HTTP API"
    )
    config.addinivalue_line(
        "markers", "cli: Tests driving the click command line"
    )

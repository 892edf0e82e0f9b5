import sys
import threading
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.configuration`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.clients.portal.errors import TransportError
from modules.portal_groups.config import HarvestConfig
from modules.portal_groups.endpoints import group_listing_url, member_list_url

BASE_URL = "https://portal.example.com/portal/sharing/rest"


class FakePortalClient:
    """Thread-safe stand-in for PortalHttpClient.

    Responses are registered per URL; a registered exception is raised, and
    a registered list is consumed one entry per call (last entry repeats).
    Unregistered URLs raise a 404 TransportError.
    """

    def __init__(self):
        self._responses = {}
        self._lock = threading.Lock()
        self.calls = []
        self.closed = False

    def add(self, url, *responses):
        self._responses[url] = list(responses)

    def get_bytes(self, url, headers=None):
        with self._lock:
            self.calls.append((url, dict(headers or {})))
            responses = self._responses.get(url)
            if not responses:
                raise TransportError("Unexpected status code: 404", url=url, status_code=404)
            response = responses.pop(0) if len(responses) > 1 else responses[0]

        if isinstance(response, Exception):
            raise response
        return response

    def call_count(self, url):
        with self._lock:
            return sum(1 for called, _ in self.calls if called == url)

    def close(self):
        self.closed = True


class CollectingSink:
    """Sink recording every emitted record."""

    def __init__(self):
        self._lock = threading.Lock()
        self.records = []

    def emit(self, record):
        with self._lock:
            self.records.append(record)


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def fake_client():
    return FakePortalClient()


@pytest.fixture
def collecting_sink():
    return CollectingSink()


@pytest.fixture
def harvest_config():
    return HarvestConfig(
        base_url=BASE_URL,
        workers=4,
        listing_max_attempts=3,
        listing_retry_base_delay=0.0,
        listing_retry_max_delay=0.0,
    )


@pytest.fixture
def listing_url():
    def _url(start=0, page_size=100):
        return group_listing_url(BASE_URL, start=start, page_size=page_size)

    return _url


@pytest.fixture
def members_url():
    def _url(group_id, start=0, page_size=100):
        return member_list_url(BASE_URL, group_id, start=start, page_size=page_size)

    return _url

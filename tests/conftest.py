from __future__ import annotations

import pytest

from solardash.client import DashboardClient
from solardash.config import DEFAULT_CONFIG
from solardash.models import TimedRecord

NOW = 1_700_000_000
DAY = 86400


class FakeResponse:
    def __init__(self, body, status_code=200, url="http://dashboard.test"):
        self.body = body
        self.status_code = status_code
        self.url = url

    def json(self):
        if isinstance(self.body, Exception):
            raise self.body
        return self.body


class FakeSession:
    """Stands in for requests.Session, answering by endpoint name."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        endpoint = url.rsplit("/", 1)[-1]
        response = self.responses[endpoint]
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return dict(DEFAULT_CONFIG, base_url="http://dashboard.test/alpha")


@pytest.fixture
def make_client(config):
    """Return a helper building a client backed by a FakeSession."""

    def _make(responses):
        session = FakeSession(responses)
        return DashboardClient(config, session=session), session

    return _make


@pytest.fixture
def energy_body():
    return [
        {"time": NOW, "energy": 5},
        {"time": NOW - 8 * DAY, "energy": 3},
    ]


@pytest.fixture
def consumption_body():
    return [
        {"time": NOW - 3600, "load": 2, "solar": 3, "grid": 4},
        {"time": NOW, "load": 1.5, "solar": 0.5, "grid": 1},
    ]


def record(time, **values):
    return TimedRecord(time=time, values=values)

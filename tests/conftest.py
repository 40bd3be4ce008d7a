import httpx
import pytest

from coingecko_adapter.clients.requester import Requester, UpstreamResponse

PRICES = [[1000, 10], [2000, 20], [3000, 30]]


def job(**data):
    return {"id": "job-1", "data": data}


VALID = dict(base="Bitcoin", vs_currency="usd", start="1609459200", end="1612137600")


class FakeRequester:
    """Stands in for the outbound requester; records every dispatch."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, config, custom_error=None):
        self.calls.append((config, custom_error))
        if self.error is not None:
            raise self.error
        return self.response


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, status_code, payload):
        self.calls.append((status_code, payload))


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def ok_requester():
    return FakeRequester(UpstreamResponse(status_code=200, data={"prices": PRICES}))


@pytest.fixture
def mock_requester():
    """Build a real Requester over an httpx.MockTransport with no sleeping."""

    def build(handler, retries=3):
        return Requester(retries=retries, delay=0, timeout=1, transport=httpx.MockTransport(handler))

    return build

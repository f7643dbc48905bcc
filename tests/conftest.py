import httpx
import pytest

from core.api_client import AnalyticsApiClient

BASE_URL = "https://api.test/prod/"
API_KEY = "test-key"


@pytest.fixture
def fake_api():
    """Factory for an AnalyticsApiClient backed by httpx.MockTransport.

    Returns (client, requests) where `requests` collects every request the
    client sent.
    """

    def build(payload=None, status_code=200, body=None, error=None):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if error is not None:
                raise error
            if body is not None:
                return httpx.Response(status_code, text=body)
            return httpx.Response(status_code, json=payload if payload is not None else {})

        client = AnalyticsApiClient(BASE_URL, API_KEY, transport=httpx.MockTransport(handler))
        return client, requests

    return build

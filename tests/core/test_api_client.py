import httpx
import pytest

from core.api_client import AnalyticsApiClient, build_query_params
from core.config import Settings
from core.errors import NetworkError, UpstreamError


class TestBuildQueryParams:
    """Empty values are dropped, everything else is kept literally."""

    def test_drops_none_and_empty_string(self):
        params = build_query_params({"q": "leggings", "device": None, "source": ""})
        assert params == {"q": "leggings"}

    def test_keeps_falsy_non_empty_values(self):
        params = build_query_params({"limit": "0", "page": 0, "flag": False})
        assert params == {"limit": "0", "page": 0, "flag": False}

    def test_none_mapping(self):
        assert build_query_params(None) == {}


def test_base_url_trailing_slashes_are_stripped():
    client = AnalyticsApiClient("https://api.test/prod///", "k")
    assert client.base_url == "https://api.test/prod"


def test_from_settings():
    client = AnalyticsApiClient.from_settings(Settings(api_key="abc", base_url="https://x.test/"))
    assert client.base_url == "https://x.test"
    assert client.api_key == "abc"


@pytest.mark.asyncio
async def test_request_sends_key_and_accept_headers(fake_api):
    client, requests = fake_api({"accounts": []})

    data = await client.list_accounts()

    assert data == {"accounts": []}
    request = requests[0]
    assert request.method == "GET"
    assert request.headers["x-api-key"] == "test-key"
    assert request.headers["accept"] == "application/json"
    assert str(request.url) == "https://api.test/prod/v1/accounts"


@pytest.mark.asyncio
async def test_query_string_omits_empty_filters(fake_api):
    client, requests = fake_api({"data": []})

    await client.get_market_share("acc1_", 3, {"source": "Nike", "q": None, "device": ""})

    url = requests[0].url
    assert url.path == "/prod/v1/accounts/acc1_/projects/3/market-share"
    assert dict(url.params) == {"source": "Nike"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path",
    [
        ("get_market_overview", "/prod/v1/accounts/acc2_/projects/4/market-overview"),
        ("get_rankings", "/prod/v1/accounts/acc2_/projects/4/rankings"),
        ("get_pricing", "/prod/v1/accounts/acc2_/projects/4/pricing"),
        ("get_search_terms", "/prod/v1/accounts/acc2_/projects/4/search-terms"),
        ("get_title_analysis", "/prod/v1/accounts/acc2_/projects/4/title-analysis"),
        ("get_google_ads", "/prod/v1/accounts/acc2_/projects/4/google-ads"),
    ],
)
async def test_project_endpoints(fake_api, method, path):
    client, requests = fake_api({"data": []})
    await getattr(client, method)("acc2_", 4)
    assert requests[0].url.path == path


@pytest.mark.asyncio
async def test_account_endpoints(fake_api):
    client, requests = fake_api({})
    await client.list_projects("acc9_")
    await client.get_scraping_stats()
    assert [r.url.path for r in requests] == [
        "/prod/v1/accounts/acc9_/projects",
        "/prod/v1/account/scraping-stats",
    ]


@pytest.mark.asyncio
async def test_non_2xx_raises_upstream_error_with_body(fake_api):
    client, _ = fake_api(status_code=403, body='{"message": "Forbidden"}')

    with pytest.raises(UpstreamError) as exc_info:
        await client.list_accounts()

    assert exc_info.value.status_code == 403
    assert exc_info.value.body == '{"message": "Forbidden"}'
    assert str(exc_info.value) == 'API error 403: {"message": "Forbidden"}'


@pytest.mark.asyncio
async def test_transport_failure_raises_network_error(fake_api):
    client, _ = fake_api(error=httpx.ConnectError("connection refused"))

    with pytest.raises(NetworkError) as exc_info:
        await client.list_accounts()

    assert "connection refused" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_redirects_are_followed():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        if request.url.path == "/prod/v1/accounts":
            return httpx.Response(301, headers={"Location": "https://api.test/v2/v1/accounts"})
        return httpx.Response(200, json={"accounts": [{"account_prefix": "acc1_"}]})

    client = AnalyticsApiClient("https://api.test/prod", "k", transport=httpx.MockTransport(handler))

    data = await client.list_accounts()

    assert data == {"accounts": [{"account_prefix": "acc1_"}]}
    assert seen == ["/prod/v1/accounts", "/v2/v1/accounts"]

# =============================================================================
# core/api_client.py  —  HTTP client for the Robinhood Analytics API Gateway
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds request URLs, attaches the API key, issues ONE GET per call and
#   returns the parsed JSON untouched.  Shaping the JSON into text is the
#   handlers' job, not this module's.
#
# URL PATTERNS:
#   /v1/accounts
#   /v1/accounts/{prefix}/projects
#   /v1/accounts/{prefix}/projects/{num}/{metric}
#       metric ∈ market-share, market-overview, rankings, pricing,
#                search-terms, title-analysis, google-ads
#   /v1/account/scraping-stats
#
# FAILURE MODES:
#   non-2xx response   → UpstreamError(status_code, body)
#   transport failure  → NetworkError
#   No retries and no timeout tuning: the backend's reliability is its own.
# =============================================================================

from typing import Any, Mapping, Optional

import httpx

from core.config import Settings
from core.errors import NetworkError, UpstreamError

QueryParams = Mapping[str, Any]


def build_query_params(params: Optional[QueryParams]) -> dict[str, Any]:
    """Drop keys whose value is None or "" and keep the rest literally."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None and value != ""}


class AnalyticsApiClient:
    """Thin async wrapper around the analytics REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "AnalyticsApiClient":
        return cls(settings.base_url, settings.api_key, transport=transport)

    @property
    def headers(self) -> dict[str, str]:
        return {"x-api-key": self.api_key, "Accept": "application/json"}

    async def request(self, path: str, params: Optional[QueryParams] = None) -> Any:
        """GET base_url + path and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        query = build_query_params(params)

        try:
            async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
                response = await client.get(url, params=query, headers=self.headers)
        except httpx.TransportError as exc:
            raise NetworkError(f"Request to {path} failed: {exc}") from exc

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)
        return response.json()

    # === Account & project endpoints ===

    async def list_accounts(self) -> Any:
        return await self.request("/v1/accounts")

    async def list_projects(self, account_prefix: str) -> Any:
        return await self.request(f"/v1/accounts/{account_prefix}/projects")

    async def get_scraping_stats(self) -> Any:
        return await self.request("/v1/account/scraping-stats")

    # === Project data endpoints ===

    async def _project_metric(
        self, account_prefix: str, project_number: int, metric: str, params: Optional[QueryParams]
    ) -> Any:
        return await self.request(
            f"/v1/accounts/{account_prefix}/projects/{project_number}/{metric}", params
        )

    async def get_market_share(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "market-share", params)

    async def get_market_overview(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "market-overview", params)

    async def get_rankings(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "rankings", params)

    async def get_pricing(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "pricing", params)

    async def get_search_terms(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "search-terms", params)

    async def get_title_analysis(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "title-analysis", params)

    async def get_google_ads(self, account_prefix: str, project_number: int, params: Optional[QueryParams] = None) -> Any:
        return await self._project_metric(account_prefix, project_number, "google-ads", params)

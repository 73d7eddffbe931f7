import httpx
from typing import Dict, Any, Optional

from .config import ALPHAVANTAGE_BASE_URL, PROVIDER_TIMEOUT
from .contracts import ProviderEndpoints
from .errors import ProviderError
from .logger import bot_logger

# Keys the provider answers with instead of data when a quota is exhausted
THROTTLE_KEYS = ("Note", "Information")


class AlphaVantageClient:
    """
    An async HTTP client for the Alpha Vantage time series API.
    Features:
    - Connection pooling via a shared httpx.AsyncClient instance.
    - A hard timeout on every request.
    - Request tracing with a correlation_id.

    Failed requests are not retried; every transport or payload problem
    surfaces as ProviderError.
    """

    def __init__(
        self,
        base_url: str = ALPHAVANTAGE_BASE_URL,
        timeout: int = PROVIDER_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers)
        self.base_url = base_url

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        url: str,
        correlation_id: str,
        **kwargs,
    ) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        headers["X-Correlation-ID"] = correlation_id

        try:
            response = await self._client.request(method, url, headers=headers, **kwargs)
            response.raise_for_status()
            return response

        except httpx.TimeoutException as e:
            bot_logger.warning(
                f"Request timed out for {self.base_url}{url}: {e}, correlation_id={correlation_id}"
            )
            raise ProviderError(f"Timed out: {e}")

        except httpx.HTTPStatusError as e:
            bot_logger.error(
                f"HTTP Status Error for {self.base_url}{url}: {e.response.status_code}, correlation_id={correlation_id}"
            )
            raise ProviderError(f"HTTP {e.response.status_code}")

        except httpx.RequestError as e:
            bot_logger.warning(
                f"Request Error for {self.base_url}{url}: {e}, correlation_id={correlation_id}"
            )
            raise ProviderError(f"Request failed: {e}")

    async def fetch_series(self, params: Dict[str, str], correlation_id: str) -> Dict[str, Any]:
        """
        Runs a time series query and returns the decoded JSON body.

        Provider 'Error Message' bodies are returned as-is; the caller decides
        what a missing series means.

        Raises:
            ProviderError: on timeouts, transport errors, non-2xx statuses,
                bodies that are not a JSON object, and quota notices.
        """
        bot_logger.info(
            f"Fetching {params.get('function')} for {params.get('symbol')}, correlation_id={correlation_id}"
        )
        response = await self._request("GET", ProviderEndpoints.QUERY, correlation_id, params=params)

        try:
            data = response.json()
        except ValueError as e:
            bot_logger.error(f"Provider returned invalid JSON: {e}, correlation_id={correlation_id}")
            raise ProviderError("Invalid JSON in provider response")

        if not isinstance(data, dict):
            raise ProviderError("Provider response is not a JSON object")

        if "Meta Data" not in data:
            notice = next((data[k] for k in THROTTLE_KEYS if k in data), None)
            if notice:
                bot_logger.warning(f"Provider throttled the request: {notice}, correlation_id={correlation_id}")
                raise ProviderError(f"Throttled: {notice}")

        return data

"""HTTP client for the multi-day forecast endpoint."""

import logging

import httpx

from shoresquad.config.defaults import DEFAULT_FORECAST_URL, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class ForecastApi:
    def __init__(
        self,
        url: str = DEFAULT_FORECAST_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    async def get_forecast(self) -> httpx.Response:
        """Issue one GET to the endpoint. No retries; status is left to the caller."""
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            resp = await client.get(self.url, headers=headers)
        logger.debug("GET %s -> %d", self.url, resp.status_code)
        return resp

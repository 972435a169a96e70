"""OpenWeatherMap current-weather API client."""

import logging

import httpx

from weatherdash.config.schema import ApiConfig

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherdash/0.1.0"


class OpenWeatherClient:
    """Thin async wrapper around the /data/2.5/weather endpoint.

    Returns the raw httpx.Response so the caller can classify the status.
    Transport failures propagate as httpx.TransportError subclasses.
    """

    def __init__(
        self,
        api: ApiConfig,
        http: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api = api
        self.user_agent = user_agent
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=timeout)

    def build_params(self, location: dict[str, str]) -> dict[str, str]:
        return {
            **location,
            "appid": self.api.key,
            "units": str(self.api.units),
            "lang": self.api.language,
        }

    async def get_current(self, location: dict[str, str]) -> httpx.Response:
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        resp = await self._http.get(
            self.api.base_url, params=self.build_params(location), headers=headers
        )
        logger.debug("GET %s %s -> %d", self.api.base_url, location, resp.status_code)
        return resp

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

"""Riot Games API client."""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config import settings
from domain.entities import PlayerIdentity
from domain.enums import Endpoint, Region
from domain.interfaces import MatchId, ProviderProfile
from .errors import RiotAPIError
from .throttle import RequestThrottle

logger = logging.getLogger(__name__)

ACCEPT_CHARSET = "application/x-www-form-urlencoded; charset=UTF-8"


class RiotAPIClient:
    """Asynchronous Riot API client: one GET per call, fixed gap between calls."""

    def __init__(
        self,
        api_key: str,
        region: Region,
        profile: ProviderProfile,
        *,
        request_interval_ms: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        throttle: Optional[RequestThrottle] = None,
    ):
        self.api_key  = api_key
        self.region   = region
        self.profile  = profile
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout  = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.last_status_code: Optional[int] = None
        self._transport = transport

        if request_interval_ms is None:
            request_interval_ms = settings.REQUEST_INTERVAL_MS
        self.throttle = throttle or RequestThrottle(request_interval_ms)

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "X-Riot-Token": self.api_key,
                "Accept-Charset": ACCEPT_CHARSET,
            },
            transport=self._transport,
            http2=settings.HTTP2,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def _base_url(self, endpoint: Endpoint) -> str:
        routing = self.profile.routing_value(endpoint, self.region)
        return f"https://{routing.lower()}.api.riotgames.com"

    def build_url(self, endpoint: Endpoint, path_params: Dict[str, Any]) -> str:
        path = self.profile.url_template(endpoint)
        for name, value in path_params.items():
            path = path.replace("{" + name + "}", quote(str(value), safe=""))
        return self._base_url(endpoint) + path

    @staticmethod
    def _provider_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            status = body.get("status")
            if isinstance(status, dict) and status.get("message"):
                return str(status["message"])
        return response.reason_phrase

    async def send(
        self,
        endpoint: Endpoint,
        path_params: Dict[str, Any],
        query_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one GET and return the decoded JSON body.

        Raises RiotAPIError for any non-2xx status and for transport errors.
        The throttle gap is applied before the request, measured from the
        end of the previous one.
        """
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")

        url = self.build_url(endpoint, path_params)
        params = {k: v for k, v in (query_params or {}).items() if v is not None}

        async with self.throttle.slot():
            try:
                response = await self.session.get(url, params=params)
            except httpx.HTTPError as exc:
                logger.error(f"Network error: {exc}")
                raise RiotAPIError(None, f"Network error: {exc}", url) from exc

        self.last_status_code = response.status_code
        if 200 <= response.status_code < 300:
            return response.json()

        message = self._provider_message(response)
        if response.status_code == 401 or response.status_code == 403:
            logger.error(f"{response.status_code}: check RIOT_API_KEY ({message})")
        raise RiotAPIError(response.status_code, message, url)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_name(self, name: str) -> Dict[str, Any]:
        return await self.send(Endpoint.SUMMONER, {"summonerName": name})

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_page(
        self, player: PlayerIdentity, begin_index: int, count: int
    ) -> List[MatchId]:
        data = await self.send(
            Endpoint.MATCH_HISTORY,
            self.profile.history_path_params(player),
            self.profile.page_query(begin_index, count),
        )
        return self.profile.parse_match_ids(data)

    async def get_match_ids_window(
        self, player: PlayerIdentity, start_time: int, end_time: int
    ) -> List[MatchId]:
        data = await self.send(
            Endpoint.MATCH_HISTORY,
            self.profile.history_path_params(player),
            self.profile.window_query(start_time, end_time),
        )
        return self.profile.parse_match_ids(data)

    async def get_match_details(self, match_id: MatchId) -> Dict[str, Any]:
        return await self.send(Endpoint.MATCH_DETAILS, {"matchId": match_id})

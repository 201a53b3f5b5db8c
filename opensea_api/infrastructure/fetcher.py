"""
Infrastructure Layer: HTTP Fetcher
aiohttp transport behind every API facade.
"""
import json
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

import aiohttp
import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from opensea_api.application.ports import IFetcher
from opensea_api.domain import APIError
from opensea_api.infrastructure.config import Settings, settings

logger = structlog.get_logger()

USER_AGENT = "opensea-api-python/0.3.0"
RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


def serialize_query(query: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flattens a query mapping into (key, value) pairs.
    Lists become repeated keys, an explicit None is sent as an empty value.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (query or {}).items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            pairs.append((key, _to_param(item)))
    return pairs


def _to_param(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class Fetcher(IFetcher):
    """
    Authenticated JSON transport.
    Retries rate-limited and 5xx responses, raises APIError for the rest.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        max_retries: int = 3,
        retry_backoff: float = 0.5,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self.max_retries = max_retries
        self.retry_backoff = retry_backoff
        self._session: Optional[aiohttp.ClientSession] = None

    @classmethod
    def from_settings(cls, cfg: Optional[Settings] = None) -> "Fetcher":
        cfg = cfg or settings
        return cls(
            base_url=cfg.base_url,
            api_key=cfg.api_key.get_secret_value() if cfg.api_key else None,
            timeout=cfg.request_timeout,
            max_retries=cfg.max_retries,
            retry_backoff=cfg.retry_backoff,
        )

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            headers = {
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            }
            if self._api_key:
                headers["X-API-KEY"] = self._api_key

            self._session = aiohttp.ClientSession(
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            )
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "Fetcher":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # --- IFetcher ---

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        return await self._request("GET", path, params=serialize_query(query))

    async def post(self, path: str, body: Optional[Any] = None) -> Any:
        return await self._request("POST", path, body=body)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[List[Tuple[str, str]]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_retries + 1),
            wait=wait_retry_after(wait_exponential(multiplier=self.retry_backoff)),
            retry=retry_if_exception_type(RetryableAPIError),
            before_sleep=_log_retry(method, path),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    result = await self._send(method, path, params, body)
        except APIError as e:
            logger.error("api_error", method=method, path=path, status=e.status)
            raise
        return result

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[List[Tuple[str, str]]],
        body: Optional[Any],
    ) -> Any:
        session = await self._get_session()
        url = f"{self.base_url}{path}"
        async with session.request(method, url, params=params or None, json=body) as response:
            text = await response.text()
            if 200 <= response.status < 300:
                # Empty body is a valid "nothing created" answer
                return json.loads(text) if text.strip() else None

            if response.status in RETRYABLE_STATUSES:
                raise RetryableAPIError(
                    response.status, path, _error_body(text),
                    retry_after=_retry_after(response.headers.get("Retry-After")),
                )
            raise APIError(response.status, path, _error_body(text))


class RetryableAPIError(APIError):
    """Rate-limited or 5xx answer, carries the server's Retry-After in seconds."""

    def __init__(self, status: int, path: str, body: Any = None, retry_after: Optional[float] = None):
        super().__init__(status, path, body)
        self.retry_after = retry_after


class wait_retry_after(wait_base):
    """Waits as long as Retry-After asks, falls back to another wait strategy."""

    def __init__(self, fallback: wait_base) -> None:
        self.fallback = fallback

    def __call__(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(error, RetryableAPIError) and error.retry_after is not None:
            return error.retry_after
        return self.fallback(retry_state)


def _log_retry(method: str, path: str):
    def before_sleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception()
        logger.warning(
            "api_retry", method=method, path=path,
            status=getattr(error, "status", None),
            attempt=retry_state.attempt_number,
            delay=retry_state.next_action.sleep if retry_state.next_action else None,
        )
    return before_sleep


def _retry_after(value: Optional[str]) -> Optional[float]:
    if value and value.isdigit():
        return float(value)
    return None


def _error_body(text: str) -> Any:
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text

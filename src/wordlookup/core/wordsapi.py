"""
HTTP client for WordsAPI.
"""

import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx

BASE_URL = "https://wordsapiv1.p.rapidapi.com/words"
API_HOST = "wordsapiv1.p.rapidapi.com"

logger = logging.getLogger(__name__)


class FetchError(Exception):
    pass


@dataclass(frozen=True)
class LookupResponse:
    response_json: str
    rate_limit_remaining: int | None = None
    rate_limit_limit: int | None = None


def _header_int(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class WordsApiClient:
    def __init__(
        self,
        token: str | None,
        base_url: str = BASE_URL,
        timeout: float = 30,
        transport: httpx.BaseTransport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict:
        return {
            "X-RapidAPI-Key": self.token,
            "X-RapidAPI-Host": API_HOST,
            "Accept": "application/json",
        }

    def look_up(self, word: str) -> LookupResponse:
        if not self.token:
            raise FetchError("no API token configured (pass one or set WORD_TOKEN)")

        url = f"{self.base_url}/{quote(word, safe='')}"
        try:
            with httpx.Client(transport=self.transport, timeout=self.timeout) as client:
                r = client.get(url, headers=self._headers())
        except httpx.HTTPError as e:
            raise FetchError(f"request failed: {e}") from e

        if r.status_code == 404:
            raise FetchError(f"word not found: {word}")
        try:
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f"WordsAPI returned {r.status_code}") from e

        response = LookupResponse(
            response_json=r.text,
            rate_limit_remaining=_header_int(r.headers, "X-RateLimit-requests-Remaining"),
            rate_limit_limit=_header_int(r.headers, "X-RateLimit-requests-Limit"),
        )
        logger.info(
            "%s API requests remaining of %s.",
            response.rate_limit_remaining,
            response.rate_limit_limit,
        )
        return response

"""Trustable API client.

API docs: https://trustablelabs.com
Authentication is a static bearer token. Each call is a single round trip:
no retries, no caching.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .models import DEFAULT_PLATFORMS

logger = logging.getLogger(__name__)

TRUSTABLE_API = "https://api.trustablelabs.com/v1"

API_KEY_ENV = "TRUSTABLE_API_KEY"
API_URL_ENV = "TRUSTABLE_API_URL"

# Left unescaped in brand path segments, as encodeURIComponent does
BRAND_SAFE_CHARS = "!'()*"


class TrustableError(Exception):
    """Raised when the Trustable API answers with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class TrustableClient:
    """Client for the Trustable AI visibility API.

    The Trustable Score measures AI visibility across four weighted dimensions:
    citation frequency (30%), citation quality (25%), query coverage (25%)
    and cross-platform presence (20%).

    The client only holds configuration; every call opens its own HTTP
    connection, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ValueError("A Trustable API key is required. Get one at https://trustablelabs.com")
        self.api_key = api_key
        self.base_url = base_url or TRUSTABLE_API
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_env(cls, base_url: Optional[str] = None, **kwargs: Any) -> "TrustableClient":
        """Build a client from TRUSTABLE_API_KEY and, optionally, TRUSTABLE_API_URL."""
        api_key = os.environ.get(API_KEY_ENV, "")
        if not api_key:
            raise ValueError(f"{API_KEY_ENV} environment variable is required. Get a key at https://trustablelabs.com")
        return cls(api_key, base_url=base_url or os.environ.get(API_URL_ENV) or None, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self._headers(),
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
            follow_redirects=True,
        )

    async def get_score(self, brand: str) -> dict:
        """Get the Trustable Score for a brand.

        Returns the API's score result: ``brand``, ``trustableScore``,
        ``rating``, ``breakdown`` and ``analyzedAt``.

        Raises:
            TrustableError: if the API responds with a non-success status.
        """
        url = f"{self.base_url}/score/{quote(brand, safe=BRAND_SAFE_CHARS)}"
        logger.debug("GET %s", url)

        async with self._http_client() as client:
            response = await client.get(url)

        if not response.is_success:
            logger.warning("Trustable score request for %r failed: %d %s", brand, response.status_code, response.reason_phrase)
            raise TrustableError(
                f"Failed to get score: {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
        return response.json()

    async def analyze(
        self,
        query: str,
        include_competitors: Optional[bool] = True,
        platforms: Optional[list[str]] = None,
    ) -> dict:
        """Run a full AI visibility analysis for a brand name or URL.

        Args:
            query: Brand name or URL to analyze.
            include_competitors: Include competitor comparison. Default True;
                None is treated as True.
            platforms: Platforms to check, sent as given (an empty list
                included). None means chatgpt, claude, perplexity and gemini.

        Returns:
            The analysis result, including per-platform scores,
            ``recommendations`` and ``opportunities``.
        """
        payload = {
            "query": query,
            "include_competitors": True if include_competitors is None else include_competitors,
            "platforms": list(DEFAULT_PLATFORMS) if platforms is None else list(platforms),
        }
        url = f"{self.base_url}/analyze"
        logger.debug("POST %s platforms=%s", url, payload["platforms"])

        async with self._http_client() as client:
            response = await client.post(url, json=payload)

        if not response.is_success:
            logger.warning("Trustable analysis of %r failed: %d %s", query, response.status_code, response.reason_phrase)
            raise TrustableError(
                f"Analysis failed: {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
        return response.json()

    async def get_recommendations(self, brand: str) -> Optional[list]:
        """Prioritized GEO recommendations for a brand, taken from a full analysis.

        Returns None when the analysis body carries no ``recommendations``.
        """
        analysis = await self.analyze(brand)
        if not isinstance(analysis, dict):
            return None
        return analysis.get("recommendations")

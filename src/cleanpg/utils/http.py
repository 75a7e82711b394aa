"""Shared HTTP client with retries and sensible defaults."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from cleanpg.core.models import HttpConfig

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 30.0
_DEFAULT_HEADERS = {
    "User-Agent": "cleanpg/0.1 (+https://github.com/scu/cleanpg)"
}


def get_client(**kwargs) -> httpx.Client:
    """Return a configured httpx.Client."""
    return httpx.Client(
        timeout=kwargs.pop("timeout", _DEFAULT_TIMEOUT),
        headers={**_DEFAULT_HEADERS, **kwargs.pop("headers", {})},
        follow_redirects=True,
        **kwargs,
    )


def fetch_url(url: str, **kwargs) -> httpx.Response:
    """Fetch a URL with retries. Raises on failure after retries."""
    max_retries = kwargs.pop("max_retries", 2)
    last_exc: Optional[httpx.HTTPError] = None
    with get_client(**kwargs) as client:
        for attempt in range(max_retries + 1):
            try:
                resp = client.get(url)
                resp.raise_for_status()
                return resp
            except (httpx.HTTPStatusError, httpx.RequestError) as exc:
                last_exc = exc
                # Client errors won't change on a retry
                if isinstance(exc, httpx.HTTPStatusError) and exc.response.is_client_error:
                    break
                logger.warning("GET %s failed (attempt %d/%d): %s", url, attempt + 1, max_retries + 1, exc)
    raise last_exc


def read_html(url: str, config: Optional[HttpConfig] = None, **kwargs) -> bytes:
    """Fetch a page and return its raw, undecoded body."""
    config = config or HttpConfig()
    logger.info("reading data from URL=%s", url)
    resp = fetch_url(
        url,
        timeout=config.timeout,
        max_retries=config.max_retries,
        headers={"User-Agent": config.user_agent},
        **kwargs,
    )
    logger.debug("read %d bytes from %s", len(resp.content), url)
    return resp.content

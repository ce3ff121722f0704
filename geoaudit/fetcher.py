"""
Fetch a single web page with async httpx and time the response.
"""

import logging
import time
from urllib.parse import urlparse

import httpx

from . import config

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def normalize_url(url: str) -> str:
    if not urlparse(url).scheme:
        return f"https://{url}"
    return url


async def fetch_page(url: str, transport: httpx.AsyncBaseTransport | None = None) -> dict:
    """Fetch a page. Failures are reported in the `error` key, not raised."""
    url = normalize_url(url)
    parsed = urlparse(url)

    result = {
        "url": url,
        "final_url": url,
        "status_code": None,
        "html": None,
        "load_time_ms": 0,
        "error": None,
    }

    if parsed.scheme not in ("http", "https"):
        result["error"] = f"Invalid URL scheme: {parsed.scheme}"
        return result

    headers = {**HEADERS, "User-Agent": config.USER_AGENT}
    start = time.monotonic()

    async with httpx.AsyncClient(
        headers=headers,
        follow_redirects=True,
        timeout=config.FETCH_TIMEOUT,
        transport=transport,
    ) as client:
        try:
            resp = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            result["error"] = str(e) or e.__class__.__name__
            return result

    result["load_time_ms"] = int((time.monotonic() - start) * 1000)
    result["final_url"] = str(resp.url)
    result["status_code"] = resp.status_code

    if not resp.is_success:
        logger.warning("Fetch for %s returned HTTP %s", url, resp.status_code)
        result["error"] = f"HTTP {resp.status_code}: {resp.reason_phrase}"
        return result

    result["html"] = resp.text
    return result

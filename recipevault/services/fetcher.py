import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from ..errors import InvalidURL, ServerError, InvalidResponse
from ..settings import settings

logger = logging.getLogger("recipevault.fetch")


def validate_url(url: str) -> str:
    """Return the trimmed URL, or raise InvalidURL unless it is absolute http(s)."""
    candidate = (url or "").strip()
    try:
        parsed = urlparse(candidate)
    except ValueError as e:
        raise InvalidURL(f"Could not parse URL '{candidate}'") from e

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURL(f"Not an http(s) URL: '{candidate}'")
    if any(ch.isspace() for ch in parsed.netloc):
        raise InvalidURL(f"Whitespace in host: '{candidate}'")

    # httpx is stricter than urlparse (ports, IDNA hosts)
    try:
        port = httpx.URL(candidate).port
    except (httpx.InvalidURL, ValueError) as e:
        raise InvalidURL(f"Could not parse URL '{candidate}'") from e
    if port is not None and not 0 < port <= 65535:
        raise InvalidURL(f"Port out of range: '{candidate}'")
    return candidate


def request_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.fetch_user_agent,
        "Accept": settings.fetch_accept,
    }


async def fetch_page(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """Fetch a recipe page and return its body as text. Single attempt."""
    url = validate_url(url)
    headers = request_headers()

    if client is not None:
        response = await client.get(
            url, headers=headers, timeout=settings.fetch_timeout_s, follow_redirects=True
        )
    else:
        async with httpx.AsyncClient(timeout=settings.fetch_timeout_s, follow_redirects=True) as own_client:
            response = await own_client.get(url, headers=headers)

    if not response.is_success:
        logger.warning(f"Fetch {url} returned {response.status_code}")
        raise ServerError(f"{url} returned {response.status_code}", status_code=response.status_code)

    try:
        html = response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidResponse(f"{url} body is not UTF-8 text") from e

    logger.info(f"Fetched {url} ({len(html)} chars)")
    return html

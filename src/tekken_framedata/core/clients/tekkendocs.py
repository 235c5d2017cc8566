"""TekkenDocs frame data API client.

Site: https://tekkendocs.com
No authentication required. Returns one JSON document per character with
the move records under ``framesNormal``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://tekkendocs.com/api/t8"


def get_api_base() -> str:
    return os.environ.get("TEKKENDOCS_API_BASE", DEFAULT_API_BASE).rstrip("/")


def framedata_url(character: str) -> str:
    """URL of a character's frame data document; also used as its cache key."""
    return f"{get_api_base()}/{character}/framedata"


async def fetch_framedata(
    character: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Any:
    """Fetch the raw frame data payload for one character.

    Args:
        character: Lowercase roster name (e.g., 'jin', 'devil-jin').
        transport: Optional httpx transport override.

    Returns:
        Decoded JSON body. HTTP and network errors propagate as ``httpx.HTTPError``.
    """
    url = framedata_url(character)
    logger.info("Fetching frame data for %s from %s", character, url)

    async with httpx.AsyncClient(timeout=httpx.Timeout(30.0, connect=10.0), transport=transport) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

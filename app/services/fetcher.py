import logging

import httpx
from bs4 import BeautifulSoup

from app.core.config import settings

logger = logging.getLogger(__name__)


async def fetch_document(url: str) -> BeautifulSoup:
    headers = {
        "User-Agent": settings.FETCH_USER_AGENT,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    async with httpx.AsyncClient(timeout=settings.FETCH_TIMEOUT_SECONDS, follow_redirects=True) as client:
        resp = await client.get(url, headers=headers)
        resp.raise_for_status()
    logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
    return BeautifulSoup(resp.text, "html.parser")

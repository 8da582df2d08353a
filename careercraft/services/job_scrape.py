from __future__ import annotations

import logging
import re

import httpx

from careercraft.core.config import settings
from careercraft.schemas.jobs import JobScrapeResult

logger = logging.getLogger(__name__)

TITLE_RE = re.compile(r"<title>([^<]+)</title>", re.IGNORECASE)
META_DESCRIPTION_RE = re.compile(
    r"<meta\s+name=[\"']description[\"']\s+content=[\"']([^\"']+)[\"']",
    re.IGNORECASE,
)

SCRAPE_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}


def extract_job_fields(page_html: str) -> JobScrapeResult:
    """Pull the page title and meta description out of raw HTML.

    Matching is regex based, so JS-rendered or unusually formatted pages
    simply yield no title and an empty description.
    """
    title_match = TITLE_RE.search(page_html)
    title = title_match.group(1).strip() if title_match else None
    meta_match = META_DESCRIPTION_RE.search(page_html)
    jd = meta_match.group(1) if meta_match else ""
    return JobScrapeResult(title=title, jd=jd)


async def _fetch_html(url: str, client: httpx.AsyncClient) -> str:
    response = await client.get(url)
    return response.text or ""


async def scrape_job(url: str, *, client: httpx.AsyncClient | None = None) -> JobScrapeResult:
    try:
        if client is not None:
            page_html = await _fetch_html(url, client)
        else:
            async with httpx.AsyncClient(
                timeout=settings.job_scrape_timeout_s,
                follow_redirects=True,
                headers=SCRAPE_HEADERS,
            ) as owned_client:
                page_html = await _fetch_html(url, owned_client)
    except Exception as exc:  # noqa: BLE001 - caller falls back to a pasted JD
        logger.warning("job_scrape_failed url_len=%s: %s", len(url), exc)
        return JobScrapeResult()

    return extract_job_fields(page_html)

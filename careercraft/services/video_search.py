from __future__ import annotations

import json
import logging
import re
from typing import Any, Awaitable, Callable

import httpx

from careercraft.core.config import settings
from careercraft.schemas.learning import VideoResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 6
MAX_LIMIT = 12

PIPED_SEARCH_URL = "https://piped.video/api/v1/search"
INVIDIOUS_SEARCH_URL = "https://invidious.snopyta.org/api/v1/search"

_YOUTUBE_ID_RE = re.compile(r"^.*((youtu.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*")

FALLBACK_VIDEOS = (
    VideoResult(
        id="PkZNo7MFNFg",
        title="Learn JavaScript - Full Course for Beginners",
        channel_title="freeCodeCamp.org",
        thumbnail="https://i.ytimg.com/vi/PkZNo7MFNFg/mqdefault.jpg",
        duration=12345,
    ),
    VideoResult(
        id="rfscVS0vtbw",
        title="Learn Python - Full Course for Beginners",
        channel_title="freeCodeCamp.org",
        thumbnail="https://i.ytimg.com/vi/rfscVS0vtbw/mqdefault.jpg",
        duration=14526,
    ),
    VideoResult(
        id="eIrMbAQSU34",
        title="Java Tutorial for Beginners",
        channel_title="Programming with Mosh",
        thumbnail="https://i.ytimg.com/vi/eIrMbAQSU34/mqdefault.jpg",
        duration=7513,
    ),
    VideoResult(
        id="BwuLxPH8IDs",
        title="TypeScript Course for Beginners",
        channel_title="Academind",
        thumbnail="https://i.ytimg.com/vi/BwuLxPH8IDs/mqdefault.jpg",
        duration=8421,
    ),
)


class VideoSourceError(RuntimeError):
    pass


def get_youtube_video_id(url: str) -> str:
    """Return the 11-character YouTube video id in ``url``, or ``""``."""
    match = _YOUTUBE_ID_RE.match(url or "")
    if match and len(match.group(7)) == 11:
        return match.group(7)
    return ""


def resolve_limit(raw: int | None) -> int:
    if not raw or raw < 1:
        return DEFAULT_LIMIT
    return min(raw, MAX_LIMIT)


def _thumbnail_for(video_id: str) -> str:
    return f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"


def _tutorial_query(title: str, extra: str = "") -> str:
    if "tutorial" in title.lower():
        return title
    return " ".join(part for part in (title, extra, "tutorial") if part)


async def _get_json_list(client: httpx.AsyncClient, url: str, params: dict[str, str]) -> list[Any]:
    response = await client.get(url, params=params)
    if response.status_code >= 400:
        raise VideoSourceError(f"{url} returned HTTP {response.status_code}")
    payload = response.json()
    if not isinstance(payload, list) or not payload:
        raise VideoSourceError("Invalid response format")
    return payload


async def search_piped(client: httpx.AsyncClient, title: str, limit: int, category: str) -> list[VideoResult]:
    items = await _get_json_list(
        client,
        PIPED_SEARCH_URL,
        {"q": _tutorial_query(title), "region": "US", "filter": "all"},
    )
    results: list[VideoResult] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        # Piped returns "/watch?v=<id>" in "url"; older deployments expose "id".
        video_id = item.get("id") or get_youtube_video_id(str(item.get("url") or ""))
        if item.get("type") not in {"video", "stream"} or not video_id or not item.get("title"):
            continue
        thumbnails = item.get("thumbnails") or []
        thumbnail = item.get("thumbnail") or (thumbnails[0].get("url") if thumbnails else None)
        results.append(
            VideoResult(
                id=video_id,
                title=item["title"],
                channel_title=item.get("uploader") or item.get("uploaderName"),
                thumbnail=thumbnail or _thumbnail_for(video_id),
                duration=item.get("duration"),
                view_count=item.get("views"),
            )
        )
        if len(results) >= limit:
            break
    return results


async def search_invidious(client: httpx.AsyncClient, title: str, limit: int, category: str) -> list[VideoResult]:
    items = await _get_json_list(
        client,
        INVIDIOUS_SEARCH_URL,
        {"q": _tutorial_query(title, category), "type": "video", "sort_by": "relevance"},
    )
    results: list[VideoResult] = []
    for item in items[:limit]:
        if not isinstance(item, dict) or not item.get("videoId"):
            continue
        results.append(
            VideoResult(
                id=item["videoId"],
                title=item.get("title") or "",
                channel_title=item.get("author"),
                thumbnail=_thumbnail_for(item["videoId"]),
                duration=item.get("lengthSeconds"),
            )
        )
    return results


async def fallback_videos(client: httpx.AsyncClient, title: str, limit: int, category: str) -> list[VideoResult]:
    return list(FALLBACK_VIDEOS[:limit])


VideoSource = Callable[[httpx.AsyncClient, str, int, str], Awaitable[list[VideoResult]]]

VIDEO_SOURCES: tuple[VideoSource, ...] = (search_piped, search_invidious, fallback_videos)


async def search_videos(
    title: str | None,
    *,
    limit: int | None = None,
    category: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[VideoResult]:
    query = (title or "").strip()
    if len(query) < 2:
        return []
    resolved_limit = resolve_limit(limit)
    resolved_category = category or "education"

    owned_client = None
    if client is None:
        owned_client = httpx.AsyncClient(
            timeout=settings.video_search_timeout_s,
            headers={"User-Agent": "Mozilla/5.0 (compatible; CareerCraftBot/1.0) Chrome/120.0 Safari/537.36"},
        )
        client = owned_client
    try:
        for source in VIDEO_SOURCES:
            try:
                videos = await source(client, query, resolved_limit, resolved_category)
            except Exception as exc:  # noqa: BLE001 - move on to the next source
                logger.warning("video_source_failed source=%s: %s", source.__name__, exc)
                continue
            if videos:
                logger.info(
                    json.dumps(
                        {
                            "event": "video_search",
                            "source": source.__name__,
                            "results": len(videos),
                            "query_len": len(query),
                        }
                    )
                )
                return videos
        return []
    finally:
        if owned_client is not None:
            await owned_client.aclose()

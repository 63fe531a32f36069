"""Video recommendations from the YouTube Data API."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from ..core.constants import VIDEO_RESULTS
from ..core.exceptions import VideoSearchError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class Video:
    video_id: str
    title: str
    description: str
    thumbnail_url: str = ""

    @property
    def url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.video_id}"


class YouTubeClient:
    """Searches videos for a topic string."""

    SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"

    def __init__(
        self,
        api_key_env: str = "YOUTUBE_API_KEY",
        timeout_seconds: float = 15.0,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key_env = api_key_env
        self.timeout_seconds = timeout_seconds
        self._api_key = api_key or os.environ.get(api_key_env)
        if not self._api_key:
            raise RuntimeError(
                f"Missing YouTube API key in environment variable {self.api_key_env}"
            )
        self._session = session or requests.Session()

    def search(self, topic: str, max_results: int = VIDEO_RESULTS) -> List[Video]:
        topic = topic.strip()
        if not topic:
            raise VideoSearchError("No topic provided")
        LOGGER.info("Fetching videos for topic: %s", topic)
        params = {
            "part": "snippet",
            "q": topic,
            "type": "video",
            "maxResults": max_results,
            "key": self._api_key,
        }
        try:
            response = self._session.get(self.SEARCH_URL, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            items = response.json().get("items") or []
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            if status == 403:
                raise VideoSearchError("YouTube API key is invalid or quota exceeded") from exc
            raise VideoSearchError(f"Failed to fetch videos: {exc}") from exc
        except (requests.RequestException, ValueError) as exc:
            raise VideoSearchError(f"Failed to fetch videos: {exc}") from exc

        videos = [video for video in map(self._parse_item, items) if video]
        if not videos:
            raise VideoSearchError("No videos found for this topic")
        return videos

    @staticmethod
    def _parse_item(item: Dict[str, Any]) -> Optional[Video]:
        video_id = (item.get("id") or {}).get("videoId")
        if not video_id:
            return None
        snippet = item.get("snippet") or {}
        thumbnails = snippet.get("thumbnails") or {}
        thumbnail = thumbnails.get("high") or thumbnails.get("default") or {}
        return Video(
            video_id=video_id,
            title=snippet.get("title", ""),
            description=snippet.get("description", ""),
            thumbnail_url=thumbnail.get("url", ""),
        )

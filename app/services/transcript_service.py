from typing import Any, Dict, List, Optional

from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig

from app.core.config import Settings, get_settings


def build_proxy_config(settings: Settings) -> Optional[GenericProxyConfig]:
    if not settings.PROXY_HTTP_URL and not settings.PROXY_HTTPS_URL:
        return None

    return GenericProxyConfig(
        http_url=settings.PROXY_HTTP_URL,
        https_url=settings.PROXY_HTTPS_URL,
    )


class TranscriptService:
    """
    Thin wrapper around youtube-transcript-api. Errors raised by the library
    are left to the caller.
    """
    def __init__(self, settings: Settings):
        self.languages = settings.TRANSCRIPT_LANGUAGES
        self.transcript_api = YouTubeTranscriptApi(proxy_config=build_proxy_config(settings))

    def get_transcript(self, video_id: str) -> List[Dict[str, Any]]:
        transcript = self.transcript_api.fetch(video_id, languages=self.languages)
        return transcript.to_raw_data()


def get_transcript_service():
    # YouTubeTranscriptApi is not thread-safe, one instance per request
    return TranscriptService(settings=get_settings())

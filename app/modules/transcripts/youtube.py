import re
from typing import Optional

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/v/([^&\n?#]+)"),
    re.compile(r"youtube\.com/watch\?.*v=([^&\n?#]+)"),
]

SITCOM_KEYWORDS = ["sitcom", "comedy", "show", "episode", "season", "series"]
MOVIE_KEYWORDS = ["movie", "film", "trailer", "cinema", "theater"]


def is_youtube_url(url: str) -> bool:
    lowered = (url or "").lower()
    return "youtube.com" in lowered or "youtu.be" in lowered


def extract_video_id(url: str) -> Optional[str]:
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url or "")
        if match and match.group(1):
            return match.group(1)
    return None


def detect_youtube_content_type(url: str) -> str:
    """Guess the YouTube flavour from keywords in the URL; '' for non-YouTube links"""
    if not is_youtube_url(url):
        return ""
    lowered = url.lower()
    if any(keyword in lowered for keyword in SITCOM_KEYWORDS):
        return "YouTube sitcom"
    if any(keyword in lowered for keyword in MOVIE_KEYWORDS):
        return "YouTube movie"
    return "YouTube video"

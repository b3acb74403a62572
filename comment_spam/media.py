"""Media preview helper.

Finds the most media-like URL in a block of text and turns it into an
embeddable preview. Never raises: anything it cannot handle yields None.
"""
import logging
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from .models import MediaPreview

log = logging.getLogger("comment_spam.media")

URL_RE = re.compile(r"https?://[^\s]+")
IMAGE_EXT_RE = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", flags=re.IGNORECASE)
VIDEO_EXT_RE = re.compile(r"\.(mp4|mov|avi|webm)$", flags=re.IGNORECASE)
MEDIA_HOSTS = (
    "instagram.com",
    "imgur.com",
    "unsplash.com",
    "pexels.com",
    "youtube.com",
    "youtu.be",
)
INSTAGRAM_PLACEHOLDER = "https://images.unsplash.com/photo-1611262588024-d12430b98920?w=500&h=500&fit=crop"
UNSPLASH_SIZING = "w=500&h=500&fit=crop"


def extract_media_url(text: str) -> Optional[str]:
    urls = URL_RE.findall(text or "")
    if not urls:
        return None
    for url in urls:
        if IMAGE_EXT_RE.search(url) or VIDEO_EXT_RE.search(url):
            return url
        if any(host in url for host in MEDIA_HOSTS):
            return url
    return urls[0]


def _youtube_id(parsed) -> Optional[str]:
    host = (parsed.hostname or "").lower()
    if host.endswith("youtu.be"):
        return parsed.path.lstrip("/").split("/")[0] or None
    if parsed.path.startswith(("/embed/", "/shorts/")):
        return parsed.path.split("/")[2] or None
    ids = parse_qs(parsed.query).get("v")
    return ids[0] if ids else None


def process_media_url(url: str) -> Optional[MediaPreview]:
    try:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            return None
        host = parsed.hostname.lower()
        if host.endswith(("youtube.com", "youtu.be")):
            video_id = _youtube_id(parsed)
            if video_id:
                return MediaPreview(
                    type="video", src=f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"
                )
        if host.endswith("instagram.com"):
            return MediaPreview(type="image", src=INSTAGRAM_PLACEHOLDER)
        if host.endswith("unsplash.com"):
            src = url if "?" in url else f"{url}?{UNSPLASH_SIZING}"
            return MediaPreview(type="image", src=src)
        if VIDEO_EXT_RE.search(parsed.path):
            return MediaPreview(type="video", src=url)
        return MediaPreview(type="image", src=url)
    except ValueError as e:
        log.debug("Unusable media URL %r: %s", url, e)
        return None


def extract_media(text: str) -> Optional[MediaPreview]:
    """Return a preview for the best URL in the text, or None."""
    url = extract_media_url(text)
    if url is None:
        return None
    return process_media_url(url)

"""
YouTube helpers - video id extraction and best-effort metadata lookup
"""
import logging
import re

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

# watch?v=, youtu.be/, /embed/ and /shorts/ links
YOUTUBE_ID_PATTERNS = [
    re.compile(r'(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)'),
    re.compile(r'youtube\.com/shorts/([^&\n?#]+)'),
]

FALLBACK_TITLE = 'YouTube Video'
UNTITLED = 'Untitled Video'

HEADERS = {
    'Accept': 'application/json',
}


class InvalidYouTubeUrl(ValueError):
    pass


def extract_youtube_id(url):
    """Return the video id embedded in a YouTube URL, or None"""
    if not url:
        return None
    for pattern in YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match and match.group(1):
            return match.group(1)
    return None


def require_youtube_id(url):
    youtube_id = extract_youtube_id(url)
    if not youtube_id:
        raise InvalidYouTubeUrl('Invalid YouTube URL')
    return youtube_id


def thumbnail_url(youtube_id):
    return f"https://img.youtube.com/vi/{youtube_id}/maxresdefault.jpg"


def watch_url(youtube_id):
    return f"https://www.youtube.com/watch?v={youtube_id}"


def fetch_video_metadata(youtube_id):
    """
    Look up the title through YouTube's oEmbed endpoint.
    Never raises: on any failure the generic title is used, and the
    thumbnail is always derived from the id.
    """
    metadata = {
        'title': FALLBACK_TITLE,
        'thumbnail': thumbnail_url(youtube_id),
    }
    try:
        resp = requests.get(
            settings.YOUTUBE_OEMBED_URL,
            params={'url': watch_url(youtube_id), 'format': 'json'},
            headers=HEADERS,
            timeout=settings.YOUTUBE_OEMBED_TIMEOUT,
        )
        if resp.status_code != 200:
            logger.warning(f"oEmbed lookup for {youtube_id} failed: HTTP {resp.status_code}")
            return metadata
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"oEmbed lookup for {youtube_id} failed: {e}")
        return metadata

    metadata['title'] = (data.get('title') or '').strip() or UNTITLED
    return metadata

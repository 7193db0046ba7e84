"""
Word count and reading time for post content.
"""
import math
import re
from dataclasses import dataclass

from .conf import blog_settings

TAG_RE = re.compile(r"<[^>]*>")

ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&nbsp;": " ",
}


@dataclass(frozen=True)
class PostStats:
    word_count: int
    reading_time: int
    formatted_reading_time: str


def extract_text_from_html(html):
    """Remove HTML tags and decode common entities."""
    if not html:
        return ""
    text = TAG_RE.sub("", html)
    for entity, char in ENTITIES.items():
        text = text.replace(entity, char)
    return text


def word_count(text):
    """Count words in text, ignoring HTML tags."""
    if not text:
        return 0
    return len(TAG_RE.sub(" ", text).split())


def reading_time(words, words_per_minute=None):
    """
    Return reading time in whole minutes.

    Rounds up, with a minimum of one minute for any non-empty text.
    """
    if words == 0:
        return 0
    wpm = words_per_minute or blog_settings.WORDS_PER_MINUTE
    return max(1, math.ceil(words / wpm))


def format_reading_time(minutes):
    if minutes == 1:
        return "1 min read"
    return f"{minutes} min read"


def get_post_stats(content):
    """Return word count and reading time for post content."""
    words = word_count(content)
    minutes = reading_time(words)
    return PostStats(
        word_count=words,
        reading_time=minutes,
        formatted_reading_time=format_reading_time(minutes),
    )

"""
Word counting utilities for content analysis.

Counts words in plain text or HTML, with dedicated handling for Arabic:
diacritics (tashkeel) and tatweel are stripped so they never split or
inflate words, and digit-only tokens are not counted.
"""

import math
import re
import unicodedata
from typing import Optional

from bs4 import BeautifulSoup

from config import settings
from models.enums import CONTENT_DEPTH_THRESHOLDS, ContentDepth

HTML_TAG_PATTERN = re.compile(r"<[^>]+>")

ARABIC_LETTERS = "\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF"
ARABIC_PATTERN = re.compile(f"[{ARABIC_LETTERS}]")

# Tashkeel, superscript alef, tatweel and Quranic annotation marks
ARABIC_DIACRITICS_PATTERN = re.compile("[\u064B-\u065F\u0670\u0640\u06D6-\u06ED]")

# Anything that is neither an Arabic letter, an Arabic digit nor whitespace
NON_ARABIC_PATTERN = re.compile(f"[^{ARABIC_LETTERS}\\s\u0660-\u0669\u06F0-\u06F9]")

DIGITS_ONLY_PATTERN = re.compile("^[\u0660-\u0669\u06F0-\u06F90-9]+$")

ARABIC_LANGUAGE_CODES = frozenset(["ar", "arabic"])


def strip_html(content: str) -> str:
    """
    Extract visible text from HTML.

    Script and style elements are dropped with their content and
    entities are decoded. Text without tags is returned unchanged.
    """
    if not HTML_TAG_PATTERN.search(content):
        return content

    soup = BeautifulSoup(content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()

    # Tags become separators so "<p>a</p><p>b</p>" stays two words
    return soup.get_text(" ").replace("\xa0", " ").strip()


def detect_arabic_text(text: Optional[str]) -> bool:
    """Return True if the text contains Arabic characters."""
    if not text:
        return False
    return ARABIC_PATTERN.search(text) is not None


def _count_arabic_words(text: str) -> int:
    without_diacritics = ARABIC_DIACRITICS_PATTERN.sub("", text)
    cleaned = " ".join(NON_ARABIC_PATTERN.sub(" ", without_diacritics).split())
    tokens = cleaned.split()

    words = [
        token for token in tokens
        if ARABIC_PATTERN.search(token) and not DIGITS_ONLY_PATTERN.match(token)
    ]
    if words:
        return len(words)
    if cleaned:
        # Visible text but nothing matched the strict rules
        return len(tokens)
    # No Arabic at all, e.g. English text under the default "ar" language
    return _count_standard_words(text)


def _is_separator(char: str) -> bool:
    """Whitespace, Unicode separators (Z*) and punctuation (P*)."""
    return char.isspace() or unicodedata.category(char)[0] in ("Z", "P")


def _count_standard_words(text: str) -> int:
    normalized = "".join(" " if _is_separator(char) else char for char in text)
    words = [token for token in normalized.split() if any(char.isalpha() for char in token)]
    if not words and text.strip():
        return len(text.split())
    return len(words)


def count_words(content: Optional[str], language: Optional[str] = None) -> int:
    """
    Count the words of a content body.

    Args:
        content: HTML or plain text
        language: Optional language code (e.g. "ar"). Arabic counting is also
            used whenever the text itself contains Arabic characters.

    Returns:
        Number of words (0 for empty content)

    Examples:
        >>> count_words("<p>Hello, world!</p>")
        2
        >>> count_words("")
        0
    """
    if not content:
        return 0

    text = strip_html(content)
    if not text:
        return 0

    is_arabic = (language or "").lower() in ARABIC_LANGUAGE_CODES or detect_arabic_text(text)
    if is_arabic:
        return _count_arabic_words(text)
    return _count_standard_words(text)


def calculate_reading_time(word_count: int, words_per_minute: Optional[int] = None) -> int:
    """
    Estimate reading time in whole minutes, rounded up.

    Examples:
        >>> calculate_reading_time(450, 200)
        3
    """
    wpm = words_per_minute or settings.words_per_minute
    return math.ceil(word_count / wpm)


def determine_content_depth(word_count: int) -> ContentDepth:
    """
    Classify content depth from word count.

    Mapping:
        < 500: short
        500-1499: medium
        1500+: long
    """
    if word_count < CONTENT_DEPTH_THRESHOLDS["medium_min"]:
        return ContentDepth.SHORT
    if word_count < CONTENT_DEPTH_THRESHOLDS["long_min"]:
        return ContentDepth.MEDIUM
    return ContentDepth.LONG

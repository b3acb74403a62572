"""Feature extraction for post/comment pairs.

Every function here is pure: emoji scanning over fixed code point
ranges, keyword substring matching, Jaccard similarity of token sets
and a small text complexity score.
"""
from __future__ import annotations

import re

from .config import FEATURES, SCORING
from .models import Features

EMOJI_RE = re.compile(
    "[" + "".join(f"{chr(lo)}-{chr(hi)}" for lo, hi in FEATURES.emoji_ranges) + "]"
)
PUNCT_RE = re.compile("[" + re.escape(FEATURES.punctuation) + "]")

_SPAMMY_EMOJIS = frozenset(FEATURES.spammy_emojis)


def _tokens(text: str) -> list[str]:
    return text.lower().split()


def extract_emojis(text: str) -> list[str]:
    return EMOJI_RE.findall(text or "")


def find_spammy_emojis(emojis: list[str]) -> list[str]:
    return [emoji for emoji in emojis if emoji in _SPAMMY_EMOJIS]


def find_spammy_words(text: str) -> list[str]:
    """Return every lowercase token containing a spammy keyword.

    Matching is by substring, so "cheapen" counts for "cheap".
    Duplicates are kept; callers dedupe for display.
    """
    return [
        token
        for token in _tokens(text or "")
        if any(keyword in token for keyword in FEATURES.spammy_keywords)
    ]


def jaccard_similarity(first: str, second: str) -> float:
    left = set(_tokens(first or ""))
    right = set(_tokens(second or ""))
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


def text_complexity(text: str) -> float:
    words = (text or "").split()
    if not words:
        return 0.0
    avg_word_length = sum(len(word) for word in words) / len(words)
    punctuation_count = len(PUNCT_RE.findall(text))
    score = avg_word_length * 0.3 + punctuation_count * 0.1 + len(words) * 0.05
    return min(score, SCORING.complexity_cap)


def extract_features(post: str, comment: str) -> Features:
    emojis = extract_emojis(comment)
    spammy_emojis = find_spammy_emojis(emojis)
    spammy_words = find_spammy_words(comment)
    return Features(
        comment_length=len(comment),
        emoji_count=len(emojis),
        emoji_types=tuple(emojis),
        spammy_emoji_count=len(spammy_emojis),
        spammy_emojis=tuple(spammy_emojis),
        spammy_word_count=len(spammy_words),
        spammy_words=tuple(dict.fromkeys(spammy_words)),
        similarity=jaccard_similarity(post, comment),
        text_complexity=text_complexity(comment),
    )

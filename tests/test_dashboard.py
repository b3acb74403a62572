import pytest

from comment_spam.dashboard import summarize
from comment_spam.models import Features, PredictionResult


def _result(confidence, is_spam=False, emojis=()):
    return PredictionResult(
        post="p",
        comment="c",
        is_spam=is_spam,
        confidence=confidence,
        features=Features(
            comment_length=1,
            emoji_count=len(emojis),
            emoji_types=list(emojis),
            similarity=0.0,
            text_complexity=0.0,
        ),
        timestamp="2026-01-01T00:00:00+00:00",
    )


def test_empty_summary():
    summary = summarize([])
    assert summary.total_predictions == 0
    assert summary.average_confidence == 0.0
    assert summary.top_emojis == []


def test_counts_and_average():
    summary = summarize([_result(0.9, True), _result(0.6), _result(0.3, True)])
    assert summary.total_predictions == 3
    assert summary.spam_count == 2
    assert summary.not_spam_count == 1
    assert summary.average_confidence == pytest.approx(0.6)


def test_confidence_buckets_edges():
    summary = summarize([_result(c) for c in (0.0, 0.2, 0.39, 0.8, 1.0)])
    counts = {b.range: b.count for b in summary.confidence_distribution}
    assert counts == {"0-20%": 1, "20-40%": 2, "40-60%": 0, "60-80%": 0, "80-100%": 2}


def test_top_emojis_sorted_and_limited():
    results = [
        _result(0.5, emojis=["🔥", "🔥", "👍"]),
        _result(0.5, emojis=["👍", "🔥"]),
        _result(0.5, emojis=[chr(0x1F600 + i) for i in range(12)]),
    ]
    top = summarize(results).top_emojis
    assert len(top) == 10
    assert (top[0].emoji, top[0].count) == ("🔥", 3)
    assert (top[1].emoji, top[1].count) == ("👍", 2)

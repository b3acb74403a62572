"""Summary statistics over scored results."""
from collections import Counter
from typing import Sequence

import numpy as np

from .models import ConfidenceBucket, DashboardSummary, EmojiCount, PredictionResult

CONFIDENCE_RANGES = ("0-20%", "20-40%", "40-60%", "60-80%", "80-100%")
TOP_EMOJIS = 10


def _confidence_distribution(confidences: np.ndarray) -> list[ConfidenceBucket]:
    buckets = []
    for label in CONFIDENCE_RANGES:
        low, high = (int(part.rstrip("%")) / 100 for part in label.split("-"))
        # last bucket is closed so a confidence of exactly 1.0 is counted
        upper = confidences <= high if high == 1 else confidences < high
        count = int(np.count_nonzero((confidences >= low) & upper))
        buckets.append(ConfidenceBucket(range=label, count=count))
    return buckets


def summarize(results: Sequence[PredictionResult]) -> DashboardSummary:
    """Aggregate label counts, confidence and emoji usage."""
    if not results:
        return DashboardSummary()

    confidences = np.array([r.confidence for r in results], dtype=np.float64)
    spam_count = sum(1 for r in results if r.is_spam)

    emojis = Counter()
    for r in results:
        emojis.update(r.features.emoji_types)

    return DashboardSummary(
        total_predictions=len(results),
        spam_count=spam_count,
        not_spam_count=len(results) - spam_count,
        average_confidence=float(confidences.mean()),
        top_emojis=[
            EmojiCount(emoji=e, count=c) for e, c in emojis.most_common(TOP_EMOJIS)
        ],
        confidence_distribution=_confidence_distribution(confidences),
    )

"""Global configuration module for the Comment Spam Scorer.

Defines immutable dataclass-based settings for the heuristic scorer,
the feature extractor allowlists and API request limits.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class FeatureConfig:
    """Allowlists and character classes used by the feature extractor."""

    # (start, end) inclusive code point ranges
    emoji_ranges: tuple[tuple[int, int], ...] = (
        (0x1F600, 0x1F64F),
        (0x1F300, 0x1F5FF),
        (0x1F680, 0x1F6FF),
        (0x1F1E0, 0x1F1FF),
        (0x2600, 0x26FF),
        (0x2700, 0x27BF),
    )
    spammy_emojis: tuple[str, ...] = (
        "🔥", "💰", "💸", "💎", "💵", "💲", "🎁",
        "🎉", "👉", "🔗", "💯", "🚀", "⚡", "✅",
    )
    spammy_keywords: tuple[str, ...] = (
        "free", "click", "win", "prize", "deal", "offer",
        "discount", "cheap", "buy", "promo", "visit", "follow",
        "subscribe", "link", "bio", "money", "cash", "giveaway",
        "bonus", "earn", "profit", "crypto", "bitcoin", "invest",
        "limited", "urgent", "sale", "coupon", "guaranteed", "dm",
    )
    punctuation: str = ".!?;:,"


@dataclass(frozen=True)
class ScoringConfig:
    """Constants of the keyword override and the weighted ensemble."""

    # Keyword / emoji override
    override_base: float = 0.7
    per_spammy_emoji: float = 0.1
    per_spammy_word: float = 0.08
    link_combo_bonus: float = 0.15
    link_combo: tuple[str, str] = ("👉", "🔗")
    override_cap: float = 0.98

    # Logistic regression rules
    lr_base: float = 0.5
    lr_emoji_count: int = 3
    lr_emoji_boost: float = 0.2
    lr_length: int = 200
    lr_length_boost: float = 0.15
    lr_similarity: float = 0.1
    lr_similarity_boost: float = 0.1

    # Random forest rules
    rf_base: float = 0.4
    rf_emoji_count: int = 2
    rf_emoji_boost: float = 0.3
    rf_complexity: float = 2.0
    rf_complexity_boost: float = 0.2
    rf_length: int = 100
    rf_similarity: float = 0.2
    rf_offtopic_boost: float = 0.4

    # XGBoost rules
    xgb_base: float = 0.45
    xgb_emoji_length: int = 300
    xgb_emoji_length_boost: float = 0.35
    xgb_similarity: float = 0.15
    xgb_complexity: float = 3.0
    xgb_lowvalue_boost: float = 0.25

    # Ensemble weights: logistic regression, random forest, xgboost
    weights: tuple[float, float, float] = (0.30, 0.35, 0.35)
    spam_threshold: float = 0.5

    complexity_cap: float = 10.0


@dataclass(frozen=True)
class ApiConfig:
    """Configuration for request limits and exported file names."""

    max_batch: int = 500
    max_text_len: int = 10_000
    export_filename: str = "spam_detection_results.csv"
    sample_filename: str = "sample_data.csv"


FEATURES = FeatureConfig()
SCORING = ScoringConfig()
API = ApiConfig()

# Limits the API needs
MAX_BATCH = API.max_batch
MAX_TEXT_LEN = API.max_text_len

"""Pydantic models for the Comment Spam API.

This module defines data schemas used for request validation
and structured responses in prediction endpoints.
"""
from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

class PredictionRequest(BaseModel):
    """Input schema for a single post/comment pair."""
    post: str
    comment: str

class BulkPredictionRequest(BaseModel):
    """Input schema for an ordered batch of post/comment pairs."""
    data: List[PredictionRequest]

class Features(BaseModel):
    """Features derived from a post/comment pair."""
    model_config = ConfigDict(frozen=True)

    comment_length: int
    emoji_count: int
    emoji_types: Tuple[str, ...] = ()
    spammy_emoji_count: int = 0
    spammy_emojis: Tuple[str, ...] = ()
    spammy_word_count: int = 0
    spammy_words: Tuple[str, ...] = ()
    similarity: float
    text_complexity: float

class ModelScores(BaseModel):
    """Per-rule-set scores and the combined ensemble score."""
    model_config = ConfigDict(frozen=True)

    logistic_regression: float
    random_forest: float
    xgboost: float
    ensemble: float

class PredictionResult(BaseModel):
    """Response schema for a scored post/comment pair."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    post: str
    comment: str
    is_spam: bool
    confidence: float = Field(ge=0.0, le=1.0)
    features: Features
    model_scores: Optional[ModelScores] = None
    timestamp: str

class EmojiCount(BaseModel):
    emoji: str
    count: int

class ConfidenceBucket(BaseModel):
    range: str
    count: int

class DashboardSummary(BaseModel):
    """Aggregate statistics over the session history."""
    total_predictions: int = 0
    spam_count: int = 0
    not_spam_count: int = 0
    average_confidence: float = 0.0
    top_emojis: List[EmojiCount] = Field(default_factory=list)
    confidence_distribution: List[ConfidenceBucket] = Field(default_factory=list)

class MediaRequest(BaseModel):
    text: str

class MediaPreview(BaseModel):
    type: Literal["image", "video"]
    src: str

__all__ = [
    "PredictionRequest", "BulkPredictionRequest", "Features", "ModelScores",
    "PredictionResult", "EmojiCount", "ConfidenceBucket", "DashboardSummary",
    "MediaRequest", "MediaPreview",
]

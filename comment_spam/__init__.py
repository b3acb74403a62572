"""Heuristic spam scoring for social-media comments."""

from .models import Features, ModelScores, PredictionRequest, PredictionResult
from .scorer import CommentScorer

__all__ = ["PredictionRequest", "PredictionResult", "Features", "ModelScores", "CommentScorer"]

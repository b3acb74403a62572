"""Async prediction service with simulated model latency.

Wraps the synchronous scorer behind coroutine calls that sleep like a
remote model would, and keeps the session history of results, most
recent first.
"""
import asyncio
import logging
import random
from typing import List, Optional, Sequence

from .exceptions import AppError, PredictionError
from .models import PredictionRequest, PredictionResult
from .scorer import CommentScorer
from .settings import Settings, get_settings

log = logging.getLogger("comment_spam.service")


class PredictionService:
    def __init__(
        self,
        scorer: Optional[CommentScorer] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.scorer = scorer or CommentScorer()
        self.settings = settings or get_settings()
        self._rng = rng or random.Random()
        self._history: List[PredictionResult] = []

    def _single_delay(self) -> float:
        lo = self.settings.single_delay_min_ms
        hi = self.settings.single_delay_max_ms
        return (lo + self._rng.random() * (hi - lo)) / 1000.0

    async def predict(self, req: PredictionRequest) -> PredictionResult:
        await asyncio.sleep(self._single_delay())
        try:
            result = self.scorer.predict(req)
        except AppError:
            raise
        except Exception as e:
            log.exception("Scoring failed")
            raise PredictionError(str(e)) from e
        self._history.insert(0, result)
        log.info("Prediction stored: spam=%s conf=%.3f", result.is_spam, result.confidence)
        return result

    async def predict_batch(self, requests: Sequence[PredictionRequest]) -> List[PredictionResult]:
        await asyncio.sleep(self.settings.batch_delay_ms / 1000.0)
        try:
            results = self.scorer.predict_batch(requests)
        except AppError:
            raise
        except Exception as e:
            log.exception("Batch scoring failed")
            raise PredictionError(str(e)) from e
        self._history[:0] = results
        return results

    def history(self) -> List[PredictionResult]:
        return list(self._history)

    def clear(self) -> None:
        log.info("Clearing %d stored predictions", len(self._history))
        self._history.clear()

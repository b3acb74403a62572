"""Heuristic comment scorer.

Stands in for a trained ensemble: three deterministic rule sets over the
extracted features, combined with fixed weights. Any spammy emoji or
keyword short-circuits the ensemble and labels the comment as spam.
"""
import logging
from typing import Iterable, List, Tuple

from .config import MAX_TEXT_LEN, SCORING, ScoringConfig
from .exceptions import ConfigError, InvalidInputError, NoValidDataError
from .features import extract_features
from .models import Features, ModelScores, PredictionRequest, PredictionResult
from .utils import clamp, utc_timestamp

log = logging.getLogger("comment_spam.scorer")


def validate_request(req: PredictionRequest, index: int | None = None) -> None:
    """Reject pairs with a blank post or comment, or oversized fields."""
    where = "" if index is None else f"data[{index}]."
    details = {} if index is None else {"index": index}
    for name in ("post", "comment"):
        value = getattr(req, name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidInputError(f"`{where}{name}` must be a non-empty string", details)
        if len(value) > MAX_TEXT_LEN:
            raise InvalidInputError(
                f"`{where}{name}` exceeds max length {MAX_TEXT_LEN}",
                {**details, "max_text_len": MAX_TEXT_LEN},
            )


class CommentScorer:
    def __init__(self, cfg: ScoringConfig = SCORING):
        if len(cfg.weights) != 3 or any(w < 0 for w in cfg.weights):
            raise ConfigError(
                "Ensemble weights must be three non-negative numbers",
                {"weights": list(cfg.weights)},
            )
        self.cfg = cfg

    def _override_confidence(self, features: Features) -> float:
        cfg = self.cfg
        score = (
            cfg.override_base
            + features.spammy_emoji_count * cfg.per_spammy_emoji
            + features.spammy_word_count * cfg.per_spammy_word
        )
        if all(glyph in features.emoji_types for glyph in cfg.link_combo):
            score += cfg.link_combo_bonus
        return min(score, cfg.override_cap)

    def _rule_scores(self, f: Features) -> Tuple[float, float, float]:
        cfg = self.cfg

        lr = cfg.lr_base
        if f.emoji_count > cfg.lr_emoji_count:
            lr += cfg.lr_emoji_boost
        if f.comment_length > cfg.lr_length:
            lr += cfg.lr_length_boost
        if f.similarity < cfg.lr_similarity:
            lr += cfg.lr_similarity_boost

        rf = cfg.rf_base
        if f.emoji_count > cfg.rf_emoji_count:
            rf += cfg.rf_emoji_boost
        if f.text_complexity < cfg.rf_complexity:
            rf += cfg.rf_complexity_boost
        if f.comment_length > cfg.rf_length and f.similarity < cfg.rf_similarity:
            rf += cfg.rf_offtopic_boost

        xgb = cfg.xgb_base
        if f.emoji_count * f.comment_length > cfg.xgb_emoji_length:
            xgb += cfg.xgb_emoji_length_boost
        if f.similarity < cfg.xgb_similarity and f.text_complexity < cfg.xgb_complexity:
            xgb += cfg.xgb_lowvalue_boost

        return clamp(lr), clamp(rf), clamp(xgb)

    def score(self, features: Features) -> Tuple[bool, float, ModelScores]:
        """Label a feature set, returning (is_spam, confidence, model scores)."""
        if features.spammy_emoji_count > 0 or features.spammy_word_count > 0:
            conf = self._override_confidence(features)
            return True, conf, ModelScores(
                logistic_regression=conf, random_forest=conf, xgboost=conf, ensemble=conf
            )

        lr, rf, xgb = self._rule_scores(features)
        w_lr, w_rf, w_xgb = self.cfg.weights
        ensemble = clamp(lr * w_lr + rf * w_rf + xgb * w_xgb)
        is_spam = ensemble > self.cfg.spam_threshold
        conf = ensemble if is_spam else 1.0 - ensemble
        return is_spam, conf, ModelScores(
            logistic_regression=lr, random_forest=rf, xgboost=xgb, ensemble=ensemble
        )

    def predict(self, req: PredictionRequest) -> PredictionResult:
        validate_request(req)
        return self._predict_valid(req)

    def _predict_valid(self, req: PredictionRequest) -> PredictionResult:
        features = extract_features(req.post, req.comment)
        is_spam, conf, scores = self.score(features)
        log.debug(
            "Scored comment len=%d spam=%s conf=%.3f ensemble=%.3f",
            features.comment_length, is_spam, conf, scores.ensemble,
        )
        return PredictionResult(
            post=req.post,
            comment=req.comment,
            is_spam=is_spam,
            confidence=conf,
            features=features,
            model_scores=scores,
            timestamp=utc_timestamp(),
        )

    def predict_batch(self, requests: Iterable[PredictionRequest]) -> List[PredictionResult]:
        """Score every pair independently, keeping input order.

        All items are validated first so a bad item fails the whole
        batch without partial results.
        """
        items = list(requests)
        if not items:
            raise NoValidDataError("No valid data found in batch")
        for i, req in enumerate(items):
            validate_request(req, i)
        results = [self._predict_valid(req) for req in items]
        log.info(
            "Scored batch size=%d spam=%d", len(results), sum(r.is_spam for r in results)
        )
        return results

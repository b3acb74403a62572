import os

# No simulated latency under test; must be set before settings are cached.
os.environ.setdefault("COMMENT_SPAM_SINGLE_DELAY_MIN_MS", "0")
os.environ.setdefault("COMMENT_SPAM_SINGLE_DELAY_MAX_MS", "0")
os.environ.setdefault("COMMENT_SPAM_BATCH_DELAY_MS", "0")

import pytest

from comment_spam.scorer import CommentScorer
from comment_spam.service import PredictionService
from comment_spam.settings import Settings


@pytest.fixture
def scorer():
    return CommentScorer()


@pytest.fixture
def no_delay_settings():
    return Settings(single_delay_min_ms=0, single_delay_max_ms=0, batch_delay_ms=0)


@pytest.fixture
def service(scorer, no_delay_settings):
    return PredictionService(scorer=scorer, settings=no_delay_settings)

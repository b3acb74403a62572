from .dashboard import summarize
from .data import SAMPLE_CSV, parse_csv
from .scorer import CommentScorer
from .utils import LOG

def main():
    LOG.info("Running demo scoring on the sample CSV...")
    scorer = CommentScorer()
    results = scorer.predict_batch(parse_csv(SAMPLE_CSV))
    for r in results:
        LOG.info(
            "%s (%.3f) | %s",
            "SPAM" if r.is_spam else "OK", r.confidence, r.comment,
        )
    LOG.info("Demo summary: %s", summarize(results).model_dump())

if __name__ == "__main__":
    main()

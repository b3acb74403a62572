"""CSV import and export for batch scoring.

Provides helpers to resolve the post/comment columns of an uploaded
CSV document, turn its rows into prediction requests and serialize
scored results back to CSV.
"""
import io
from typing import Iterable, List, Optional

import pandas as pd

from .exceptions import MissingColumnsError, NoValidDataError
from .models import PredictionRequest, PredictionResult

EXPORT_COLUMNS = ("post", "comment", "is_spam", "confidence", "emoji_count", "similarity")

SAMPLE_CSV = """post,comment
"Check out this amazing product!","Wow this looks great! 👍"
"New blog post is live","First! 🔥🔥🔥 Visit my profile for deals"
"Beautiful sunset today","Spam comment with multiple links and emojis 💰💰💰"
"""


def resolve_column(columns: Iterable[str], hint: str) -> Optional[str]:
    """Return the first column whose lowercased name contains the hint."""
    for c in columns:
        if hint in str(c).strip().lower():
            return c
    return None


def parse_csv(text: str) -> List[PredictionRequest]:
    """Parse a post/comment CSV document into prediction requests.

    Rows with a blank post or comment are dropped. Raises
    MissingColumnsError when either column is absent and
    NoValidDataError when no row survives filtering.
    """
    try:
        df = pd.read_csv(
            io.StringIO(text or ""),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="skip",
        )
    except pd.errors.EmptyDataError as e:
        raise MissingColumnsError('CSV must contain "post" and "comment" columns') from e
    except pd.errors.ParserError as e:
        raise MissingColumnsError(f"Could not parse CSV header: {e}") from e

    post_col = resolve_column(df.columns, "post")
    comment_col = resolve_column(df.columns, "comment")
    if post_col is None or comment_col is None:
        raise MissingColumnsError(
            'CSV must contain "post" and "comment" columns',
            {"columns": [str(c) for c in df.columns]},
        )

    pairs = pd.DataFrame({
        "post": df[post_col].fillna("").astype(str).str.strip(),
        "comment": df[comment_col].fillna("").astype(str).str.strip(),
    })
    pairs = pairs[(pairs["post"].str.len() > 0) & (pairs["comment"].str.len() > 0)]
    if pairs.empty:
        raise NoValidDataError("No valid data found in CSV file")

    return [
        PredictionRequest(post=row.post, comment=row.comment)
        for row in pairs.itertuples(index=False)
    ]


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_csv(results: Iterable[PredictionResult]) -> str:
    """Serialize results with text quoted and scores to three decimals."""
    lines = [",".join(EXPORT_COLUMNS)]
    for r in results:
        lines.append(
            f"{_quote(r.post)},{_quote(r.comment)},{str(r.is_spam).lower()},"
            f"{r.confidence:.3f},{r.features.emoji_count},{r.features.similarity:.3f}"
        )
    return "\n".join(lines)

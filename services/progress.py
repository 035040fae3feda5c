"""Summarize recent daily feedback into adherence, averages and trends."""

from typing import Iterable, Optional

import pandas as pd

from schemas.daily_schema import ProgressSummary, RatingAverages, RatingTrends

RATING_COLUMNS = ("energy_level", "digestive_health", "mood_rating")
TREND_THRESHOLD = 0.5


def _round(value) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return round(float(value), 2)


def _trend(series: pd.Series) -> str:
    """Compare the later half of a rating series against the earlier half."""
    values = series.dropna()
    if len(values) < 2:
        return "steady"
    middle = len(values) // 2
    delta = values.iloc[middle:].mean() - values.iloc[:middle].mean()
    if delta >= TREND_THRESHOLD:
        return "improving"
    if delta <= -TREND_THRESHOLD:
        return "declining"
    return "steady"


def summarize_feedback(rows: Iterable, days: int) -> ProgressSummary:
    """Build a `ProgressSummary` from `DailyFeedback` rows (oldest first)."""
    records = [
        {
            "feedback_date": row.feedback_date,
            "followed_plan": row.followed_plan,
            **{column: getattr(row, column) for column in RATING_COLUMNS},
        }
        for row in rows
    ]
    if not records:
        return ProgressSummary(
            days=days,
            entries=0,
            adherence_rate=None,
            averages=RatingAverages(),
            trends=RatingTrends(),
        )

    df = pd.DataFrame.from_records(records).sort_values("feedback_date").reset_index(drop=True)
    for column in RATING_COLUMNS:
        df[column] = pd.to_numeric(df[column], errors="coerce")

    answered = df["followed_plan"].dropna().astype(bool)
    adherence = _round(answered.mean()) if len(answered) else None

    return ProgressSummary(
        days=days,
        entries=len(df),
        adherence_rate=adherence,
        averages=RatingAverages(**{column: _round(df[column].mean()) for column in RATING_COLUMNS}),
        trends=RatingTrends(**{column: _trend(df[column]) for column in RATING_COLUMNS}),
    )

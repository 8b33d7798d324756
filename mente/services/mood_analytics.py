"""
Mood analytics.

Turns a user's flat mood log into per-day averages, weekday and month trends
and a couple of summary insights. Everything is recomputed on each call.
"""

import logging
from datetime import date as Date
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Mapping, Union

from mente.models.mood import DailyAnalytics, MoodAnalytics, MoodInsights, NoMoodData

logger = logging.getLogger(__name__)

MOOD_SCORES: Mapping[str, int] = {
    "Overwhelmed": 1,
    "Sad": 2,
    "Neutral": 3,
    "Happy": 4,
    "Ecstatic": 5,
}

NEUTRAL_SCORE = MOOD_SCORES["Neutral"]


def mood_score(mood: str) -> int:
    return MOOD_SCORES.get(mood, NEUTRAL_SCORE)


def stress_level(score: int) -> float:
    return 100 - (score / 5) * 100


def to_fixed(value: float, digits: int = 1) -> str:
    """Format like JavaScript's ``toFixed``: half-up on the exact binary value."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


def _weekday(date_str: str) -> int:
    # 0 = Sunday .. 6 = Saturday
    return (Date.fromisoformat(date_str[:10]).weekday() + 1) % 7


def _month(date_str: str) -> int:
    # 0 = January .. 11 = December
    return Date.fromisoformat(date_str[:10]).month - 1


def _reduce_buckets(buckets: Dict[int, List[float]]) -> List[float]:
    return [_mean(buckets[key]) for key in sorted(buckets)]


def compute_analytics(events: Iterable[Mapping[str, str]]) -> Union[MoodAnalytics, NoMoodData]:
    """
    Aggregate mood events into trends and insights.

    Args:
        events: ``{date, mood}`` records, in any order

    Returns:
        ``NoMoodData`` when there are no events, otherwise ``MoodAnalytics``
    """
    weekly_scores: Dict[int, List[float]] = {}
    monthly_scores: Dict[int, List[float]] = {}
    weekly_stress: Dict[int, List[float]] = {}
    daily_totals: Dict[str, List[float]] = {}
    all_scores: List[int] = []

    for event in events:
        event_date = event["date"]
        score = mood_score(event["mood"])
        stress = stress_level(score)
        weekday = _weekday(event_date)

        weekly_scores.setdefault(weekday, []).append(score)
        monthly_scores.setdefault(_month(event_date), []).append(score)
        weekly_stress.setdefault(weekday, []).append(stress)
        all_scores.append(score)

        totals = daily_totals.setdefault(event_date, [0, 0.0, 0])
        totals[0] += score
        totals[1] += stress
        totals[2] += 1

    if not all_scores:
        return NoMoodData()

    daily_analytics = []
    for event_date in sorted(daily_totals):
        total_score, total_stress, count = daily_totals[event_date]
        daily_analytics.append(DailyAnalytics(
            date=event_date,
            avg_mood=float(to_fixed(total_score / count)),
            stress_level=float(to_fixed(total_stress / count)),
        ))

    highest = daily_analytics[0]
    for day in daily_analytics[1:]:
        if day.stress_level > highest.stress_level:
            highest = day

    logger.debug(
        "Aggregated %d mood events over %d days", len(all_scores), len(daily_analytics)
    )

    return MoodAnalytics(
        daily_analytics=daily_analytics,
        weekly_mood_trend=_reduce_buckets(weekly_scores),
        monthly_mood_trend=_reduce_buckets(monthly_scores),
        weekly_stress_levels=_reduce_buckets(weekly_stress),
        insights=MoodInsights(
            avg_mood=to_fixed(_mean(all_scores)),
            highest_stress_day=highest.date,
        ),
    )

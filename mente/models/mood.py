from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MoodLogRequest(BaseModel):
    email: str = Field(..., min_length=1)
    date: date
    mood: str = Field(..., min_length=1)

    @field_validator("email", "mood")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "an@example.com", "date": "2024-01-01", "mood": "Happy"}
        }
    )


class MoodHistoryEntry(BaseModel):
    date: str
    mood: Optional[str] = None


# Analytics responses keep the camelCase keys the web client reads.
class DailyAnalytics(BaseModel):
    date: str
    avg_mood: float = Field(alias="avgMood")
    stress_level: float = Field(alias="stressLevel")

    model_config = ConfigDict(populate_by_name=True)


class MoodInsights(BaseModel):
    avg_mood: str = Field(alias="avgMood")
    highest_stress_day: str = Field(alias="highestStressDay")

    model_config = ConfigDict(populate_by_name=True)


class MoodAnalytics(BaseModel):
    has_data: Literal[True] = Field(True, alias="hasData")
    daily_analytics: List[DailyAnalytics] = Field(alias="dailyAnalytics")
    weekly_mood_trend: List[float] = Field(alias="weeklyMoodTrend")
    monthly_mood_trend: List[float] = Field(alias="monthlyMoodTrend")
    weekly_stress_levels: List[float] = Field(alias="weeklyStressLevels")
    insights: MoodInsights

    model_config = ConfigDict(populate_by_name=True)


class NoMoodData(BaseModel):
    has_data: Literal[False] = Field(False, alias="hasData")

    model_config = ConfigDict(populate_by_name=True)

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo.collection import Collection

from mente.db.database import get_mood_collection
from mente.db.mood_store import insert_mood_event, latest_mood_per_day, list_mood_events
from mente.models.mood import MoodAnalytics, MoodHistoryEntry, MoodLogRequest, NoMoodData
from mente.services.mood_analytics import compute_analytics

EMAIL_REQUIRED_MESSAGE = "Email is required"

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Mood"])


def require_email(email: Optional[str] = Query(None, description="User email")) -> str:
    if email is None or not email.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_REQUIRED_MESSAGE
        )
    return email


@router.post("/log-mood")
def log_mood(
    request: MoodLogRequest,
    collection: Collection = Depends(get_mood_collection)
):
    insert_mood_event(collection, request.email, request.date.isoformat(), request.mood)
    logger.info("Mood logged for %s on %s", request.email, request.date)
    return {"message": "Mood logged successfully"}


@router.get("/mood-history", response_model=List[MoodHistoryEntry])
def get_mood_history(
    email: str = Depends(require_email),
    collection: Collection = Depends(get_mood_collection)
):
    events = list_mood_events(collection, email)
    return latest_mood_per_day(events)


@router.get("/mood-analytics", response_model=Union[MoodAnalytics, NoMoodData])
def get_mood_analytics(
    email: str = Depends(require_email),
    collection: Collection = Depends(get_mood_collection)
):
    events = list_mood_events(collection, email)
    return compute_analytics(events)

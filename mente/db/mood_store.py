import logging
from typing import Dict, List

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from mente.db.database import StorageError

logger = logging.getLogger(__name__)


def insert_mood_event(collection: Collection, email: str, date: str, mood: str) -> None:
    try:
        collection.insert_one({"email": email, "date": date, "mood": mood})
    except PyMongoError as exc:
        logger.exception("Failed to log mood for %s", email)
        raise StorageError("Failed to write mood event") from exc


def list_mood_events(collection: Collection, email: str) -> List[Dict[str, str]]:
    """Return every mood event of the user as ``{date, mood}``, oldest first."""
    try:
        cursor = collection.find(
            {"email": email},
            {"date": 1, "mood": 1, "_id": 0}
        ).sort("date", 1)
        return [{"date": doc["date"], "mood": doc.get("mood")} for doc in cursor]
    except PyMongoError as exc:
        logger.exception("Failed to read mood events for %s", email)
        raise StorageError("Failed to read mood events") from exc


def latest_mood_per_day(events: List[Dict[str, str]]) -> List[Dict[str, str]]:
    # Later events overwrite earlier ones; dates keep their first-seen position.
    latest = {}
    for event in events:
        latest[event["date"]] = event["mood"]
    return [{"date": date, "mood": mood} for date, mood in latest.items()]

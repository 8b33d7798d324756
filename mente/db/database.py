import logging
import os
import threading

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

load_dotenv()

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "mente")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

MOOD_COLLECTION = "mood_tracking"

logger = logging.getLogger(__name__)

client = None
_client_lock = threading.Lock()


class StorageError(Exception):
    """The mood event store could not be read or written."""


def get_database() -> Database:
    global client
    if client is None:
        with _client_lock:
            # Another thread may have created it while we waited.
            if client is None:
                try:
                    client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
                except PyMongoError as exc:
                    logger.exception("Could not create MongoDB client")
                    raise StorageError("Database is not available") from exc
                logger.info("MongoDB client created for database %s", DB_NAME)
    return client[DB_NAME]


def get_mood_collection() -> Collection:
    return get_database()[MOOD_COLLECTION]

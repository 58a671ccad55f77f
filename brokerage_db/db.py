# brokerage_db/db.py
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from brokerage_db.settings import settings

mongo_client: AsyncIOMotorClient | None = None


def connect_to_mongo(
    uri: str | None = None,
    db_name: str | None = None,
) -> AsyncIOMotorDatabase:
    """
    Create the client and return a DB handle (not just the client).
    Motor connects lazily; the first awaited command surfaces connection errors.
    """
    global mongo_client
    mongo_client = AsyncIOMotorClient(
        uri or settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
    )
    return mongo_client[db_name or settings.mongodb_db]


def close_mongo_connection() -> None:
    global mongo_client
    if mongo_client:
        mongo_client.close()
        mongo_client = None

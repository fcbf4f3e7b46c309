# app/database.py
import logging

import certifi
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING

from app.core.config import settings

logger = logging.getLogger(__name__)


def _client_options(uri: str) -> dict:
    options = {"tz_aware": True}
    # SRV (Atlas) URIs use TLS; pin the certifi CA bundle
    if uri.startswith("mongodb+srv://"):
        options["tlsCAFile"] = certifi.where()
    return options


client = AsyncIOMotorClient(settings.MONGODB_URI, **_client_options(settings.MONGODB_URI))
db = client.get_default_database(settings.MONGODB_DB)

user_collection = db["users"]


async def ensure_indexes():
    """Create the indexes the user store relies on."""
    await user_collection.create_index([("email", ASCENDING)], unique=True)
    await user_collection.create_index([("created_at", DESCENDING)])
    logger.info("User indexes ensured.")


async def ping() -> bool:
    try:
        await client.admin.command("ping")
        return True
    except Exception as e:
        logger.error("MongoDB ping failed: %s", e)
        return False

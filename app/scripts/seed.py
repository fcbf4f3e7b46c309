# app/scripts/seed.py
import asyncio
import logging
import sys

from pymongo.errors import DuplicateKeyError

from app import database
from app.models import user as user_model

logger = logging.getLogger("seed")

SEED_USERS = [
    {
        "email": "admin@smartwinnr.com",
        "password": "Admin@123",
        "role": user_model.Role.ADMIN.value,
        "name": "Admin User",
    },
    {
        "email": "user@smartwinnr.com",
        "password": "User@123",
        "role": user_model.Role.USER.value,
        "name": "Regular User",
    },
]


async def seed(users=SEED_USERS) -> int:
    """Create any missing seed accounts. Returns how many were created."""
    await database.client.admin.command("ping")
    logger.info("Connected to MongoDB")
    await database.ensure_indexes()

    created = 0
    for data in users:
        if await user_model.get_user_by_email(data["email"]):
            logger.warning("User already exists: %s (skipping)", data["email"])
            continue
        try:
            user = await user_model.create_user(**data)
        except DuplicateKeyError:
            logger.warning("User already exists: %s (skipping)", data["email"])
            continue
        logger.info("Created %s: %s", user["role"], user["email"])
        created += 1
    return created


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    try:
        asyncio.run(seed())
    except Exception as e:
        logger.error("Seeding failed: %s", e)
        return 1
    finally:
        database.client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Database initialization script

Run once to create collections and indexes:
    python scripts/init_db.py

Optionally seed a first admin account:
    python scripts/init_db.py --admin-username admin --admin-email admin@example.com --admin-password secret
"""

import argparse
import asyncio
import sys
from pathlib import Path
import os
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient
import logging

from app.core.exceptions import DuplicateEntityError
from app.core.security import PasswordHasher, TokenIssuer
from app.db.indexes import create_indexes
from app.repositories.user_repository import UserRepository
from app.services.auth_service import AuthService
from app.services.email_service import EmailService
from app.core.config import settings
from utils.constants import UserType, USERS_COLLECTION
from utils.otp_utils import OTPGenerator

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


MONGODB_URL = os.getenv("MONGODB_URL")
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME")

if not MONGODB_URL or not MONGODB_DB_NAME:
    raise ValueError("MONGODB_URL and MONGODB_DB_NAME must be set in .env file")


async def seed_admin(db, username: str, email: str, password: str):
    """Register an admin user through the normal register path."""
    auth = AuthService(
        users=UserRepository(db[USERS_COLLECTION]),
        hasher=PasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        tokens=TokenIssuer(settings.SECRET_KEY, settings.TOKEN_EXPIRE_MINUTES),
        otp=OTPGenerator(settings.OTP_LENGTH),
        notifier=EmailService(settings),
    )
    try:
        user_id = await auth.register({
            "username": username,
            "email": email,
            "password": password,
            "user_type": UserType.ADMIN,
        })
        logger.info(f"Admin user created: {user_id}")
    except DuplicateEntityError:
        logger.info("Admin user already exists")


async def main(args):
    logger.info("=" * 60)
    logger.info("  Ecom Admin Database Setup")
    logger.info("=" * 60)

    logger.info(f"Connecting to MongoDB: {MONGODB_DB_NAME}")
    client = AsyncIOMotorClient(MONGODB_URL)
    db = client[MONGODB_DB_NAME]

    try:
        await client.admin.command('ping')
        logger.info("Connected successfully")

        await create_indexes(db)

        for collection_name in await db.list_collection_names():
            indexes = await db[collection_name].index_information()
            logger.info(f"  {collection_name}: {', '.join(k for k in indexes if k != '_id_')}")

        if args.admin_username:
            await seed_admin(db, args.admin_username, args.admin_email, args.admin_password)

        logger.info(f"Users: {await db[USERS_COLLECTION].count_documents({})}")
        logger.info("Database initialization complete!")

    finally:
        client.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create indexes and optionally seed an admin user")
    parser.add_argument("--admin-username")
    parser.add_argument("--admin-email")
    parser.add_argument("--admin-password")
    parsed = parser.parse_args()

    if parsed.admin_username and not (parsed.admin_email and parsed.admin_password):
        parser.error("--admin-username requires --admin-email and --admin-password")

    asyncio.run(main(parsed))

"""
app/db/indexes.py

Purpose: Database index management

- Unique identity indexes on users (scoped to non-deleted records)
- Lookup indexes for the reset-password flow
- Indexes backing admin listings of carts, orders and route roles
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from app.core.logging import get_logger
from utils.constants import (
    USERS_COLLECTION,
    CARTS_COLLECTION,
    ORDERS_COLLECTION,
    ROUTE_ROLES_COLLECTION,
)

logger = get_logger(__name__)

NOT_DELETED = {"is_deleted": False}


async def create_indexes(db: AsyncIOMotorDatabase):
    """
    Creates all necessary database indexes.
    This function is idempotent - safe to run multiple times.
    """
    try:
        users = db[USERS_COLLECTION]
        carts = db[CARTS_COLLECTION]
        orders = db[ORDERS_COLLECTION]
        route_roles = db[ROUTE_ROLES_COLLECTION]

        logger.info("Creating database indexes...")

        # ==============================================
        # USERS COLLECTION INDEXES
        # ==============================================

        # Username and email are unique among live users; a soft-deleted
        # user frees its username/email for re-registration
        await users.create_index(
            [("username", ASCENDING)],
            unique=True,
            partialFilterExpression=NOT_DELETED,
            name="username_unique",
        )
        await users.create_index(
            [("email", ASCENDING)],
            unique=True,
            partialFilterExpression=NOT_DELETED,
            name="email_unique",
        )
        logger.debug("Created unique indexes on users.username and users.email")

        await users.create_index(
            [("reset_password_link.code", ASCENDING)],
            sparse=True,
            name="reset_code_idx",
        )
        logger.debug("Created index on users.reset_password_link.code")

        # ==============================================
        # CART / ORDER / ROUTE ROLE INDEXES
        # ==============================================

        await carts.create_index([("user_id", ASCENDING)], name="cart_user_idx")

        await orders.create_index(
            [("user_id", ASCENDING), ("created_at", DESCENDING)],
            name="order_user_created_idx",
        )
        await orders.create_index("status", name="order_status_idx")

        await route_roles.create_index(
            [("route_id", ASCENDING), ("role_id", ASCENDING)],
            unique=True,
            partialFilterExpression=NOT_DELETED,
            name="route_role_unique",
        )

        logger.info("All database indexes created successfully")

        user_indexes = await users.index_information()
        logger.info(f"Index summary: Users={len(user_indexes)}")

    except Exception as e:
        logger.error(f"Failed to create indexes: {str(e)}", exc_info=True)
        raise


if __name__ == "__main__":
    """
    Run this script directly to create indexes manually.
    """
    import asyncio
    from app.db.mongo import connect_to_mongo, close_mongo_connection, get_database

    async def main():
        await connect_to_mongo()
        await create_indexes(get_database())
        await close_mongo_connection()

    asyncio.run(main())

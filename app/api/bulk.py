"""
app/api/bulk.py

Purpose: Bulk-insert endpoints for carts, orders and route roles

- POST /cart/addBulk
- POST /order/addBulk
- POST /routeRole/addBulk

Body: {"data": [ {...}, ... ]}. Every route requires a bearer token; the
caller is stamped as addedBy/updatedBy on records that do not name one.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.deps import get_current_user, get_db
from app.schemas.auth import BulkInsertRequest
from app.schemas.response import success
from app.services.bulk_insert_service import (
    bulk_insert_cart,
    bulk_insert_order,
    bulk_insert_route_role,
)
from utils.constants import (
    CARTS_COLLECTION,
    ORDERS_COLLECTION,
    ROUTE_ROLES_COLLECTION,
    MSG_BULK_INSERTED,
)

router = APIRouter()


@router.post("/cart/addBulk")
async def add_bulk_cart(
    body: BulkInsertRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    result = await bulk_insert_cart(db[CARTS_COLLECTION], body.data, str(current_user["_id"]))
    return success(data=result, message=MSG_BULK_INSERTED)


@router.post("/order/addBulk")
async def add_bulk_order(
    body: BulkInsertRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    result = await bulk_insert_order(db[ORDERS_COLLECTION], body.data, str(current_user["_id"]))
    return success(data=result, message=MSG_BULK_INSERTED)


@router.post("/routeRole/addBulk")
async def add_bulk_route_role(
    body: BulkInsertRequest,
    current_user: Dict[str, Any] = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    result = await bulk_insert_route_role(db[ROUTE_ROLES_COLLECTION], body.data, str(current_user["_id"]))
    return success(data=result, message=MSG_BULK_INSERTED)

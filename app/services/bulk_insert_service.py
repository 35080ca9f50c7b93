"""
app/services/bulk_insert_service.py

Purpose: Bulk creation of admin entities

- Shapes each raw item through its entity model (carts, orders, route roles)
- Stamps audit fields for the acting admin
- Inserts the batch in one call and reports how many were created
"""

from typing import Any, Dict, List, Type

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import MissingParametersError, ValidationError
from app.core.logging import get_logger, LogContext
from app.models.cart import Cart
from app.models.common import Bookkeeping
from app.models.order import Order
from app.models.route_role import RouteRole
from utils.time_utils import utcnow

logger = get_logger(__name__)


def build_entities(model: Type[Bookkeeping], items: List[Dict[str, Any]], actor_id: str) -> List[Dict[str, Any]]:
    """
    Validates raw items and returns Mongo documents ready to insert.

    Raises:
        ValidationError: any item fails its model; details point at the item index
    """
    now = utcnow()
    documents = []
    for index, item in enumerate(items):
        try:
            entity = model.model_validate(item)
        except PydanticValidationError as e:
            raise ValidationError(
                message=f"Invalid {model.__name__} at index {index}",
                details=e.errors(include_url=False, include_context=False, include_input=False),
            ) from e

        document = entity.to_document()
        document.setdefault("is_active", True)
        document["is_deleted"] = False
        document["created_at"] = now
        document["updated_at"] = now
        document.setdefault("added_by", actor_id)
        document.setdefault("updated_by", actor_id)
        documents.append(document)
    return documents


async def bulk_insert(
    collection: AsyncIOMotorCollection,
    model: Type[Bookkeeping],
    items: List[Dict[str, Any]],
    actor_id: str,
) -> Dict[str, int]:
    """
    Creates every item in ``items`` and returns ``{"count": n}``.
    """
    if not items:
        raise MissingParametersError("Provide at least one record in data")

    documents = build_entities(model, items, actor_id)

    with LogContext(user_id=actor_id, entity=model.__name__):
        result = await collection.insert_many(documents)
        count = len(result.inserted_ids)
        logger.info(f"Bulk inserted {count} {model.__name__} records")

    return {"count": count}


async def bulk_insert_cart(collection: AsyncIOMotorCollection, items: List[Dict[str, Any]], actor_id: str) -> Dict[str, int]:
    return await bulk_insert(collection, Cart, items, actor_id)


async def bulk_insert_order(collection: AsyncIOMotorCollection, items: List[Dict[str, Any]], actor_id: str) -> Dict[str, int]:
    return await bulk_insert(collection, Order, items, actor_id)


async def bulk_insert_route_role(collection: AsyncIOMotorCollection, items: List[Dict[str, Any]], actor_id: str) -> Dict[str, int]:
    return await bulk_insert(collection, RouteRole, items, actor_id)

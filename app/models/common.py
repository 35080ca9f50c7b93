"""
app/models/common.py

Purpose: Shared entity plumbing

- camelCase wire names mapped onto snake_case attributes
- Bookkeeping fields carried by every admin entity
- Document dumps that only contain defined fields
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EntityModel(BaseModel):
    """
    Base for every stored entity.

    Request bodies arrive in camelCase (``shippingAddress``); attributes and
    stored documents use snake_case (``shipping_address``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        use_enum_values=True,
    )

    def to_document(self) -> Dict[str, Any]:
        """Mongo document with undefined (None) fields left out."""
        return self.model_dump(exclude_none=True, mode="python")

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready camelCase dict with undefined fields left out."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class Bookkeeping(EntityModel):
    """Audit and soft-delete fields shared by users, carts, orders and route roles."""

    is_active: Optional[bool] = None
    is_deleted: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    added_by: Optional[str] = None
    updated_by: Optional[str] = None


def document_id(document: Dict[str, Any]) -> str:
    return str(document["_id"])

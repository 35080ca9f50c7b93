"""
app/models/cart.py

Purpose: Cart document model
"""

from typing import List, Optional

from pydantic import Field

from app.models.common import Bookkeeping, EntityModel


class CartItem(EntityModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)
    price: Optional[float] = Field(default=None, ge=0)


class Cart(Bookkeeping):
    user_id: str
    items: List[CartItem] = Field(default_factory=list)

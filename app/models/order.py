"""
app/models/order.py

Purpose: Order document model

- Ordered items and their prices
- Shipping address snapshot
- Order and payment status
"""

from typing import List, Optional

from pydantic import Field

from app.models.common import Bookkeeping, EntityModel
from app.models.user import ShippingAddress
from utils.constants import OrderStatus, PaymentStatus


class OrderItem(EntityModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)
    price: float = Field(ge=0)


class Order(Bookkeeping):
    user_id: str
    items: List[OrderItem] = Field(default_factory=list)
    shipping_address: Optional[ShippingAddress] = None
    total_amount: Optional[float] = Field(default=None, ge=0)
    status: OrderStatus = OrderStatus.PLACED
    payment_status: PaymentStatus = PaymentStatus.PENDING

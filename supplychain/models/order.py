import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import ApiModel, Money, PartialUpdate

class OrderStatus(str, Enum):
    pending = "pending"
    processing = "processing"
    in_transit = "in_transit"
    delivered = "delivered"
    delayed = "delayed"
    canceled = "canceled"

class OrderCreate(ApiModel):
    order_id: str = Field(min_length=1)  # display key, e.g. "#ORD-7352"
    # Not checked against existing suppliers; orders outlive their supplier.
    supplier_id: int
    date: dt.date
    time: str
    status: OrderStatus
    amount: Money
    products: str

class OrderUpdate(PartialUpdate):
    order_id: Optional[str] = Field(default=None, min_length=1)
    supplier_id: Optional[int] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    status: Optional[OrderStatus] = None
    amount: Optional[Money] = None
    products: Optional[str] = None

class Order(OrderCreate):
    id: int = Field(ge=1)

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import ApiModel, Money, PartialUpdate

class SupplierStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    review = "review"
    suspended = "suspended"

class SupplierCreate(ApiModel):
    name: str
    category: str
    status: SupplierStatus
    location: str
    contact_name: str
    contact_email: str
    contact_phone: str
    orders_this_month: int
    on_time_delivery: Money  # percent
    total_spend: Money
    product_categories: int
    logo_initials: str
    logo_color: str

class SupplierUpdate(PartialUpdate):
    name: Optional[str] = None
    category: Optional[str] = None
    status: Optional[SupplierStatus] = None
    location: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    orders_this_month: Optional[int] = None
    on_time_delivery: Optional[Money] = None
    total_spend: Optional[Money] = None
    product_categories: Optional[int] = None
    logo_initials: Optional[str] = None
    logo_color: Optional[str] = None

class Supplier(SupplierCreate):
    id: int = Field(ge=1)

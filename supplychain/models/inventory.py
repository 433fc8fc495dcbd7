import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import ApiModel, Money, PartialUpdate

class ProductCategory(str, Enum):
    electronics = "electronics"
    mechanical = "mechanical"
    raw_materials = "raw_materials"
    packaging = "packaging"
    components = "components"

class InventoryStatus(str, Enum):
    in_stock = "in_stock"
    low_stock = "low_stock"
    out_of_stock = "out_of_stock"
    discontinued = "discontinued"
    on_order = "on_order"

class InventoryItemCreate(ApiModel):
    sku: str = Field(min_length=1)
    name: str
    category: ProductCategory
    supplier: str  # supplier display name, not a reference
    quantity: int = Field(ge=0)
    unit_price: Money
    status: InventoryStatus
    last_updated: dt.date

class InventoryItemUpdate(PartialUpdate):
    sku: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None
    category: Optional[ProductCategory] = None
    supplier: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    unit_price: Optional[Money] = None
    status: Optional[InventoryStatus] = None
    last_updated: Optional[dt.date] = None

class InventoryItem(InventoryItemCreate):
    id: int = Field(ge=1)

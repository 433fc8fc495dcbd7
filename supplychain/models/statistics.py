from typing import Optional

from .base import ApiModel, Money, PartialUpdate

class StatisticsUpdate(PartialUpdate):
    total_orders: Optional[int] = None
    inventory_value: Optional[Money] = None
    active_suppliers: Optional[int] = None
    on_time_delivery: Optional[Money] = None

class Statistics(ApiModel):
    """Dashboard headline figures. There is exactly one record."""
    id: int
    total_orders: int
    inventory_value: Money
    active_suppliers: int
    on_time_delivery: Money

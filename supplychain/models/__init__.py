from .base import ApiModel, Money, PartialUpdate
from .supplier import Supplier, SupplierCreate, SupplierUpdate, SupplierStatus
from .order import Order, OrderCreate, OrderUpdate, OrderStatus
from .inventory import InventoryItem, InventoryItemCreate, InventoryItemUpdate, InventoryStatus, ProductCategory
from .workflow import (
    WorkflowNode, WorkflowNodeCreate, WorkflowNodeUpdate, NodeType,
    WorkflowEdge, WorkflowEdgeCreate, WorkflowEdgeUpdate, EdgeType,
)
from .statistics import Statistics, StatisticsUpdate
from .user import User

__all__ = [
    "ApiModel", "Money", "PartialUpdate",
    "Supplier", "SupplierCreate", "SupplierUpdate", "SupplierStatus",
    "Order", "OrderCreate", "OrderUpdate", "OrderStatus",
    "InventoryItem", "InventoryItemCreate", "InventoryItemUpdate", "InventoryStatus", "ProductCategory",
    "WorkflowNode", "WorkflowNodeCreate", "WorkflowNodeUpdate", "NodeType",
    "WorkflowEdge", "WorkflowEdgeCreate", "WorkflowEdgeUpdate", "EdgeType",
    "Statistics", "StatisticsUpdate",
    "User",
]

"""
Bootstrap dataset loaded at startup: 4 suppliers, 6 orders, 8 inventory items,
a 5-node / 4-edge workflow graph, one admin user and the statistics record.
"""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List

from supplychain.models import (
    InventoryItemCreate,
    OrderCreate,
    SupplierCreate,
    WorkflowEdgeCreate,
    WorkflowNodeCreate,
)

if TYPE_CHECKING:
    from supplychain.services.store import SupplyChainStore

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password"

STATISTICS: Dict[str, Any] = {
    "total_orders": 3542,
    "inventory_value": Decimal("1420000"),
    "active_suppliers": 124,
    "on_time_delivery": Decimal("94.2"),
}

SUPPLIERS: List[Dict[str, Any]] = [
    {
        "name": "Acme Corp",
        "category": "Electronics Manufacturer",
        "status": "active",
        "location": "New York, USA",
        "contactName": "John Reynolds",
        "contactEmail": "john.reynolds@acmecorp.com",
        "contactPhone": "+1 (212) 555-1234",
        "ordersThisMonth": 32,
        "onTimeDelivery": "96.4",
        "totalSpend": "128450",
        "productCategories": 3,
        "logoInitials": "AC",
        "logoColor": "blue",
    },
    {
        "name": "TechCore Inc",
        "category": "Component Supplier",
        "status": "active",
        "location": "San Francisco, USA",
        "contactName": "Sarah Johnson",
        "contactEmail": "sjohnson@techcore.com",
        "contactPhone": "+1 (415) 555-7890",
        "ordersThisMonth": 28,
        "onTimeDelivery": "94.2",
        "totalSpend": "84320",
        "productCategories": 5,
        "logoInitials": "TC",
        "logoColor": "purple",
    },
    {
        "name": "Global Logistics",
        "category": "Logistics Partner",
        "status": "review",
        "location": "London, UK",
        "contactName": "David Smith",
        "contactEmail": "dsmith@globallogistics.co.uk",
        "contactPhone": "+44 20 7946 0958",
        "ordersThisMonth": 46,
        "onTimeDelivery": "88.7",
        "totalSpend": "156780",
        "productCategories": 2,
        "logoInitials": "GL",
        "logoColor": "red",
    },
    {
        "name": "Stellar Systems",
        "category": "Hardware Manufacturer",
        "status": "active",
        "location": "Berlin, Germany",
        "contactName": "Anna Mueller",
        "contactEmail": "anna.m@stellarsystems.de",
        "contactPhone": "+49 30 901820",
        "ordersThisMonth": 19,
        "onTimeDelivery": "97.5",
        "totalSpend": "67480",
        "productCategories": 4,
        "logoInitials": "SS",
        "logoColor": "green",
    },
]

ORDERS: List[Dict[str, Any]] = [
    {"orderId": "#ORD-7352", "supplierId": 1, "date": date(2023, 8, 12), "time": "09:25 AM",
     "status": "delivered", "amount": "12480", "products": "Microprocessors (x200), Circuit Boards (x50)"},
    {"orderId": "#ORD-7351", "supplierId": 2, "date": date(2023, 8, 11), "time": "14:32 PM",
     "status": "in_transit", "amount": "8240.50", "products": "Memory Modules (x150), Power Supplies (x30)"},
    {"orderId": "#ORD-7350", "supplierId": 3, "date": date(2023, 8, 10), "time": "10:15 AM",
     "status": "delayed", "amount": "15720.75", "products": "Shipping Materials (x500), Packaging (x200)"},
    {"orderId": "#ORD-7349", "supplierId": 4, "date": date(2023, 8, 9), "time": "16:45 PM",
     "status": "processing", "amount": "5150.25", "products": "Circuit Assemblies (x100), Connectors (x300)"},
    {"orderId": "#ORD-7345", "supplierId": 1, "date": date(2023, 8, 5), "time": "14:10 PM",
     "status": "delivered", "amount": "18760.50", "products": "Display Panels (x100), Touch Controllers (x100)"},
    {"orderId": "#ORD-7338", "supplierId": 1, "date": date(2023, 7, 28), "time": "11:32 AM",
     "status": "delivered", "amount": "24950.75", "products": "Memory Modules (x500), Power Units (x150)"},
]

INVENTORY: List[Dict[str, Any]] = [
    {"sku": "PROC-1001", "name": "Intel i7 Processor", "category": "electronics", "supplier": "Acme Corp",
     "quantity": 156, "unitPrice": "350.00", "status": "in_stock", "lastUpdated": date(2023, 8, 15)},
    {"sku": "MEM-2002", "name": "32GB RAM Module", "category": "electronics", "supplier": "TechCore Inc",
     "quantity": 89, "unitPrice": "175.50", "status": "in_stock", "lastUpdated": date(2023, 8, 14)},
    {"sku": "PCB-3003", "name": "Circuit Board v2", "category": "components", "supplier": "Acme Corp",
     "quantity": 432, "unitPrice": "45.20", "status": "in_stock", "lastUpdated": date(2023, 8, 10)},
    {"sku": "CASE-4004", "name": "Aluminum Enclosure", "category": "mechanical", "supplier": "Stellar Systems",
     "quantity": 122, "unitPrice": "28.90", "status": "low_stock", "lastUpdated": date(2023, 8, 12)},
    {"sku": "PWR-5005", "name": "Power Supply 650W", "category": "electronics", "supplier": "TechCore Inc",
     "quantity": 0, "unitPrice": "115.75", "status": "out_of_stock", "lastUpdated": date(2023, 8, 5)},
    {"sku": "BOX-6006", "name": "Product Packaging", "category": "packaging", "supplier": "Global Logistics",
     "quantity": 1250, "unitPrice": "2.35", "status": "in_stock", "lastUpdated": date(2023, 8, 8)},
    {"sku": "FAN-7007", "name": "Cooling Fan 120mm", "category": "components", "supplier": "Stellar Systems",
     "quantity": 48, "unitPrice": "18.95", "status": "low_stock", "lastUpdated": date(2023, 8, 11)},
    {"sku": "CABLE-8008", "name": "HDMI Cable 2m", "category": "electronics", "supplier": "TechCore Inc",
     "quantity": 204, "unitPrice": "12.50", "status": "in_stock", "lastUpdated": date(2023, 8, 14)},
]

# warehouse -> transport -> factory -> transport -> retailer
NODES: List[Dict[str, Any]] = [
    {"nodeId": "node-1", "type": "warehouse", "label": "Main Warehouse", "positionX": 100, "positionY": 100,
     "capacity": 10000, "processingTime": 2,
     "description": "Primary storage facility for raw materials and components."},
    {"nodeId": "node-2", "type": "transport", "label": "Transport 1", "positionX": 300, "positionY": 100,
     "processingTime": 1, "description": "Shipping from warehouse to assembly plant"},
    {"nodeId": "node-3", "type": "factory", "label": "Assembly Plant", "positionX": 500, "positionY": 100,
     "capacity": 5000, "processingTime": 3, "description": "Main assembly facility for electronic components"},
    {"nodeId": "node-4", "type": "transport", "label": "Transport 2", "positionX": 500, "positionY": 250,
     "processingTime": 2, "description": "Shipping from assembly to retailers"},
    {"nodeId": "node-5", "type": "retailer", "label": "Retailer Network", "positionX": 500, "positionY": 400,
     "capacity": 2000, "processingTime": 1, "description": "Network of retail distribution points"},
]

EDGES: List[Dict[str, Any]] = [
    {"edgeId": "edge-1", "source": "node-1", "target": "node-2", "type": "standard", "label": "Ship Raw Materials"},
    {"edgeId": "edge-2", "source": "node-2", "target": "node-3", "type": "standard", "label": "Deliver to Assembly"},
    {"edgeId": "edge-3", "source": "node-3", "target": "node-4", "type": "standard", "label": "Ship Products"},
    {"edgeId": "edge-4", "source": "node-4", "target": "node-5", "type": "standard", "label": "Deliver to Retailers"},
]


def load_seed_data(store: SupplyChainStore) -> None:
    """Populate an empty store. Records go through the same schemas as API input."""
    store.create_user(ADMIN_USERNAME, ADMIN_PASSWORD)
    store.init_statistics(STATISTICS)

    for raw in SUPPLIERS:
        store.suppliers.create(SupplierCreate.model_validate(raw).model_dump())
    for raw in ORDERS:
        store.orders.create(OrderCreate.model_validate(raw).model_dump())
    for raw in INVENTORY:
        store.inventory.create(InventoryItemCreate.model_validate(raw).model_dump())
    for raw in NODES:
        store.create_node(WorkflowNodeCreate.model_validate(raw))
    for raw in EDGES:
        store.create_edge(WorkflowEdgeCreate.model_validate(raw))

    logger.info("Loaded seed data: %s", store.counts())

# supplychain/services/store.py
"""
In-memory entity store.

One ``SupplyChainStore`` is built per process (or per test) and handed to the
route handlers; nothing here is a module-level singleton. Every collection
hands out integer ids from its own counter, so an id is never reused after a
delete.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from supplychain.errors import ConflictError, GraphReferenceError
from supplychain.models import (
    InventoryItem,
    Order,
    Statistics,
    Supplier,
    User,
    WorkflowEdge,
    WorkflowEdgeCreate,
    WorkflowNode,
    WorkflowNodeCreate,
)
from supplychain.security import hash_password, verify_password
from supplychain.services.seed import load_seed_data
from supplychain.util.ids import sequential_key

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class Collection(Generic[R]):
    """Records of one model keyed by an auto-incrementing integer id."""

    def __init__(
        self,
        model: Type[R],
        entity: str,
        lock: threading.RLock,
        unique: Iterable[str] = (),
        enforce_unique: bool = True,
    ):
        self.model = model
        self.entity = entity
        self.unique = tuple(unique)
        self.enforce_unique = enforce_unique
        self._lock = lock
        self._records: Dict[int, R] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def create(self, fields: Dict[str, Any]) -> R:
        with self._lock:
            self._check_unique(fields)
            record = self.model(id=self._next_id, **fields)
            self._records[record.id] = record
            self._next_id += 1
        logger.debug("Created %s id=%s", self.entity, record.id)
        return record

    def get(self, record_id: int) -> Optional[R]:
        return self._records.get(record_id)

    def list(self) -> List[R]:
        with self._lock:
            return list(self._records.values())

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[R]:
        """Shallow merge: keys in ``changes`` overwrite, everything else stays."""
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            self._check_unique(changes, exclude_id=record_id)
            updated = current.model_copy(update=changes)
            self._records[record_id] = updated
            return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None)
        if removed is not None:
            logger.debug("Deleted %s id=%s", self.entity, record_id)
        return removed is not None

    def find(self, **criteria: Any) -> List[R]:
        return [r for r in self.list() if all(getattr(r, k) == v for k, v in criteria.items())]

    def first(self, **criteria: Any) -> Optional[R]:
        for record in self.list():
            if all(getattr(record, k) == v for k, v in criteria.items()):
                return record
        return None

    def _check_unique(self, fields: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        if not self.enforce_unique:
            return
        for name in self.unique:
            value = fields.get(name)
            if value is None:
                continue
            for record in self._records.values():
                if record.id != exclude_id and getattr(record, name) == value:
                    alias = self.model.model_fields[name].alias or name
                    raise ConflictError(self.entity, alias, value)


class SupplyChainStore:
    """All application state for one process lifetime."""

    def __init__(self, enforce_unique_keys: bool = True, strict_edge_endpoints: bool = False):
        self._lock = threading.RLock()
        self.strict_edge_endpoints = strict_edge_endpoints

        def collection(model, entity, unique=()):
            return Collection(model, entity, self._lock, unique=unique, enforce_unique=enforce_unique_keys)

        self.users: Collection[User] = collection(User, "User", unique=("username",))
        self.suppliers: Collection[Supplier] = collection(Supplier, "Supplier")
        self.orders: Collection[Order] = collection(Order, "Order", unique=("order_id",))
        self.inventory: Collection[InventoryItem] = collection(InventoryItem, "Inventory item", unique=("sku",))
        self.nodes: Collection[WorkflowNode] = collection(WorkflowNode, "Node", unique=("node_id",))
        self.edges: Collection[WorkflowEdge] = collection(WorkflowEdge, "Edge", unique=("edge_id",))
        self._statistics: Optional[Statistics] = None

    @classmethod
    def seeded(cls, **options: Any) -> "SupplyChainStore":
        """Store pre-loaded with the demo dataset."""
        store = cls(**options)
        load_seed_data(store)
        return store

    # --- Users ---

    def create_user(self, username: str, password: str) -> User:
        return self.users.create({"username": username, "password_hash": hash_password(password)})

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.first(username=username)

    def authenticate(self, username: str, password: str) -> Optional[User]:
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user

    # --- Orders / inventory lookups ---

    def get_orders_by_supplier(self, supplier_id: int) -> List[Order]:
        return self.orders.find(supplier_id=supplier_id)

    def get_inventory_item_by_sku(self, sku: str) -> Optional[InventoryItem]:
        return self.inventory.first(sku=sku)

    # --- Workflow graph ---

    def next_node_key(self) -> str:
        return sequential_key("node", len(self.nodes) + 1, lambda key: self.nodes.first(node_id=key) is not None)

    def next_edge_key(self) -> str:
        return sequential_key("edge", len(self.edges) + 1, lambda key: self.edges.first(edge_id=key) is not None)

    def create_node(self, data: WorkflowNodeCreate) -> WorkflowNode:
        with self._lock:
            fields = data.model_dump()
            if fields["node_id"] is None:
                fields["node_id"] = self.next_node_key()
            return self.nodes.create(fields)

    def update_node(self, node_id: int, changes: Dict[str, Any]) -> Optional[WorkflowNode]:
        # Edges keep pointing at the old key if nodeId changes; nothing cascades.
        return self.nodes.update(node_id, changes)

    def delete_node(self, node_id: int) -> bool:
        return self.nodes.delete(node_id)

    def create_edge(self, data: WorkflowEdgeCreate) -> WorkflowEdge:
        with self._lock:
            fields = data.model_dump()
            self._check_endpoints(fields)
            if fields["edge_id"] is None:
                fields["edge_id"] = self.next_edge_key()
            return self.edges.create(fields)

    def update_edge(self, edge_id: int, changes: Dict[str, Any]) -> Optional[WorkflowEdge]:
        with self._lock:
            if self.edges.get(edge_id) is None:
                return None
            self._check_endpoints(changes)
            return self.edges.update(edge_id, changes)

    def delete_edge(self, edge_id: int) -> bool:
        return self.edges.delete(edge_id)

    def _check_endpoints(self, fields: Dict[str, Any]) -> None:
        if not self.strict_edge_endpoints:
            return
        for name in ("source", "target"):
            key = fields.get(name)
            if key is not None and self.nodes.first(node_id=key) is None:
                raise GraphReferenceError(name, key)

    # --- Statistics ---

    def init_statistics(self, fields: Dict[str, Any]) -> Statistics:
        with self._lock:
            self._statistics = Statistics(id=1, **fields)
            return self._statistics

    def get_statistics(self) -> Optional[Statistics]:
        return self._statistics

    def update_statistics(self, changes: Dict[str, Any]) -> Optional[Statistics]:
        with self._lock:
            if self._statistics is None:
                return None
            self._statistics = self._statistics.model_copy(update=changes)
            return self._statistics

    def counts(self) -> Dict[str, int]:
        return {
            "suppliers": len(self.suppliers),
            "orders": len(self.orders),
            "inventory": len(self.inventory),
            "nodes": len(self.nodes),
            "edges": len(self.edges),
            "users": len(self.users),
        }

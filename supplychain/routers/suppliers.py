from typing import List

from fastapi import APIRouter, Depends, status

from supplychain.deps import get_store, parse_id
from supplychain.errors import NotFoundError
from supplychain.models import Order, Supplier, SupplierCreate, SupplierUpdate
from supplychain.services.store import SupplyChainStore

router = APIRouter()

@router.get("/suppliers", response_model=List[Supplier], status_code=status.HTTP_200_OK)
def list_suppliers(store: SupplyChainStore = Depends(get_store)):
    return store.suppliers.list()

@router.get("/suppliers/{supplier_id}", response_model=Supplier)
def get_supplier(supplier_id: str, store: SupplyChainStore = Depends(get_store)):
    supplier = store.suppliers.get(parse_id(supplier_id, "supplier"))
    if not supplier:
        raise NotFoundError("Supplier")
    return supplier

@router.get("/suppliers/{supplier_id}/orders", response_model=List[Order])
def list_supplier_orders(supplier_id: str, store: SupplyChainStore = Depends(get_store)):
    # Unknown supplier is a 404, not an empty list.
    sid = parse_id(supplier_id, "supplier")
    if not store.suppliers.get(sid):
        raise NotFoundError("Supplier")
    return store.get_orders_by_supplier(sid)

@router.post("/suppliers", response_model=Supplier, status_code=status.HTTP_201_CREATED)
def create_supplier(body: SupplierCreate, store: SupplyChainStore = Depends(get_store)):
    return store.suppliers.create(body.model_dump())

@router.put("/suppliers/{supplier_id}", response_model=Supplier)
def update_supplier(supplier_id: str, body: SupplierUpdate, store: SupplyChainStore = Depends(get_store)):
    supplier = store.suppliers.update(parse_id(supplier_id, "supplier"), body.changes())
    if not supplier:
        raise NotFoundError("Supplier")
    return supplier

@router.delete("/suppliers/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supplier(supplier_id: str, store: SupplyChainStore = Depends(get_store)):
    # Orders referencing this supplier are left in place.
    if not store.suppliers.delete(parse_id(supplier_id, "supplier")):
        raise NotFoundError("Supplier")
    return None

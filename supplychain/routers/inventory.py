from typing import List

from fastapi import APIRouter, Depends, status

from supplychain.deps import get_store, parse_id
from supplychain.errors import NotFoundError
from supplychain.models import InventoryItem, InventoryItemCreate, InventoryItemUpdate
from supplychain.services.store import SupplyChainStore

router = APIRouter()

@router.get("/inventory", response_model=List[InventoryItem], status_code=status.HTTP_200_OK)
def list_inventory(store: SupplyChainStore = Depends(get_store)):
    return store.inventory.list()

@router.get("/inventory/sku/{sku}", response_model=InventoryItem)
def get_inventory_item_by_sku(sku: str, store: SupplyChainStore = Depends(get_store)):
    item = store.get_inventory_item_by_sku(sku)
    if not item:
        raise NotFoundError("Inventory item")
    return item

@router.get("/inventory/{item_id}", response_model=InventoryItem)
def get_inventory_item(item_id: str, store: SupplyChainStore = Depends(get_store)):
    item = store.inventory.get(parse_id(item_id, "inventory item"))
    if not item:
        raise NotFoundError("Inventory item")
    return item

@router.post("/inventory", response_model=InventoryItem, status_code=status.HTTP_201_CREATED)
def create_inventory_item(body: InventoryItemCreate, store: SupplyChainStore = Depends(get_store)):
    return store.inventory.create(body.model_dump())

@router.put("/inventory/{item_id}", response_model=InventoryItem)
def update_inventory_item(item_id: str, body: InventoryItemUpdate, store: SupplyChainStore = Depends(get_store)):
    item = store.inventory.update(parse_id(item_id, "inventory item"), body.changes())
    if not item:
        raise NotFoundError("Inventory item")
    return item

@router.delete("/inventory/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(item_id: str, store: SupplyChainStore = Depends(get_store)):
    if not store.inventory.delete(parse_id(item_id, "inventory item")):
        raise NotFoundError("Inventory item")
    return None

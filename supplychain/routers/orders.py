from typing import List

from fastapi import APIRouter, Depends, status

from supplychain.deps import get_store, parse_id
from supplychain.errors import NotFoundError
from supplychain.models import Order, OrderCreate, OrderUpdate
from supplychain.services.store import SupplyChainStore

router = APIRouter()

@router.get("/orders", response_model=List[Order], status_code=status.HTTP_200_OK)
def list_orders(store: SupplyChainStore = Depends(get_store)):
    return store.orders.list()

@router.get("/orders/{order_id}", response_model=Order)
def get_order(order_id: str, store: SupplyChainStore = Depends(get_store)):
    order = store.orders.get(parse_id(order_id, "order"))
    if not order:
        raise NotFoundError("Order")
    return order

@router.post("/orders", response_model=Order, status_code=status.HTTP_201_CREATED)
def create_order(body: OrderCreate, store: SupplyChainStore = Depends(get_store)):
    return store.orders.create(body.model_dump())

@router.put("/orders/{order_id}", response_model=Order)
def update_order(order_id: str, body: OrderUpdate, store: SupplyChainStore = Depends(get_store)):
    # Any status may follow any other; transitions are up to the caller.
    order = store.orders.update(parse_id(order_id, "order"), body.changes())
    if not order:
        raise NotFoundError("Order")
    return order

@router.delete("/orders/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(order_id: str, store: SupplyChainStore = Depends(get_store)):
    if not store.orders.delete(parse_id(order_id, "order")):
        raise NotFoundError("Order")
    return None

from fastapi import APIRouter, Depends

from supplychain.deps import get_store
from supplychain.errors import NotFoundError
from supplychain.models import Statistics, StatisticsUpdate
from supplychain.services.store import SupplyChainStore

router = APIRouter()

@router.get("/statistics", response_model=Statistics)
def get_statistics(store: SupplyChainStore = Depends(get_store)):
    stats = store.get_statistics()
    if not stats:
        raise NotFoundError("Statistics")
    return stats

@router.put("/statistics", response_model=Statistics)
def update_statistics(body: StatisticsUpdate, store: SupplyChainStore = Depends(get_store)):
    stats = store.update_statistics(body.changes())
    if not stats:
        raise NotFoundError("Statistics")
    return stats

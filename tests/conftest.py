# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from supplychain.config import Settings
from supplychain.main import create_app
from supplychain.services.store import SupplyChainStore


@pytest.fixture()
def store():
    """Fresh seeded store for every test."""
    return SupplyChainStore.seeded()


@pytest.fixture()
def client(store):
    """Test client for an app built around `store`."""
    return TestClient(create_app(Settings(), store=store))


@pytest.fixture()
def lax_client():
    """Unique keys not enforced: duplicate orderId/sku/nodeId/edgeId are accepted."""
    settings = Settings(enforce_unique_keys=False)
    return TestClient(create_app(settings, store=SupplyChainStore.seeded(enforce_unique_keys=False)))


@pytest.fixture()
def strict_client():
    """Edges must point at existing nodes."""
    settings = Settings(strict_edge_endpoints=True)
    return TestClient(create_app(settings, store=SupplyChainStore.seeded(strict_edge_endpoints=True)))


@pytest.fixture()
def node_payload():
    return {
        "type": "customer",
        "label": "Customer 6",
        "positionX": 640,
        "positionY": 410,
        "capacity": 300,
        "processingTime": 1,
        "description": "End customers",
    }

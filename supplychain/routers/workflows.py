"""
Workflow graph editor endpoints.

Nodes and edges are stored independently; an edge refers to nodes by their
string ``nodeId`` key, never by integer id. The canvas sends one PUT per
drag-release with rounded coordinates, so updates here are plain partial
merges with no batching.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from supplychain.deps import get_store, parse_id
from supplychain.errors import NotFoundError
from supplychain.models import (
    WorkflowEdge,
    WorkflowEdgeCreate,
    WorkflowEdgeUpdate,
    WorkflowNode,
    WorkflowNodeCreate,
    WorkflowNodeUpdate,
)
from supplychain.services.store import SupplyChainStore

router = APIRouter(prefix="/workflow")

# --- Nodes ---

@router.get("/nodes", response_model=List[WorkflowNode], status_code=status.HTTP_200_OK)
def list_nodes(store: SupplyChainStore = Depends(get_store)):
    return store.nodes.list()

@router.get("/nodes/{node_id}", response_model=WorkflowNode)
def get_node(node_id: str, store: SupplyChainStore = Depends(get_store)):
    node = store.nodes.get(parse_id(node_id, "node"))
    if not node:
        raise NotFoundError("Node")
    return node

@router.post("/nodes", response_model=WorkflowNode, status_code=status.HTTP_201_CREATED)
def create_node(body: WorkflowNodeCreate, store: SupplyChainStore = Depends(get_store)):
    # nodeId is optional; the generated key comes back in the response
    return store.create_node(body)

@router.put("/nodes/{node_id}", response_model=WorkflowNode)
def update_node(node_id: str, body: WorkflowNodeUpdate, store: SupplyChainStore = Depends(get_store)):
    node = store.update_node(parse_id(node_id, "node"), body.changes())
    if not node:
        raise NotFoundError("Node")
    return node

@router.delete("/nodes/{node_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_node(node_id: str, store: SupplyChainStore = Depends(get_store)):
    # Edges pointing at the node are kept.
    if not store.delete_node(parse_id(node_id, "node")):
        raise NotFoundError("Node")
    return None

# --- Edges ---

@router.get("/edges", response_model=List[WorkflowEdge], status_code=status.HTTP_200_OK)
def list_edges(store: SupplyChainStore = Depends(get_store)):
    return store.edges.list()

@router.get("/edges/{edge_id}", response_model=WorkflowEdge)
def get_edge(edge_id: str, store: SupplyChainStore = Depends(get_store)):
    edge = store.edges.get(parse_id(edge_id, "edge"))
    if not edge:
        raise NotFoundError("Edge")
    return edge

@router.post("/edges", response_model=WorkflowEdge, status_code=status.HTTP_201_CREATED)
def create_edge(body: WorkflowEdgeCreate, store: SupplyChainStore = Depends(get_store)):
    return store.create_edge(body)

@router.put("/edges/{edge_id}", response_model=WorkflowEdge)
def update_edge(edge_id: str, body: WorkflowEdgeUpdate, store: SupplyChainStore = Depends(get_store)):
    edge = store.update_edge(parse_id(edge_id, "edge"), body.changes())
    if not edge:
        raise NotFoundError("Edge")
    return edge

@router.delete("/edges/{edge_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_edge(edge_id: str, store: SupplyChainStore = Depends(get_store)):
    if not store.delete_edge(parse_id(edge_id, "edge")):
        raise NotFoundError("Edge")
    return None

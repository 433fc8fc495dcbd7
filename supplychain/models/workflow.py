from enum import Enum
from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from .base import ApiModel, PartialUpdate

class NodeType(str, Enum):
    warehouse = "warehouse"
    factory = "factory"
    transport = "transport"
    retailer = "retailer"
    customer = "customer"

class EdgeType(str, Enum):
    standard = "standard"
    conditional = "conditional"
    feedback = "feedback"

# --- Nodes ---

class WorkflowNodeCreate(ApiModel):
    """Node of the supply-chain graph. ``nodeId`` is generated when omitted."""
    node_id: Optional[str] = Field(default=None, min_length=1)
    type: NodeType
    label: str
    position_x: int
    position_y: int
    capacity: Optional[int] = None
    processing_time: Optional[int] = None  # days
    description: Optional[str] = None
    is_active: bool = True

class WorkflowNodeUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"capacity", "processing_time", "description"})

    node_id: Optional[str] = Field(default=None, min_length=1)
    type: Optional[NodeType] = None
    label: Optional[str] = None
    position_x: Optional[int] = None
    position_y: Optional[int] = None
    capacity: Optional[int] = None
    processing_time: Optional[int] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

class WorkflowNode(WorkflowNodeCreate):
    id: int = Field(ge=1)
    node_id: str

# --- Edges ---

class WorkflowEdgeCreate(ApiModel):
    """Connection between two nodes, referenced by their ``nodeId`` keys."""
    edge_id: Optional[str] = Field(default=None, min_length=1)
    source: str
    target: str
    type: EdgeType
    label: Optional[str] = None

class WorkflowEdgeUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"label"})

    edge_id: Optional[str] = Field(default=None, min_length=1)
    source: Optional[str] = None
    target: Optional[str] = None
    type: Optional[EdgeType] = None
    label: Optional[str] = None

class WorkflowEdge(WorkflowEdgeCreate):
    id: int = Field(ge=1)
    edge_id: str

"""
Workflow Builder

Fluent builder for creating complete workflow graphs.

Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..enum import DataType, EdgeKind, NodeKind
from ..spec.edge_models import Edge
from ..spec.node_models import Node
from ..spec.port_models import PortValue
from ..spec.workflow_models import Workflow, generate_workflow_id
from ..defaults import (
    DEFAULT_WORKFLOW_NAME,
    DEFAULT_EDGE_ID_PREFIX,
    DEFAULT_LOOP_MAX_ITERATIONS,
    DEFAULT_LOOP_BREAK_CONDITION,
    DEFAULT_PARALLEL_WAIT_FOR_ALL,
)


class WorkflowBuilder:
    """
    Fluent builder for creating Workflow instances.

    Usage:
        # Build a simple workflow
        workflow = (WorkflowBuilder()
            .with_id("chat-flow")
            .with_name("Chat Flow")
            .add_start()
            .add_node("llm", NodeKind.LLM, label="Answer")
            .add_end()
            .connect("start", "llm")
            .connect("llm", "end")
            .build())

        # Build with conditional routing
        workflow = (WorkflowBuilder()
            .add_start()
            .add_node("router", NodeKind.INTERRUPT)
            .add_node("tool", NodeKind.TOOL)
            .add_end()
            .connect("start", "router")
            .connect_conditional("router", "tool", "router.value != 'exit'")
            .connect("router", "end")
            .build())
    """

    def __init__(self):
        """Initialize the builder."""
        self._id: Optional[str] = None
        self._name: str = DEFAULT_WORKFLOW_NAME
        self._description: str = ""

        # Graph
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}

        # Edge counter for auto-generated IDs
        self._edge_counter: int = 0

    def with_id(self, workflow_id: str) -> WorkflowBuilder:
        """Set the workflow ID."""
        self._id = workflow_id
        return self

    def with_name(self, name: str) -> WorkflowBuilder:
        """Set the workflow name."""
        self._name = name
        return self

    def with_description(self, description: str) -> WorkflowBuilder:
        """Set the workflow description."""
        self._description = description
        return self

    # =========================================================================
    # Node methods
    # =========================================================================

    def add_node(
        self,
        node_id: str,
        kind: Any,
        label: str = "",
        inputs: Any = None,
        outputs: Any = None,
        config: Any = None,
        position: Optional[Tuple[float, float]] = None,
        description: str = "",
    ) -> WorkflowBuilder:
        """
        Add a node. Omitted inputs/outputs get the defaults of the kind.

        Args:
            node_id: Node ID
            kind: NodeKind or kind string
            label: Display label
            inputs: Input ports in any supported shape
            outputs: Output ports in any supported shape
            config: Config variant or dict
            position: (x, y) canvas position
            description: Node description
        """
        data: Dict[str, Any] = {
            "id": node_id,
            "kind": kind,
            "label": label,
            "description": description,
            "inputs": inputs,
            "outputs": outputs,
            "config": config,
        }
        if position is not None:
            data["position"] = {"x": position[0], "y": position[1]}
        self._nodes[node_id] = Node.model_validate(data)
        return self

    def add_nodes(self, nodes: List[Node]) -> WorkflowBuilder:
        """Add multiple pre-built nodes."""
        for node in nodes:
            self._nodes[node.id] = node
        return self

    def add_start(self, node_id: str = "start", label: str = "Start") -> WorkflowBuilder:
        return self.add_node(node_id, NodeKind.START, label=label)

    def add_end(self, node_id: str = "end", label: str = "End") -> WorkflowBuilder:
        return self.add_node(node_id, NodeKind.END, label=label)

    def bind_input(
        self,
        node_id: str,
        port: str,
        source_node: str,
        output: str,
        data_type: DataType = DataType.ANY,
    ) -> WorkflowBuilder:
        """Connect node_id's input port to source_node's output."""
        node = self._nodes[node_id]
        self._nodes[node_id] = node.with_input(port, PortValue.connect_to(source_node, output, data_type))
        return self

    def remove_node(self, node_id: str) -> WorkflowBuilder:
        """Remove a node."""
        self._nodes.pop(node_id, None)
        # Also remove connected edges
        edges_to_remove = [
            eid for eid, edge in self._edges.items()
            if edge.source == node_id or edge.target == node_id
        ]
        for eid in edges_to_remove:
            self._edges.pop(eid)
        return self

    # =========================================================================
    # Edge methods
    # =========================================================================

    def add_edge(self, edge: Edge) -> WorkflowBuilder:
        """Add a pre-built edge."""
        self._edges[edge.id] = edge
        return self

    def _next_edge_id(self) -> str:
        self._edge_counter += 1
        return f"{DEFAULT_EDGE_ID_PREFIX}-{self._edge_counter}"

    def _connect(
        self,
        from_node: str,
        to_node: str,
        kind: EdgeKind,
        edge_id: Optional[str],
        label: Optional[str] = None,
        condition: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
    ) -> WorkflowBuilder:
        edge = Edge(
            id=edge_id or self._next_edge_id(),
            source=from_node,
            target=to_node,
            kind=kind,
            data={"label": label, "condition": condition, "config": config},
        )
        self._edges[edge.id] = edge
        return self

    def connect(
        self,
        from_node: str,
        to_node: str,
        edge_id: Optional[str] = None,
        label: Optional[str] = None,
    ) -> WorkflowBuilder:
        """
        Create a simple default connection between nodes.

        Args:
            from_node: Source node ID
            to_node: Target node ID
            edge_id: Optional edge ID (auto-generated if not provided)
            label: Optional display label
        """
        return self._connect(from_node, to_node, EdgeKind.DEFAULT, edge_id, label)

    def connect_conditional(
        self,
        from_node: str,
        to_node: str,
        condition: str,
        edge_id: Optional[str] = None,
        label: Optional[str] = None,
    ) -> WorkflowBuilder:
        """Create a connection taken when condition holds."""
        return self._connect(
            from_node, to_node, EdgeKind.CONDITIONAL, edge_id, label, condition=condition,
        )

    def connect_parallel(
        self,
        from_node: str,
        to_node: str,
        wait_for_all: bool = DEFAULT_PARALLEL_WAIT_FOR_ALL,
        edge_id: Optional[str] = None,
    ) -> WorkflowBuilder:
        """Create a branch that runs alongside the node's other branches."""
        return self._connect(
            from_node, to_node, EdgeKind.PARALLEL, edge_id,
            config={"wait_for_all": wait_for_all},
        )

    def connect_looping(
        self,
        from_node: str,
        to_node: str,
        max_iterations: int = DEFAULT_LOOP_MAX_ITERATIONS,
        break_condition: str = DEFAULT_LOOP_BREAK_CONDITION,
        edge_id: Optional[str] = None,
    ) -> WorkflowBuilder:
        """Create a back edge repeated at most max_iterations times."""
        return self._connect(
            from_node, to_node, EdgeKind.LOOPING, edge_id,
            config={"max_iterations": max_iterations, "break_condition": break_condition},
        )

    # =========================================================================
    # Build method
    # =========================================================================

    def build(self) -> Workflow:
        """
        Build the Workflow.

        Nodes and edges keep the order they were added in. The result is not
        validated; call Workflow.validate() for structural checks.
        """
        return Workflow(
            id=self._id or generate_workflow_id(),
            name=self._name,
            description=self._description,
            nodes=list(self._nodes.values()),
            edges=list(self._edges.values()),
        )

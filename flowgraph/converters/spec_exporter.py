"""
Spec Exporter

Compiles a Workflow into the portable WorkflowSpec consumed by the
execution engine.

Edges are grouped by source. The group of the start node is emitted first
with the ``__start__`` sentinel as its source, and every edge into an end
node targets ``__end__``. Inside a group, conditional edges become
``conditional_edges`` and every other edge a plain target.

Three shapes are supported:
- backend: start/end nodes omitted, sentinels on edges (canonical)
- simple: start/end nodes and positions kept, explicit ``default: "__end__"``
  fallback for purely conditional groups
- enhanced: backend plus metadata for lossless re-import

Configuration fields share the flat ``inputs`` map with ports, under their
snake_case names (the LLM model under ``model_name``, since ``model`` is a
port). A port of the same name wins. Values keep their JSON type, so object
and list settings such as tool ``parameters`` or form ``input_fields`` are
written as JSON objects and arrays next to the string, number and boolean
port values.

Version: 1.0.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set

from ..config import Settings, get_settings
from ..enum import ExportShape
from ..constants import START_SENTINEL, END_SENTINEL
from ..spec.edge_models import Edge
from ..spec.node_models import Node
from ..spec.workflow_models import Workflow
from ..spec.wire_models import (
    ConditionClause,
    ConditionalTarget,
    EdgeDetail,
    SpecEdge,
    SpecEdgeTargets,
    SpecMetadata,
    SpecNode,
    WorkflowSpec,
)
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeRules:
    """How an export shape differs from the others."""
    include_terminal_nodes: bool
    include_positions: bool
    collapse_single_fallback: bool
    requires_default_path: bool
    include_metadata: bool


SHAPE_RULES: Dict[ExportShape, ShapeRules] = {
    ExportShape.SIMPLE: ShapeRules(
        include_terminal_nodes=True,
        include_positions=True,
        collapse_single_fallback=False,
        requires_default_path=True,
        include_metadata=False,
    ),
    ExportShape.BACKEND: ShapeRules(
        include_terminal_nodes=False,
        include_positions=False,
        collapse_single_fallback=True,
        requires_default_path=False,
        include_metadata=False,
    ),
    ExportShape.ENHANCED: ShapeRules(
        include_terminal_nodes=False,
        include_positions=False,
        collapse_single_fallback=True,
        requires_default_path=False,
        include_metadata=True,
    ),
}


class SpecExporter:
    """
    Exports Workflow values as WorkflowSpec.

    The exporter never mutates the workflow it is given.

    Usage:
        exporter = SpecExporter(ExportShape.BACKEND)
        spec_dict = exporter.export_dict(workflow)
    """

    def __init__(
        self,
        shape: Optional[ExportShape] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._shape = ExportShape(shape or self._settings.default_export_shape)
        self._rules = SHAPE_RULES[self._shape]

    @property
    def shape(self) -> ExportShape:
        return self._shape

    # =========================================================================
    # Public API
    # =========================================================================

    def export(self, workflow: Workflow) -> WorkflowSpec:
        """Compile workflow into a WorkflowSpec model."""
        resolver = ReferenceResolver(workflow.nodes)
        end_ids = {node.id for node in workflow.get_end_nodes()}

        nodes = [
            self.export_node(node, resolver)
            for node in workflow.nodes
            if self._rules.include_terminal_nodes or not node.is_terminal
        ]
        edges = self._export_edges(workflow, end_ids)
        metadata = self._build_metadata(workflow, resolver, end_ids) if self._rules.include_metadata else None

        logger.debug(
            f"Exported workflow '{workflow.id}' as {self._shape.value} spec: "
            f"{len(nodes)} node(s), {len(edges)} edge group(s)"
        )
        return WorkflowSpec(
            version=self._settings.spec_version,
            name=workflow.name,
            description=workflow.description,
            nodes=nodes,
            edges=edges,
            metadata=metadata,
        )

    def export_dict(self, workflow: Workflow) -> Dict[str, Any]:
        """Compile workflow into a plain JSON-serializable dictionary."""
        return self.export(workflow).to_dict()

    def export_node(self, node: Node, resolver: ReferenceResolver, with_position: bool = False) -> SpecNode:
        """
        Flatten one node.

        Kind defaults come first and are overridden by the node's own ports;
        every value then passes through the reference resolver. Configuration
        fields fill the remaining keys of the inputs map.
        """
        if node.node_kind is None:
            logger.warning(f"Node '{node.id}' has unknown kind '{node.kind}', exporting its ports unchanged")

        inputs: Dict[str, Any] = {
            name: resolver.normalize_reference(port.to_wire())
            for name, port in node.resolved_inputs().items()
        }
        if node.config is not None:
            for key, value in node.config.to_wire_inputs().items():
                inputs.setdefault(key, value)
        outputs = {name: data_type.value for name, data_type in node.resolved_outputs().items()}

        position = None
        if with_position or self._rules.include_positions:
            position = {"x": node.position.x, "y": node.position.y}

        return SpecNode(
            id=node.id,
            type=node.kind,
            label=node.display_label,
            inputs=inputs,
            outputs=outputs,
            position=position,
        )

    # =========================================================================
    # Edge grouping
    # =========================================================================

    def _export_edges(self, workflow: Workflow, end_ids: Set[str]) -> List[SpecEdge]:
        groups: Dict[str, List[Edge]] = {}
        for edge in workflow.edges:
            groups.setdefault(edge.source, []).append(edge)

        start_nodes = workflow.get_start_nodes()
        if len(start_nodes) > 1:
            logger.warning(
                f"Workflow '{workflow.id}' has {len(start_nodes)} start nodes; "
                f"only '{start_nodes[0].id}' is exported as {START_SENTINEL}"
            )

        spec_edges: List[SpecEdge] = []
        if start_nodes and start_nodes[0].id in groups:
            start_targets = self._build_targets(groups.pop(start_nodes[0].id), end_ids)
            spec_edges.append(SpecEdge(from_=START_SENTINEL, to=start_targets))

        for source, edges in groups.items():
            targets = self._build_targets(edges, end_ids)
            if targets.is_empty():
                logger.debug(f"Omitting empty edge group of '{source}'")
                continue
            spec_edges.append(SpecEdge(from_=source, to=targets))
        return spec_edges

    def _build_targets(self, edges: List[Edge], end_ids: Set[str]) -> SpecEdgeTargets:
        conditional = [edge for edge in edges if edge.is_conditional()]
        other = [self._target_id(edge.target, end_ids) for edge in edges if not edge.is_conditional()]

        if not conditional:
            return SpecEdgeTargets(nodes=other or None)

        branches = [
            ConditionalTarget(
                if_=ConditionClause(condition=self._condition_of(edge)),
                node=self._target_id(edge.target, end_ids),
            )
            for edge in conditional
        ]
        # default: "__end__" is dropped on import, so an explicit edge to an
        # end node always stays in nodes
        if len(other) == 1 and self._rules.collapse_single_fallback and other[0] != END_SENTINEL:
            return SpecEdgeTargets(conditional_edges=branches, default=other[0])
        if other:
            return SpecEdgeTargets(conditional_edges=branches, nodes=other)
        if self._rules.requires_default_path:
            return SpecEdgeTargets(conditional_edges=branches, default=END_SENTINEL)
        return SpecEdgeTargets(conditional_edges=branches)

    def _condition_of(self, edge: Edge) -> str:
        condition = edge.get_condition()
        if condition is None or not condition.strip():
            return self._settings.default_condition
        return condition

    @staticmethod
    def _target_id(target: str, end_ids: Set[str]) -> str:
        return END_SENTINEL if target in end_ids else target

    # =========================================================================
    # Enhanced metadata
    # =========================================================================

    def _build_metadata(
        self,
        workflow: Workflow,
        resolver: ReferenceResolver,
        end_ids: Set[str],
    ) -> SpecMetadata:
        start = workflow.get_start_node()
        start_id = start.id if start is not None else None
        return SpecMetadata(
            exported_at=datetime.now(timezone.utc).isoformat(),
            original_workflow_id=workflow.id,
            node_positions={
                node.id: {"x": node.position.x, "y": node.position.y}
                for node in workflow.nodes
            },
            terminal_nodes=[
                self.export_node(node, resolver, with_position=True)
                for node in workflow.nodes
                if node.is_terminal
            ],
            edge_details=[
                EdgeDetail(
                    source=START_SENTINEL if edge.source == start_id else edge.source,
                    target=self._target_id(edge.target, end_ids),
                    kind=edge.kind.value,
                    label=edge.label,
                    config=edge.config.to_dict() if edge.config is not None else None,
                    animated=edge.animated,
                    style=edge.style,
                )
                for edge in workflow.edges
            ],
        )


# =============================================================================
# ENTRY POINTS
# =============================================================================

def export_workflow(
    workflow: Workflow,
    shape: Optional[ExportShape] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """Export workflow in the given shape, or the configured default shape."""
    return SpecExporter(shape, settings).export_dict(workflow)


def export_backend_spec(workflow: Workflow, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Canonical wire spec: start/end nodes replaced by sentinels."""
    return export_workflow(workflow, ExportShape.BACKEND, settings)


def export_simple_spec(workflow: Workflow, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Spec that keeps start/end nodes and node positions."""
    return export_workflow(workflow, ExportShape.SIMPLE, settings)


def export_enhanced_spec(workflow: Workflow, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Backend spec plus metadata for lossless re-import."""
    return export_workflow(workflow, ExportShape.ENHANCED, settings)

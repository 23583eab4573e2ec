"""
Spec Importer

Reconstructs a Workflow from a WorkflowSpec, the inverse of the exporter.

Sentinels resolve to the workflow's start and end nodes. When no such node
exists the sentinel is kept as the edge endpoint, leaving a dangling edge
for validation to report. The only error raised is SpecFormatError for a
document that cannot be parsed at all.

Version: 1.0.0
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set

from pydantic import ValidationError

from ..config import Settings, get_settings
from ..enum import EdgeKind, NodeKind
from ..exceptions import SpecFormatError
from ..constants import (
    START_SENTINEL,
    END_SENTINEL,
    LEGACY_NODE_KIND_INPUT,
    SPEC_KEY_NODES,
    SPEC_KEY_EDGES,
    ERROR_SPEC_NOT_OBJECT,
    ERROR_SPEC_MISSING_ARRAY,
    ERROR_SPEC_INVALID,
)
from ..spec.config_models import NODE_CONFIG_VARIANTS
from ..spec.edge_models import Edge
from ..spec.node_models import Node
from ..spec.port_models import PortValue, default_input_ports, normalize_output_ports
from ..spec.workflow_models import Workflow, generate_workflow_id
from ..spec.wire_models import EdgeDetail, SpecNode, WorkflowSpec

logger = logging.getLogger(__name__)

_KNOWN_NODE_KINDS = {member.value for member in NodeKind}
_KNOWN_EDGE_KINDS = {member.value for member in EdgeKind}

# Wire types written by older exports
NODE_KIND_ALIASES = {
    LEGACY_NODE_KIND_INPUT: NodeKind.INTERRUPT.value,
}


def parse_workflow_spec(data: Any) -> WorkflowSpec:
    """
    Parse a decoded JSON document into a WorkflowSpec.

    Raises:
        SpecFormatError: If data is not an object, lacks the nodes/edges
            arrays, or does not match the wire models
    """
    if isinstance(data, WorkflowSpec):
        return data
    if not isinstance(data, Mapping):
        raise SpecFormatError(ERROR_SPEC_NOT_OBJECT.format(actual=type(data).__name__))
    for key in (SPEC_KEY_NODES, SPEC_KEY_EDGES):
        if not isinstance(data.get(key), list):
            raise SpecFormatError(ERROR_SPEC_MISSING_ARRAY.format(key=key), details={"key": key})
    try:
        return WorkflowSpec.model_validate(dict(data))
    except ValidationError as e:
        raise SpecFormatError(
            ERROR_SPEC_INVALID.format(error=f"{e.error_count()} validation error(s)"),
            details={"errors": [
                {"loc": list(error["loc"]), "msg": error["msg"]} for error in e.errors()
            ]},
        ) from e


def config_keys_for(kind: str) -> Set[str]:
    """Input keys that belong to the configuration variant of kind."""
    variant = NODE_CONFIG_VARIANTS.get(kind)
    if variant is None:
        return set()
    return variant.wire_field_names() - set(default_input_ports(kind))


def is_config_value(kind: str, name: str, value: Any) -> bool:
    """
    True if the spec input name/value pair is read back as configuration.

    Ports and configuration share the inputs map. A reference under a
    configuration key is data flow and stays a port.
    """
    return name in config_keys_for(kind) and not PortValue.from_raw(value).reference


class SpecImporter:
    """
    Imports WorkflowSpec documents as Workflow values.

    Usage:
        workflow = SpecImporter().import_spec(json.loads(text))
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def import_spec(self, data: Any) -> Workflow:
        """
        Reconstruct a Workflow.

        Args:
            data: Decoded spec document or WorkflowSpec

        Returns:
            A new, independent Workflow

        Raises:
            SpecFormatError: If data cannot be parsed as a spec
        """
        spec = parse_workflow_spec(data)
        metadata = spec.metadata

        terminal_specs = [
            terminal for terminal in (metadata.terminal_nodes if metadata else [])
            if spec.find_node(terminal.id) is None
        ]
        positions = metadata.node_positions if metadata else {}

        restored_terminals = [self._import_node(node, positions) for node in terminal_specs]
        nodes = (
            [node for node in restored_terminals if node.is_start]
            + [self._import_node(node, positions) for node in spec.nodes]
            + [node for node in restored_terminals if not node.is_start]
        )

        start_id = next((node.id for node in nodes if node.is_start), None)
        end_id = next((node.id for node in nodes if node.is_end), None)
        details = list(metadata.edge_details) if metadata else []
        edges = self._import_edges(spec, start_id, end_id, details)

        workflow_id = spec.id or (metadata.original_workflow_id if metadata else None)
        workflow = Workflow(
            id=workflow_id or generate_workflow_id(self._settings.imported_workflow_prefix),
            name=spec.name,
            description=spec.description or "",
            nodes=nodes,
            edges=edges,
        )
        logger.debug(
            f"Imported workflow '{workflow.id}': {len(nodes)} node(s), {len(edges)} edge(s)"
        )
        return workflow

    # =========================================================================
    # Nodes
    # =========================================================================

    def _import_node(
        self,
        spec_node: SpecNode,
        positions: Dict[str, Dict[str, float]],
    ) -> Node:
        kind = NODE_KIND_ALIASES.get(spec_node.type, spec_node.type)
        if kind not in _KNOWN_NODE_KINDS:
            logger.warning(f"Node '{spec_node.id}' has unknown kind '{kind}', importing its ports unchanged")

        inputs: Dict[str, PortValue] = {}
        config: Dict[str, Any] = {}
        for name, value in spec_node.inputs.items():
            if is_config_value(kind, name, value):
                config[name] = value
            else:
                inputs[name] = PortValue.from_wire(value)

        return Node(
            id=spec_node.id,
            kind=kind,
            label=spec_node.label or "",
            position=spec_node.position or positions.get(spec_node.id),
            config=NODE_CONFIG_VARIANTS[kind].fields_from_wire(config) if config else None,
            inputs=inputs,
            outputs=normalize_output_ports(spec_node.outputs),
        )

    # =========================================================================
    # Edges
    # =========================================================================

    def _import_edges(
        self,
        spec: WorkflowSpec,
        start_id: Optional[str],
        end_id: Optional[str],
        details: List[EdgeDetail],
    ) -> List[Edge]:
        counter = itertools.count(1)
        edges: List[Edge] = []
        for spec_edge in spec.edges:
            wire_source = spec_edge.from_
            source = self._resolve(wire_source, START_SENTINEL, start_id, "start")
            targets = spec_edge.to

            for target in targets.nodes or []:
                edges.append(self._make_edge(
                    counter, wire_source, source, target, end_id, EdgeKind.DEFAULT, None, details,
                ))
            for branch in targets.conditional_edges or []:
                edges.append(self._make_edge(
                    counter, wire_source, source, branch.node, end_id,
                    EdgeKind.CONDITIONAL, branch.if_.condition, details,
                ))
            if targets.default and targets.default != END_SENTINEL:
                edges.append(self._make_edge(
                    counter, wire_source, source, targets.default, end_id, EdgeKind.DEFAULT, None, details,
                ))
        return edges

    def _make_edge(
        self,
        counter: Iterator[int],
        wire_source: str,
        source: str,
        wire_target: str,
        end_id: Optional[str],
        kind: EdgeKind,
        condition: Optional[str],
        details: List[EdgeDetail],
    ) -> Edge:
        edge_id = f"{self._settings.edge_id_prefix}-{next(counter)}"
        target = self._resolve(wire_target, END_SENTINEL, end_id, "end")
        data: Dict[str, Any] = {"condition": condition}
        extra: Dict[str, Any] = {}

        detail = self._take_detail(details, wire_source, wire_target, kind)
        if detail is not None:
            if kind == EdgeKind.DEFAULT and detail.kind in _KNOWN_EDGE_KINDS:
                kind = EdgeKind(detail.kind)
            data["label"] = detail.label
            data["config"] = detail.config
            extra = {"animated": detail.animated, "style": detail.style}

        logger.debug(f"Created {kind.value} edge '{edge_id}': {source} -> {target}")
        return Edge(id=edge_id, source=source, target=target, kind=kind, data=data, **extra)

    @staticmethod
    def _take_detail(
        details: List[EdgeDetail],
        wire_source: str,
        wire_target: str,
        kind: EdgeKind,
    ) -> Optional[EdgeDetail]:
        """Pop the first metadata entry describing this wire edge."""
        wanted_conditional = kind == EdgeKind.CONDITIONAL
        for index, detail in enumerate(details):
            is_conditional = detail.kind == EdgeKind.CONDITIONAL.value
            if detail.source == wire_source and detail.target == wire_target and is_conditional == wanted_conditional:
                return details.pop(index)
        return None

    @staticmethod
    def _resolve(value: str, sentinel: str, node_id: Optional[str], role: str) -> str:
        if value != sentinel:
            return value
        if node_id is None:
            logger.warning(f"Spec uses {sentinel} but the workflow has no {role} node; keeping the sentinel")
            return value
        return node_id


def import_workflow_spec(data: Any, settings: Optional[Settings] = None) -> Workflow:
    """
    Reconstruct a Workflow from a decoded WorkflowSpec document.

    Raises:
        SpecFormatError: If data cannot be parsed as a spec
    """
    return SpecImporter(settings).import_spec(data)

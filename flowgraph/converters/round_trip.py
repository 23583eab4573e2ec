"""
Round-trip Comparison

Checks that a restored Workflow (typically ``import(export(original))``)
is equivalent to the original:

- same node ids
- same kind, label and resolved ports per node, compared in wire form
- same input port names and bindings per node; a literal port named after
  a configuration field is read back as configuration and is not counted
- every original edge has a restored edge with the same source, target,
  kind and condition

Start/end node ids and the sentinels map onto the same tokens on both sides
so regenerated ids do not count as differences. Positions, fresh ids, style
and animation are ignored.

Version: 1.0.0
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from ..config import Settings, get_settings
from ..enum import EdgeKind, ExportShape
from ..constants import START_SENTINEL, END_SENTINEL
from ..spec.edge_models import Edge
from ..spec.node_models import Node
from ..spec.workflow_models import Workflow
from .reference_resolver import ReferenceResolver
from .spec_exporter import SpecExporter
from .spec_importer import config_keys_for

EdgeKey = Tuple[str, str, str, Optional[str]]


def _terminal_tokens(workflow: Workflow) -> Dict[str, str]:
    tokens = {START_SENTINEL: START_SENTINEL, END_SENTINEL: END_SENTINEL}
    for node in workflow.nodes:
        if node.is_start:
            tokens[node.id] = START_SENTINEL
        elif node.is_end:
            tokens[node.id] = END_SENTINEL
    return tokens


def _edge_key(edge: Edge, tokens: Dict[str, str], preserve_edge_kinds: bool, default_condition: str) -> EdgeKey:
    kind = edge.kind
    if not preserve_edge_kinds and kind != EdgeKind.CONDITIONAL:
        kind = EdgeKind.DEFAULT
    condition = None
    if edge.is_conditional():
        condition = edge.get_condition()
        if condition is None or not condition.strip():
            condition = default_condition
    return (
        tokens.get(edge.source, edge.source),
        tokens.get(edge.target, edge.target),
        kind.value,
        condition,
    )


def _port_bindings(node: Node) -> Dict[str, str]:
    config_keys = config_keys_for(node.kind)
    return {
        name: port.binding.value
        for name, port in node.resolved_inputs().items()
        if not (port.is_literal and name in config_keys)
    }


def _compare_nodes(
    original: Node,
    restored: Node,
    exporter: SpecExporter,
    original_resolver: ReferenceResolver,
    restored_resolver: ReferenceResolver,
) -> List[str]:
    differences = []
    if original.kind != restored.kind:
        differences.append(f"Node '{original.id}': kind {original.kind!r} != {restored.kind!r}")
    if original.display_label != restored.display_label:
        differences.append(
            f"Node '{original.id}': label {original.display_label!r} != {restored.display_label!r}"
        )
    before_ports = _port_bindings(original)
    after_ports = _port_bindings(restored)
    if before_ports != after_ports:
        differences.append(f"Node '{original.id}': port bindings {before_ports!r} != {after_ports!r}")
    before = exporter.export_node(original, original_resolver)
    after = exporter.export_node(restored, restored_resolver)
    if before.inputs != after.inputs:
        differences.append(f"Node '{original.id}': inputs {before.inputs!r} != {after.inputs!r}")
    if before.outputs != after.outputs:
        differences.append(f"Node '{original.id}': outputs {before.outputs!r} != {after.outputs!r}")
    return differences


def round_trip_differences(
    original: Workflow,
    restored: Workflow,
    include_terminal_nodes: bool = True,
    preserve_edge_kinds: bool = False,
    settings: Optional[Settings] = None,
) -> List[str]:
    """
    List every way restored differs from original.

    Args:
        original: Workflow before the round trip
        restored: Workflow after the round trip
        include_terminal_nodes: Compare start/end nodes too; the backend shape
            does not carry them
        preserve_edge_kinds: Compare parallel/looping kinds; only the enhanced
            shape carries them, the others collapse them to default
        settings: Settings supplying the default condition

    Returns:
        Human-readable differences, empty when equivalent
    """
    settings = settings or get_settings()
    exporter = SpecExporter(ExportShape.SIMPLE, settings)
    differences: List[str] = []

    def keep(node: Node) -> bool:
        return include_terminal_nodes or not node.is_terminal

    original_nodes = {node.id: node for node in original.nodes if keep(node)}
    restored_nodes = {node.id: node for node in restored.nodes if keep(node)}
    missing = sorted(set(original_nodes) - set(restored_nodes))
    unexpected = sorted(set(restored_nodes) - set(original_nodes))
    if missing:
        differences.append(f"Missing nodes: {missing}")
    if unexpected:
        differences.append(f"Unexpected nodes: {unexpected}")

    original_resolver = ReferenceResolver(original.nodes)
    restored_resolver = ReferenceResolver(restored.nodes)
    for node_id, node in original_nodes.items():
        if node_id in restored_nodes:
            differences.extend(_compare_nodes(
                node, restored_nodes[node_id], exporter, original_resolver, restored_resolver,
            ))

    original_tokens = _terminal_tokens(original)
    restored_tokens = _terminal_tokens(restored)
    restored_edges: Set[EdgeKey] = {
        _edge_key(edge, restored_tokens, preserve_edge_kinds, settings.default_condition)
        for edge in restored.edges
    }
    for edge in original.edges:
        key = _edge_key(edge, original_tokens, preserve_edge_kinds, settings.default_condition)
        if key not in restored_edges:
            differences.append(f"Edge '{edge.id}' {key} has no counterpart")
    return differences


def is_round_trip_equivalent(
    original: Workflow,
    restored: Workflow,
    include_terminal_nodes: bool = True,
    preserve_edge_kinds: bool = False,
    settings: Optional[Settings] = None,
) -> bool:
    return not round_trip_differences(
        original, restored, include_terminal_nodes, preserve_edge_kinds, settings,
    )

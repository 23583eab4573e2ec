"""
Reference Resolver

Detects and rewrites cross-node variable references embedded in input
values so that every reference takes the canonical by-name shape
``$<nodeId>.<outputName>``.

Older exports referred to outputs by position (``$node7.0``). Those are
resolved against the referenced node's declared outputs; anything that
cannot be resolved is returned unchanged.

Version: 1.0.0
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from ..constants import LEGACY_INDEX_REFERENCE_PATTERN
from ..spec.node_models import Node
from ..spec.port_models import (
    PortValue,
    is_template_reference,
    make_reference,
    reference_head,
)
from ..spec.workflow_models import Workflow

logger = logging.getLogger(__name__)

_LEGACY_INDEX_REFERENCE = re.compile(LEGACY_INDEX_REFERENCE_PATTERN)

NodeCollection = Union[Iterable[Node], Mapping[str, Node]]


class ReferenceResolver:
    """
    Resolves references against a fixed set of nodes.

    Usage:
        resolver = ReferenceResolver(workflow.nodes)
        resolver.normalize_reference("$node7.0")   # "$node7.status"
    """

    def __init__(self, nodes: NodeCollection):
        if isinstance(nodes, Mapping):
            self._nodes: Dict[str, Node] = dict(nodes)
        else:
            self._nodes = {node.id: node for node in nodes}

    def is_foreign_reference(self, value: Any) -> bool:
        """True if value is ``$<id>.<...>`` and ``<id>`` names a known node."""
        head = reference_head(value)
        return head is not None and head in self._nodes

    def normalize_reference(self, value: Any) -> Any:
        """
        Rewrite a positional reference to its by-name form.

        Values that are not positional references, and positional references
        that do not resolve, are returned unchanged.
        """
        if not isinstance(value, str) or is_template_reference(value):
            return value
        match = _LEGACY_INDEX_REFERENCE.match(value)
        if match is None:
            return value

        node_id = match.group("node_id")
        index_text = match.group("index")
        node = self._nodes.get(node_id)
        if node is None:
            logger.warning(f"Reference {value!r} points to unknown node '{node_id}', leaving it unresolved")
            return value

        output_names = node.output_names()
        if index_text in output_names:
            # An output literally named by digits is already a by-name reference
            return value
        index = int(index_text)
        if index >= len(output_names):
            logger.warning(
                f"Reference {value!r} points past the {len(output_names)} output(s) "
                f"of node '{node_id}', leaving it unresolved"
            )
            return value
        return make_reference(node_id, output_names[index])

    def normalize_port(self, port: PortValue) -> PortValue:
        if not port.is_connection:
            return port
        normalized = self.normalize_reference(port.value)
        return port if normalized == port.value else port.with_reference(normalized)

    def normalize_inputs(self, inputs: Mapping[str, PortValue]) -> Dict[str, PortValue]:
        return {name: self.normalize_port(port) for name, port in inputs.items()}

    def unresolved_references(self, node: Node) -> List[Tuple[str, str]]:
        """``(port, reference)`` pairs of node whose reference names no known node."""
        return [
            (name, port.value)
            for name, port in node.inputs.items()
            if port.is_connection and not self.is_foreign_reference(port.value)
        ]


# =============================================================================
# FUNCTIONAL API
# =============================================================================

def is_foreign_reference(value: Any, nodes: NodeCollection) -> bool:
    """
    Check whether value references the output of one of nodes.

    Args:
        value: Any input value
        nodes: Nodes of the workflow, as a list or an id-keyed mapping

    Returns:
        True if value is a string starting with ``$`` containing a ``.`` and
        the segment before the ``.`` names an existing node
    """
    return ReferenceResolver(nodes).is_foreign_reference(value)


def normalize_reference(value: Any, nodes: NodeCollection) -> Any:
    """
    Rewrite a legacy ``$<nodeId>.<N>`` reference to ``$<nodeId>.<outputName>``.

    Never raises; unresolvable references come back unchanged. Applying the
    function twice gives the same result as applying it once.
    """
    return ReferenceResolver(nodes).normalize_reference(value)


def normalize_workflow_references(workflow: Workflow) -> Workflow:
    """Return workflow with every positional reference rewritten by name."""
    resolver = ReferenceResolver(workflow.nodes)
    changed = False
    nodes = []
    for node in workflow.nodes:
        inputs = resolver.normalize_inputs(node.inputs)
        if inputs != node.inputs:
            node = node.model_copy(update={"inputs": inputs})
            changed = True
        nodes.append(node)
    if not changed:
        return workflow
    return workflow.model_copy(update={"nodes": nodes})


def find_unresolved_references(workflow: Workflow) -> List[Tuple[str, str, str]]:
    """``(node_id, port, reference)`` for every connection naming no node."""
    resolver = ReferenceResolver(workflow.nodes)
    return [
        (node.id, port, reference)
        for node in workflow.nodes
        for port, reference in resolver.unresolved_references(node)
    ]

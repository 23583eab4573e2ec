"""
Workflow Documents

Full-graph workflow documents as saved by the editor, and detection of
which kind of document a decoded JSON object is:

- a WorkflowSpec (``version``, ``nodes`` and ``edges`` present)
- a full-graph document ``{id, name, nodes: [{id, type, position, data}],
  edges: [{id, source, target, type, data}], createdAt, updatedAt}``

Version: 1.0.0
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from ..config import Settings, get_settings
from ..enum import DocumentFormat, EdgeKind
from ..exceptions import DocumentFormatError
from ..constants import (
    SPEC_KEY_VERSION,
    SPEC_KEY_ID,
    SPEC_KEY_NAME,
    SPEC_KEY_DESCRIPTION,
    SPEC_KEY_NODES,
    SPEC_KEY_EDGES,
    PORT_KEY_NAME,
    PORT_KEY_VALUE,
    PORT_KEY_REFERENCE,
    PORT_KEY_DATA_TYPE,
    PORT_KEY_IS_TEMPLATE,
    DOC_KEY_DATA,
    DOC_KEY_TYPE,
    DOC_KEY_SOURCE,
    DOC_KEY_TARGET,
    DOC_KEY_POSITION,
    DOC_KEY_LABEL,
    DOC_KEY_CONFIG,
    DOC_KEY_CONDITION,
    DOC_KEY_INPUTS,
    DOC_KEY_OUTPUTS,
    DOC_KEY_ANIMATED,
    DOC_KEY_STYLE,
    DOC_KEY_CREATED_AT,
    DOC_KEY_UPDATED_AT,
    ERROR_DOCUMENT_NOT_OBJECT,
)
from ..spec.edge_models import Edge
from ..spec.node_models import Node
from ..spec.port_models import PortValue
from ..spec.workflow_models import Workflow, generate_workflow_id
from .spec_importer import NODE_KIND_ALIASES, import_workflow_spec

logger = logging.getLogger(__name__)

_KNOWN_EDGE_KINDS = {member.value for member in EdgeKind}


# =============================================================================
# FORMAT DETECTION
# =============================================================================

def detect_document_format(data: Any) -> DocumentFormat:
    """A document with version, nodes and edges is a spec; anything else a graph."""
    if (
        isinstance(data, Mapping)
        and SPEC_KEY_VERSION in data
        and isinstance(data.get(SPEC_KEY_NODES), list)
        and isinstance(data.get(SPEC_KEY_EDGES), list)
    ):
        return DocumentFormat.SPEC
    return DocumentFormat.GRAPH


def load_workflow_document(data: Any, settings: Optional[Settings] = None) -> Workflow:
    """
    Load a Workflow from any supported document.

    Raises:
        SpecFormatError: If a spec document cannot be parsed
        DocumentFormatError: If data is not a JSON object
    """
    document_format = detect_document_format(data)
    logger.debug(f"Loading workflow document as {document_format.value}")
    if document_format == DocumentFormat.SPEC:
        return import_workflow_spec(data, settings)
    return workflow_from_document(data, settings)


# =============================================================================
# EXPORT
# =============================================================================

def _port_entry(name: str, port: PortValue) -> Dict[str, Any]:
    entry: Dict[str, Any] = {PORT_KEY_NAME: name, PORT_KEY_DATA_TYPE: port.data_type.value}
    if port.is_literal:
        entry[PORT_KEY_VALUE] = port.value
    else:
        entry[PORT_KEY_REFERENCE] = port.value
    if port.is_template:
        entry[PORT_KEY_IS_TEMPLATE] = True
    return entry


def _node_document(node: Node) -> Dict[str, Any]:
    return {
        SPEC_KEY_ID: node.id,
        DOC_KEY_TYPE: node.kind,
        DOC_KEY_POSITION: {"x": node.position.x, "y": node.position.y},
        DOC_KEY_DATA: {
            DOC_KEY_LABEL: node.label,
            SPEC_KEY_DESCRIPTION: node.description,
            DOC_KEY_CONFIG: node.config.to_dict() if node.config is not None else None,
            DOC_KEY_INPUTS: {name: _port_entry(name, port) for name, port in node.inputs.items()},
            DOC_KEY_OUTPUTS: {name: data_type.value for name, data_type in node.outputs.items()},
        },
    }


def _edge_document(edge: Edge) -> Dict[str, Any]:
    return {
        SPEC_KEY_ID: edge.id,
        DOC_KEY_SOURCE: edge.source,
        DOC_KEY_TARGET: edge.target,
        DOC_KEY_TYPE: edge.kind.value,
        DOC_KEY_DATA: {
            DOC_KEY_LABEL: edge.data.label,
            DOC_KEY_CONDITION: edge.data.condition,
            DOC_KEY_CONFIG: edge.config.to_dict() if edge.config is not None else None,
        },
        DOC_KEY_ANIMATED: edge.animated,
        DOC_KEY_STYLE: edge.style,
    }


def workflow_to_document(workflow: Workflow) -> Dict[str, Any]:
    """Serialize workflow as a full-graph document, keeping everything."""
    return {
        SPEC_KEY_ID: workflow.id,
        SPEC_KEY_NAME: workflow.name,
        SPEC_KEY_DESCRIPTION: workflow.description,
        SPEC_KEY_NODES: [_node_document(node) for node in workflow.nodes],
        SPEC_KEY_EDGES: [_edge_document(edge) for edge in workflow.edges],
        DOC_KEY_CREATED_AT: workflow.created_at.isoformat(),
        DOC_KEY_UPDATED_AT: workflow.updated_at.isoformat(),
    }


# =============================================================================
# IMPORT
# =============================================================================

def _parse_timestamp(value: Any, field: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Ignoring unparseable {field} {value!r}")
    return datetime.now(timezone.utc)


def _node_from_document(raw: Any) -> Optional[Node]:
    if not isinstance(raw, Mapping) or not raw.get(SPEC_KEY_ID) or not raw.get(DOC_KEY_TYPE):
        logger.warning(f"Skipping node entry without id or type: {raw!r}")
        return None
    payload = raw.get(DOC_KEY_DATA) or {}
    kind = NODE_KIND_ALIASES.get(raw[DOC_KEY_TYPE], raw[DOC_KEY_TYPE])
    return Node(
        id=raw[SPEC_KEY_ID],
        kind=kind,
        position=raw.get(DOC_KEY_POSITION),
        label=payload.get(DOC_KEY_LABEL) or "",
        description=payload.get(SPEC_KEY_DESCRIPTION) or "",
        config=payload.get(DOC_KEY_CONFIG),
        inputs=payload.get(DOC_KEY_INPUTS),
        outputs=payload.get(DOC_KEY_OUTPUTS),
    )


def _edge_from_document(raw: Any, index: int, prefix: str) -> Optional[Edge]:
    if not isinstance(raw, Mapping) or not raw.get(DOC_KEY_SOURCE) or not raw.get(DOC_KEY_TARGET):
        logger.warning(f"Skipping edge entry without source or target: {raw!r}")
        return None
    kind = raw.get(DOC_KEY_TYPE) or EdgeKind.DEFAULT.value
    if kind not in _KNOWN_EDGE_KINDS:
        logger.warning(f"Edge kind '{kind}' is not supported, importing it as default")
        kind = EdgeKind.DEFAULT.value
    payload = raw.get(DOC_KEY_DATA) or {}
    return Edge(
        id=raw.get(SPEC_KEY_ID) or f"{prefix}-{index}",
        source=raw[DOC_KEY_SOURCE],
        target=raw[DOC_KEY_TARGET],
        kind=kind,
        data={
            DOC_KEY_LABEL: payload.get(DOC_KEY_LABEL),
            DOC_KEY_CONDITION: payload.get(DOC_KEY_CONDITION),
            DOC_KEY_CONFIG: payload.get(DOC_KEY_CONFIG),
        },
        animated=bool(raw.get(DOC_KEY_ANIMATED, False)),
        style=raw.get(DOC_KEY_STYLE) or {},
    )


def workflow_from_document(data: Any, settings: Optional[Settings] = None) -> Workflow:
    """
    Rebuild a Workflow from a full-graph document.

    Configuration objects are re-instantiated per kind and ports of either
    historical shape are normalized.

    Raises:
        DocumentFormatError: If data is not a JSON object
    """
    if not isinstance(data, Mapping):
        raise DocumentFormatError(ERROR_DOCUMENT_NOT_OBJECT.format(actual=type(data).__name__))
    settings = settings or get_settings()

    nodes: List[Node] = []
    for raw in data.get(SPEC_KEY_NODES) or []:
        node = _node_from_document(raw)
        if node is not None:
            nodes.append(node)

    edges: List[Edge] = []
    for index, raw in enumerate(data.get(SPEC_KEY_EDGES) or [], start=1):
        edge = _edge_from_document(raw, index, settings.edge_id_prefix)
        if edge is not None:
            edges.append(edge)

    return Workflow(
        id=data.get(SPEC_KEY_ID) or generate_workflow_id(settings.imported_workflow_prefix),
        name=data.get(SPEC_KEY_NAME) or settings.default_workflow_name,
        description=data.get(SPEC_KEY_DESCRIPTION) or "",
        nodes=nodes,
        edges=edges,
        created_at=_parse_timestamp(data.get(DOC_KEY_CREATED_AT), DOC_KEY_CREATED_AT),
        updated_at=_parse_timestamp(data.get(DOC_KEY_UPDATED_AT), DOC_KEY_UPDATED_AT),
    )

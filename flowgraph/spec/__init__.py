"""
Flowgraph Specification Models

Graph models (Workflow, Node, Edge), port and configuration variants, and
the wire models of the portable workflow spec.
"""

from .port_models import (
    PortValue,
    infer_data_type,
    coerce_data_type,
    is_template_reference,
    reference_head,
    make_reference,
    normalize_input_ports,
    normalize_output_ports,
    default_input_ports,
    default_output_ports,
)
from .config_models import (
    ConfigValidationResult,
    BaseNodeConfig,
    LLMNodeConfig,
    ToolNodeConfig,
    InterruptNodeConfig,
    InputField,
    InputNodeConfig,
    BaseEdgeConfig,
    ConditionalEdgeConfig,
    ParallelEdgeConfig,
    LoopingEdgeConfig,
    NodeConfig,
    EdgeConfig,
    NODE_CONFIG_VARIANTS,
    EDGE_CONFIG_VARIANTS,
    create_node_config,
    create_edge_config,
)
from .node_models import Position, Node
from .edge_models import EdgeData, Edge
from .workflow_models import Workflow, generate_workflow_id
from .wire_models import (
    ConditionClause,
    ConditionalTarget,
    SpecEdgeTargets,
    SpecEdge,
    SpecNode,
    EdgeDetail,
    SpecMetadata,
    WorkflowSpec,
)

__all__ = [
    # Ports
    "PortValue",
    "infer_data_type",
    "coerce_data_type",
    "is_template_reference",
    "reference_head",
    "make_reference",
    "normalize_input_ports",
    "normalize_output_ports",
    "default_input_ports",
    "default_output_ports",
    # Config variants
    "ConfigValidationResult",
    "BaseNodeConfig",
    "LLMNodeConfig",
    "ToolNodeConfig",
    "InterruptNodeConfig",
    "InputField",
    "InputNodeConfig",
    "BaseEdgeConfig",
    "ConditionalEdgeConfig",
    "ParallelEdgeConfig",
    "LoopingEdgeConfig",
    "NodeConfig",
    "EdgeConfig",
    "NODE_CONFIG_VARIANTS",
    "EDGE_CONFIG_VARIANTS",
    "create_node_config",
    "create_edge_config",
    # Graph
    "Position",
    "Node",
    "EdgeData",
    "Edge",
    "Workflow",
    "generate_workflow_id",
    # Wire
    "ConditionClause",
    "ConditionalTarget",
    "SpecEdgeTargets",
    "SpecEdge",
    "SpecNode",
    "EdgeDetail",
    "SpecMetadata",
    "WorkflowSpec",
]

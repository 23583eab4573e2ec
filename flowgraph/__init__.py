"""
Flowgraph

Visual workflow graphs and their compiler to the portable, execution-oriented
workflow specification.

Version: 1.0.0

Components:
- Workflow / Node / Edge: immutable graph values with per-kind configuration
- Reference resolver: canonical ``$<nodeId>.<outputName>`` references
- Spec exporter: graph to source-grouped spec with ``__start__``/``__end__``
- Spec importer: spec back to graph
- Round-trip comparison of two workflows

Usage:
    from flowgraph import (
        WorkflowBuilder, NodeKind,
        export_backend_spec, import_workflow_spec, round_trip_differences,
    )

    workflow = (WorkflowBuilder()
        .with_name("Summarizer")
        .add_start()
        .add_node("llm", NodeKind.LLM, label="Summarize")
        .add_end()
        .connect("start", "llm")
        .connect("llm", "end")
        .build())

    spec = export_backend_spec(workflow)
    restored = import_workflow_spec(spec)
"""

# =============================================================================
# ENUMS
# =============================================================================

from .enum import (
    NodeKind,
    EdgeKind,
    DataType,
    PortBinding,
    ExportShape,
    DocumentFormat,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================

from .exceptions import (
    WorkflowError,
    SpecFormatError,
    DocumentFormatError,
    NodeNotFoundError,
    EdgeNotFoundError,
    NodeValidationError,
    EdgeValidationError,
    WorkflowValidationError,
    SerializationError,
)

# =============================================================================
# MODELS
# =============================================================================

from .spec import (
    # Ports
    PortValue,
    normalize_input_ports,
    normalize_output_ports,
    default_input_ports,
    default_output_ports,
    # Config variants
    ConfigValidationResult,
    LLMNodeConfig,
    ToolNodeConfig,
    InterruptNodeConfig,
    InputField,
    InputNodeConfig,
    ConditionalEdgeConfig,
    ParallelEdgeConfig,
    LoopingEdgeConfig,
    create_node_config,
    create_edge_config,
    # Graph
    Position,
    Node,
    EdgeData,
    Edge,
    Workflow,
    # Wire
    WorkflowSpec,
    SpecNode,
    SpecEdge,
    SpecEdgeTargets,
)

# =============================================================================
# CONVERTERS
# =============================================================================

from .converters import (
    ReferenceResolver,
    is_foreign_reference,
    normalize_reference,
    normalize_workflow_references,
    SpecExporter,
    export_workflow,
    export_backend_spec,
    export_simple_spec,
    export_enhanced_spec,
    SpecImporter,
    import_workflow_spec,
    round_trip_differences,
    is_round_trip_equivalent,
    detect_document_format,
    load_workflow_document,
    workflow_to_document,
    workflow_from_document,
)

# =============================================================================
# BUILDERS / CONFIG
# =============================================================================

from .builders import WorkflowBuilder
from .config import Settings, get_settings

__version__ = "1.0.0"

__all__ = [
    # Enums
    "NodeKind",
    "EdgeKind",
    "DataType",
    "PortBinding",
    "ExportShape",
    "DocumentFormat",
    # Exceptions
    "WorkflowError",
    "SpecFormatError",
    "DocumentFormatError",
    "NodeNotFoundError",
    "EdgeNotFoundError",
    "NodeValidationError",
    "EdgeValidationError",
    "WorkflowValidationError",
    "SerializationError",
    # Ports
    "PortValue",
    "normalize_input_ports",
    "normalize_output_ports",
    "default_input_ports",
    "default_output_ports",
    # Config variants
    "ConfigValidationResult",
    "LLMNodeConfig",
    "ToolNodeConfig",
    "InterruptNodeConfig",
    "InputField",
    "InputNodeConfig",
    "ConditionalEdgeConfig",
    "ParallelEdgeConfig",
    "LoopingEdgeConfig",
    "create_node_config",
    "create_edge_config",
    # Graph
    "Position",
    "Node",
    "EdgeData",
    "Edge",
    "Workflow",
    # Wire
    "WorkflowSpec",
    "SpecNode",
    "SpecEdge",
    "SpecEdgeTargets",
    # Converters
    "ReferenceResolver",
    "is_foreign_reference",
    "normalize_reference",
    "normalize_workflow_references",
    "SpecExporter",
    "export_workflow",
    "export_backend_spec",
    "export_simple_spec",
    "export_enhanced_spec",
    "SpecImporter",
    "import_workflow_spec",
    "round_trip_differences",
    "is_round_trip_equivalent",
    "detect_document_format",
    "load_workflow_document",
    "workflow_to_document",
    "workflow_from_document",
    # Builders / config
    "WorkflowBuilder",
    "Settings",
    "get_settings",
]

"""
Flowgraph Converters

Translation between the workflow graph and its portable specification.
"""

from .reference_resolver import (
    ReferenceResolver,
    is_foreign_reference,
    normalize_reference,
    normalize_workflow_references,
    find_unresolved_references,
)
from .spec_exporter import (
    ShapeRules,
    SHAPE_RULES,
    SpecExporter,
    export_workflow,
    export_backend_spec,
    export_simple_spec,
    export_enhanced_spec,
)
from .spec_importer import (
    SpecImporter,
    parse_workflow_spec,
    config_keys_for,
    is_config_value,
    import_workflow_spec,
)
from .round_trip import round_trip_differences, is_round_trip_equivalent
from .document_io import (
    detect_document_format,
    load_workflow_document,
    workflow_to_document,
    workflow_from_document,
)

__all__ = [
    # Reference resolution
    "ReferenceResolver",
    "is_foreign_reference",
    "normalize_reference",
    "normalize_workflow_references",
    "find_unresolved_references",
    # Export
    "ShapeRules",
    "SHAPE_RULES",
    "SpecExporter",
    "export_workflow",
    "export_backend_spec",
    "export_simple_spec",
    "export_enhanced_spec",
    # Import
    "SpecImporter",
    "parse_workflow_spec",
    "config_keys_for",
    "is_config_value",
    "import_workflow_spec",
    # Round trip
    "round_trip_differences",
    "is_round_trip_equivalent",
    # Documents
    "detect_document_format",
    "load_workflow_document",
    "workflow_to_document",
    "workflow_from_document",
]

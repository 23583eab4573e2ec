"""
Default Configuration Values

These are fallback values when environment variables are not provided.
All values can be overridden via FLOWGRAPH_* environment variables.

Version: 1.0.0
"""

from ..defaults import (
    DEFAULT_SPEC_VERSION,
    DEFAULT_EXPORT_SHAPE,
    DEFAULT_CONDITION,
    DEFAULT_EDGE_ID_PREFIX,
    DEFAULT_IMPORTED_WORKFLOW_PREFIX,
    DEFAULT_WORKFLOW_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_JSON_INDENT,
)


class Defaults:
    """Fallback values for Settings."""

    # Wire format
    SPEC_VERSION = DEFAULT_SPEC_VERSION
    EXPORT_SHAPE = DEFAULT_EXPORT_SHAPE
    CONDITION = DEFAULT_CONDITION

    # Identifiers
    EDGE_ID_PREFIX = DEFAULT_EDGE_ID_PREFIX
    IMPORTED_WORKFLOW_PREFIX = DEFAULT_IMPORTED_WORKFLOW_PREFIX
    WORKFLOW_NAME = DEFAULT_WORKFLOW_NAME

    # Tooling
    LOG_LEVEL = DEFAULT_LOG_LEVEL
    JSON_INDENT = DEFAULT_JSON_INDENT

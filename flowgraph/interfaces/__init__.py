"""
Flowgraph Interfaces

This module defines all interfaces for the flowgraph converters.
"""

from .converter_interfaces import (
    IWorkflowExporter,
    IWorkflowImporter,
)

__all__ = [
    "IWorkflowExporter",
    "IWorkflowImporter",
]

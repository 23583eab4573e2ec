"""
Converter Interfaces

Protocols for the components that translate between the workflow graph and
its portable specification.

Version: 1.0.0
"""

from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from ..spec.workflow_models import Workflow
from ..spec.wire_models import WorkflowSpec


@runtime_checkable
class IWorkflowExporter(Protocol):
    """
    Protocol for workflow exporters.

    An exporter is a pure function of the workflow it is given.
    """

    def export(self, workflow: Workflow) -> WorkflowSpec:
        """
        Compile a workflow.

        Args:
            workflow: Workflow to export

        Returns:
            WorkflowSpec model
        """
        ...

    def export_dict(self, workflow: Workflow) -> Dict[str, Any]:
        """Compile a workflow into a JSON-serializable dictionary."""
        ...


@runtime_checkable
class IWorkflowImporter(Protocol):
    """Protocol for workflow importers."""

    def import_spec(self, data: Any) -> Workflow:
        """
        Reconstruct a workflow from a decoded document.

        Raises:
            SpecFormatError: If the document cannot be parsed
        """
        ...

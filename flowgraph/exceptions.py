"""
Flowgraph Exceptions Module.

This module defines all custom exceptions used throughout the flowgraph package.
"""

from typing import Any, Dict, List, Optional


class WorkflowError(Exception):
    """Base exception for all workflow-related errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class SpecFormatError(WorkflowError):
    """
    Raised when a workflow spec document cannot be parsed at all.

    This is the only error the importer surfaces: the document is not an
    object, lacks the ``nodes``/``edges`` arrays, or fails wire validation.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            error_code="SPEC_FORMAT_ERROR",
            details=details,
        )


class DocumentFormatError(WorkflowError):
    """Raised when a full-graph workflow document is not a JSON object."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            error_code="DOCUMENT_FORMAT_ERROR",
            details=details,
        )


class NodeNotFoundError(WorkflowError):
    """Raised when a node cannot be found in a workflow."""

    def __init__(
        self,
        node_id: str,
        workflow_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            f"Node not found: {node_id}",
            error_code="NODE_NOT_FOUND",
            details=details,
        )
        self.node_id = node_id
        self.workflow_id = workflow_id


class EdgeNotFoundError(WorkflowError):
    """Raised when an edge cannot be found in a workflow."""

    def __init__(
        self,
        edge_id: str,
        workflow_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            f"Edge not found: {edge_id}",
            error_code="EDGE_NOT_FOUND",
            details=details,
        )
        self.edge_id = edge_id
        self.workflow_id = workflow_id


class NodeValidationError(WorkflowError):
    """Raised when a node cannot be added or constructed as requested."""

    def __init__(
        self,
        message: str,
        node_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            error_code="NODE_VALIDATION_ERROR",
            details=details,
        )
        self.node_id = node_id


class EdgeValidationError(WorkflowError):
    """Raised when an edge cannot be added as requested."""

    def __init__(
        self,
        message: str,
        edge_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            error_code="EDGE_VALIDATION_ERROR",
            details=details,
        )
        self.edge_id = edge_id


class WorkflowValidationError(WorkflowError):
    """Raised when workflow validation fails."""

    def __init__(
        self,
        message: str,
        validation_errors: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        all_details = details or {}
        all_details["validation_errors"] = validation_errors or []
        super().__init__(
            message,
            error_code="WORKFLOW_VALIDATION_ERROR",
            details=all_details,
        )
        self.validation_errors = validation_errors or []


class SerializationError(WorkflowError):
    """Raised when serialization or deserialization fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            error_code="SERIALIZATION_ERROR",
            details=details,
        )

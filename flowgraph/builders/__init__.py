"""
Workflow Builders

Provides the fluent builder for workflow graphs and sample workflows.
"""

from .workflow_builder import WorkflowBuilder
from .samples import youtube_summarizer_workflow, simple_api_workflow

__all__ = [
    "WorkflowBuilder",
    "youtube_summarizer_workflow",
    "simple_api_workflow",
]

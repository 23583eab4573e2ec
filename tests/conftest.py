"""
Shared fixtures for flowgraph tests.
"""

import pytest

from flowgraph import NodeKind, WorkflowBuilder, get_settings


# ============================================================================
# SETTINGS
# ============================================================================

@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and any FLOWGRAPH_ environment overrides."""
    for name in [
        "FLOWGRAPH_DEFAULT_EXPORT_SHAPE",
        "FLOWGRAPH_DEFAULT_CONDITION",
        "FLOWGRAPH_SPEC_VERSION",
        "FLOWGRAPH_EDGE_ID_PREFIX",
    ]:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# WORKFLOWS
# ============================================================================

@pytest.fixture
def loop_workflow():
    """
    start -> input -> tool -> llm -> input, with input falling back to end.

    The input -> tool edge is conditional.
    """
    return (WorkflowBuilder()
        .with_id("loop-flow")
        .with_name("Loop Flow")
        .add_start()
        .add_node("input", NodeKind.INTERRUPT, label="Ask")
        .add_node("tool", NodeKind.TOOL, label="Fetch")
        .add_node("llm", NodeKind.LLM, label="Summarize")
        .add_end()
        .connect("start", "input")
        .connect_conditional("input", "tool", "input.value != 'exit'")
        .connect("input", "end")
        .connect("tool", "llm")
        .connect("llm", "input")
        .build())


@pytest.fixture
def status_workflow():
    """A tool node with two declared outputs and a consumer using a positional reference."""
    return (WorkflowBuilder()
        .with_id("status-flow")
        .add_start()
        .add_node("node7", NodeKind.TOOL, outputs=["status", "result"])
        .add_node("consumer", NodeKind.LLM, inputs={"context": "$node7.0"})
        .add_end()
        .connect("start", "node7")
        .connect("node7", "consumer")
        .connect("consumer", "end")
        .build())

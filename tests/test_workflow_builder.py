"""
Tests for the fluent WorkflowBuilder.
"""

import pytest

from flowgraph import (
    EdgeKind,
    LoopingEdgeConfig,
    NodeKind,
    ParallelEdgeConfig,
    WorkflowBuilder,
)
from flowgraph.builders import simple_api_workflow, youtube_summarizer_workflow


@pytest.mark.unit
class TestWorkflowBuilder:
    """Test workflow construction."""

    def test_basic_build(self):
        workflow = (WorkflowBuilder()
            .with_id("chat")
            .with_name("Chat")
            .with_description("Answers questions")
            .add_start()
            .add_node("llm", NodeKind.LLM, label="Answer", position=(200, 50))
            .add_end()
            .connect("start", "llm")
            .connect("llm", "end")
            .build())
        assert workflow.id == "chat"
        assert workflow.description == "Answers questions"
        assert workflow.node_ids() == ["start", "llm", "end"]
        assert [edge.id for edge in workflow.edges] == ["edge-1", "edge-2"]
        assert workflow.find_node("llm").position.x == 200
        assert workflow.validate() == []

    def test_generated_workflow_id(self):
        assert WorkflowBuilder().build().id.startswith("workflow-")

    def test_edge_kinds(self):
        workflow = (WorkflowBuilder()
            .add_node("a", NodeKind.LLM)
            .add_node("b", NodeKind.LLM)
            .connect_conditional("a", "b", "ok", edge_id="c1", label="If ok")
            .connect_parallel("a", "b", wait_for_all=False)
            .connect_looping("b", "a", max_iterations=2, break_condition="done")
            .build())
        conditional, parallel, looping = workflow.edges
        assert conditional.id == "c1"
        assert conditional.label == "If ok"
        assert conditional.get_condition() == "ok"
        assert parallel.kind == EdgeKind.PARALLEL
        assert parallel.config == ParallelEdgeConfig(wait_for_all=False)
        assert looping.config == LoopingEdgeConfig(max_iterations=2, break_condition="done")

    def test_bind_input(self):
        workflow = (WorkflowBuilder()
            .add_node("tool", NodeKind.TOOL)
            .add_node("llm", NodeKind.LLM)
            .bind_input("llm", "context", "tool", "result")
            .build())
        port = workflow.find_node("llm").inputs["context"]
        assert port.is_connection
        assert port.value == "$tool.result"

    def test_remove_node_drops_edges(self):
        workflow = (WorkflowBuilder()
            .add_start()
            .add_node("a", NodeKind.LLM)
            .add_end()
            .connect("start", "a")
            .connect("a", "end")
            .remove_node("a")
            .build())
        assert workflow.node_ids() == ["start", "end"]
        assert workflow.edges == []


@pytest.mark.unit
class TestSamples:
    """Test the bundled sample workflows."""

    @pytest.mark.parametrize("factory", [youtube_summarizer_workflow, simple_api_workflow])
    def test_samples_are_valid(self, factory):
        assert factory().validate() == []

    def test_youtube_sample_ports(self):
        workflow = youtube_summarizer_workflow()
        assert workflow.find_node("youtube_tool").inputs["video_url"].value == "$input.value"
        assert workflow.find_node("llm").inputs["context"].value == "$youtube_tool.transcript"
        assert workflow.find_node("llm").output_names() == ["summary", "response"]

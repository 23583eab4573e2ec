"""
Tests for the spec exporter.

Covers:
- Source grouping with __start__/__end__ sentinels
- Conditional groups and their fallback target
- Kind-default ports and configuration flattening
- The backend, simple and enhanced shapes
"""

import copy

import pytest

from flowgraph import (
    ExportShape,
    NodeKind,
    SpecExporter,
    WorkflowBuilder,
    export_backend_spec,
    export_enhanced_spec,
    export_simple_spec,
    export_workflow,
)
from flowgraph.config import Settings


def _group(spec, source):
    return next(edge["to"] for edge in spec["edges"] if edge["from"] == source)


def _sources(spec):
    return [edge["from"] for edge in spec["edges"]]


# ============================================================================
# EDGE GROUPING
# ============================================================================

@pytest.mark.unit
class TestEdgeGrouping:
    """Test how edges are grouped by source."""

    def test_loop_workflow_backend(self, loop_workflow):
        spec = export_backend_spec(loop_workflow)
        assert _sources(spec) == ["__start__", "input", "tool", "llm"]
        assert _group(spec, "__start__") == {"nodes": ["input"]}
        assert _group(spec, "input") == {
            "conditional_edges": [{"if": {"condition": "input.value != 'exit'"}, "node": "tool"}],
            "nodes": ["__end__"],
        }
        assert _group(spec, "tool") == {"nodes": ["llm"]}
        assert _group(spec, "llm") == {"nodes": ["input"]}

    def test_start_group_comes_first(self):
        workflow = (WorkflowBuilder()
            .add_node("a", NodeKind.LLM)
            .add_start()
            .add_end()
            .connect("a", "end")
            .connect("start", "a")
            .build())
        assert _sources(export_backend_spec(workflow)) == ["__start__", "a"]

    def test_single_fallback_becomes_default(self):
        workflow = (WorkflowBuilder()
            .add_start()
            .add_node("ask", NodeKind.INTERRUPT)
            .add_node("yes", NodeKind.LLM)
            .add_node("no", NodeKind.LLM)
            .connect("start", "ask")
            .connect_conditional("ask", "yes", "answer == 'y'")
            .connect("ask", "no")
            .build())
        group = _group(export_backend_spec(workflow), "ask")
        assert group["default"] == "no"
        assert "nodes" not in group

    def test_several_fallbacks_stay_in_nodes(self):
        workflow = (WorkflowBuilder()
            .add_node("ask", NodeKind.INTERRUPT)
            .add_node("yes", NodeKind.LLM)
            .add_node("a", NodeKind.LLM)
            .add_node("b", NodeKind.LLM)
            .connect_conditional("ask", "yes", "ok")
            .connect("ask", "a")
            .connect("ask", "b")
            .build())
        group = _group(export_backend_spec(workflow), "ask")
        assert group["nodes"] == ["a", "b"]
        assert "default" not in group

    def test_group_never_has_both_nodes_and_default(self, loop_workflow):
        for shape in ExportShape:
            for edge in export_workflow(loop_workflow, shape)["edges"]:
                assert not ("nodes" in edge["to"] and "default" in edge["to"])

    def test_blank_predicate_uses_default_condition(self):
        workflow = (WorkflowBuilder()
            .add_node("a", NodeKind.LLM)
            .add_node("b", NodeKind.LLM)
            .connect_conditional("a", "b", "  ")
            .build())
        settings = Settings(default_condition="always")
        branch = _group(export_backend_spec(workflow, settings), "a")["conditional_edges"][0]
        assert branch["if"]["condition"] == "always"

    def test_parallel_and_looping_edges_are_plain_targets(self):
        workflow = (WorkflowBuilder()
            .add_node("a", NodeKind.LLM)
            .add_node("b", NodeKind.LLM)
            .add_node("c", NodeKind.LLM)
            .connect_parallel("a", "b")
            .connect_looping("a", "c")
            .build())
        assert _group(export_backend_spec(workflow), "a") == {"nodes": ["b", "c"]}

    def test_workflow_without_start_node(self):
        workflow = (WorkflowBuilder()
            .add_node("a", NodeKind.LLM)
            .add_end()
            .connect("a", "end")
            .build())
        spec = export_backend_spec(workflow)
        assert _sources(spec) == ["a"]
        assert _group(spec, "a") == {"nodes": ["__end__"]}

    def test_second_start_node_keeps_its_id(self):
        workflow = (WorkflowBuilder()
            .add_start("s1")
            .add_start("s2")
            .add_node("a", NodeKind.LLM)
            .connect("s1", "a")
            .connect("s2", "a")
            .build())
        assert _sources(export_simple_spec(workflow)) == ["__start__", "s2"]


# ============================================================================
# NODES
# ============================================================================

@pytest.mark.unit
class TestNodeExport:
    """Test how nodes are flattened."""

    def test_tool_without_inputs_gets_default_ports(self):
        workflow = WorkflowBuilder().add_node("tool", NodeKind.TOOL, inputs={}, outputs={}).build()
        node = export_backend_spec(workflow)["nodes"][0]
        assert list(node["inputs"]) == ["endpoint", "method", "headers", "payload"]
        assert node["inputs"]["method"] == "GET"
        assert node["inputs"]["endpoint"] == "string"
        assert node["inputs"]["headers"] == "object"
        assert node["outputs"] == {"result": "any"}

    def test_own_ports_override_defaults(self):
        workflow = WorkflowBuilder().add_node("tool", NodeKind.TOOL, inputs={"method": "POST"}).build()
        node = export_backend_spec(workflow)["nodes"][0]
        assert node["inputs"]["method"] == "POST"
        assert "endpoint" in node["inputs"]

    def test_references_are_normalized(self, status_workflow):
        spec = export_backend_spec(status_workflow)
        consumer = next(node for node in spec["nodes"] if node["id"] == "consumer")
        assert consumer["inputs"]["context"] == "$node7.status"
        assert consumer["inputs"]["model"] == "$config.llm_model"

    def test_config_is_flattened_into_inputs(self):
        workflow = (WorkflowBuilder()
            .add_node("tool", NodeKind.TOOL, config={"toolName": "search", "parameters": {"q": 1}})
            .build())
        inputs = export_backend_spec(workflow)["nodes"][0]["inputs"]
        assert inputs["tool_name"] == "search"
        assert inputs["parameters"] == {"q": 1}

    def test_structured_config_keeps_json_type(self):
        workflow = (WorkflowBuilder()
            .add_node("form", NodeKind.USER_INPUT, config={"inputFields": [{"key": "url", "value": "URL"}]})
            .build())
        fields = export_backend_spec(workflow)["nodes"][0]["inputs"]["input_fields"]
        assert isinstance(fields, list)
        assert fields[0]["key"] == "url"
        assert fields[0]["label"] == "URL"

    def test_llm_model_has_its_own_key(self):
        workflow = WorkflowBuilder().add_node("llm", NodeKind.LLM, config={"model": "gpt-4o"}).build()
        inputs = export_backend_spec(workflow)["nodes"][0]["inputs"]
        assert inputs["model"] == "$config.llm_model"
        assert inputs["model_name"] == "gpt-4o"
        assert inputs["temperature"] == 0.7

    def test_port_wins_over_config_on_collision(self):
        workflow = (WorkflowBuilder()
            .add_node("ask", NodeKind.INTERRUPT, config={"prompt": "Continue?"}, inputs={"prompt": "$config.greeting"})
            .build())
        inputs = export_backend_spec(workflow)["nodes"][0]["inputs"]
        assert inputs["prompt"] == "$config.greeting"

    def test_unknown_kind_passes_through(self):
        workflow = WorkflowBuilder().add_node("x", "custom", inputs={"a": 1}, outputs={"b": "string"}).build()
        node = export_backend_spec(workflow)["nodes"][0]
        assert node["type"] == "custom"
        assert node["inputs"] == {"a": 1}
        assert node["outputs"] == {"b": "string"}

    def test_label_falls_back_to_id(self):
        workflow = WorkflowBuilder().add_node("x", NodeKind.LLM).build()
        assert export_backend_spec(workflow)["nodes"][0]["label"] == "x"


# ============================================================================
# SHAPES
# ============================================================================

@pytest.mark.unit
class TestShapes:
    """Test the differences between export shapes."""

    def test_backend_omits_terminal_nodes(self, loop_workflow):
        spec = export_backend_spec(loop_workflow)
        assert [node["id"] for node in spec["nodes"]] == ["input", "tool", "llm"]
        assert "position" not in spec["nodes"][0]
        assert "metadata" not in spec
        assert spec["version"] == "1.0"
        assert spec["name"] == "Loop Flow"

    def test_simple_keeps_terminal_nodes_and_positions(self, loop_workflow):
        spec = export_simple_spec(loop_workflow)
        assert [node["id"] for node in spec["nodes"]] == ["start", "input", "tool", "llm", "end"]
        assert spec["nodes"][0]["position"] == {"x": 0.0, "y": 0.0}
        assert spec["nodes"][0]["outputs"] == {"trigger": "boolean"}

    def test_simple_gives_purely_conditional_groups_an_end_default(self):
        workflow = (WorkflowBuilder()
            .add_node("a", NodeKind.LLM)
            .add_node("b", NodeKind.LLM)
            .connect_conditional("a", "b", "ok")
            .build())
        assert _group(export_simple_spec(workflow), "a")["default"] == "__end__"
        assert "default" not in _group(export_backend_spec(workflow), "a")

    def test_enhanced_metadata(self, loop_workflow):
        spec = export_enhanced_spec(loop_workflow)
        metadata = spec["metadata"]
        assert metadata["original_workflow_id"] == "loop-flow"
        assert "exported_at" in metadata
        assert [node["id"] for node in metadata["terminal_nodes"]] == ["start", "end"]
        assert set(metadata["node_positions"]) == {"start", "input", "tool", "llm", "end"}
        details = metadata["edge_details"]
        assert len(details) == len(loop_workflow.edges)
        assert details[0]["source"] == "__start__"
        assert details[1]["kind"] == "conditional"
        assert details[2]["target"] == "__end__"

    def test_default_shape_from_settings(self, loop_workflow):
        exporter = SpecExporter(settings=Settings(default_export_shape="simple"))
        assert exporter.shape == ExportShape.SIMPLE

    def test_default_shape_is_backend(self, loop_workflow):
        assert SpecExporter().shape == ExportShape.BACKEND


# ============================================================================
# PURITY
# ============================================================================

@pytest.mark.unit
class TestExportPurity:
    """Test that exporting never changes its input."""

    def test_workflow_unchanged(self, status_workflow):
        before = copy.deepcopy(status_workflow.to_dict())
        for shape in ExportShape:
            export_workflow(status_workflow, shape)
        assert status_workflow.to_dict() == before

    def test_export_is_deterministic(self, loop_workflow):
        assert export_backend_spec(loop_workflow) == export_backend_spec(loop_workflow)

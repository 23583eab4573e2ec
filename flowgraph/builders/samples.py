"""
Sample Workflows

Ready-made workflows for demos and tests.

Version: 1.0.0
"""

from ..enum import NodeKind
from ..spec.workflow_models import Workflow
from .workflow_builder import WorkflowBuilder


def youtube_summarizer_workflow() -> Workflow:
    """
    Ask for a YouTube URL, fetch its transcript, summarize it, and loop back
    for the next URL until the user types ``exit``.
    """
    return (WorkflowBuilder()
        .with_id("youtube-summarizer-sample")
        .with_name("YouTube Summarizer")
        .with_description("Summarizes YouTube videos until the user types exit")
        .add_start()
        .add_node(
            "input", NodeKind.INTERRUPT,
            label="YouTube URL Input",
            description="Input node for YouTube URL",
            position=(100, 100),
            inputs={
                "string": {"dataType": "string", "value": "", "connectedTo": "$interrupt.string"},
            },
            outputs={"value": {"dataType": "string"}},
            config={"prompt": "Paste a YouTube URL or type exit", "timeout": 300},
        )
        .add_node(
            "youtube_tool", NodeKind.TOOL,
            label="YouTube Transcript Extractor",
            description="Extracts transcript from YouTube video",
            position=(300, 100),
            inputs={
                "video_url": {"dataType": "string", "connectedTo": "$input.value"},
                "api_key": {"dataType": "string", "value": "$config.youtube_api_key", "isTemplate": True},
            },
            outputs={"transcript": {"dataType": "string"}},
            config={"toolName": "youtube_transcript"},
        )
        .add_node(
            "llm", NodeKind.LLM,
            label="LLM Summarizer",
            description="Summarizes the transcript using LLM",
            position=(500, 100),
            inputs=[
                {"name": "api_key", "dataType": "string", "value": "$config.llm_api_key", "isTemplate": True},
                {"name": "model", "dataType": "string", "value": "$config.llm_model", "isTemplate": True},
                {
                    "name": "system_prompt",
                    "dataType": "string",
                    "value": "You are a helpful assistant that summarizes YouTube transcripts.",
                },
                {"name": "user_prompt", "dataType": "string", "value": "Summarize the following transcript:"},
                {"name": "context", "dataType": "string", "reference": "$youtube_tool.transcript"},
            ],
            outputs=[{"name": "summary", "dataType": "string"}],
        )
        .add_end()
        .connect("start", "input")
        .connect_conditional("input", "youtube_tool", "input.value != 'exit'", label="If not exit")
        .connect("input", "end", label="Default to end")
        .connect("youtube_tool", "llm")
        .connect("llm", "input", label="Loop back")
        .build())


def simple_api_workflow() -> Workflow:
    """Call one HTTP endpoint and finish."""
    return (WorkflowBuilder()
        .with_id("simple-api-workflow")
        .with_name("Simple API Workflow")
        .add_start()
        .add_node(
            "api_call", NodeKind.TOOL,
            label="API Call",
            description="Make an API request",
            position=(300, 100),
            inputs={"endpoint": "https://api.example.com/data", "method": "GET"},
            outputs={"response": "object", "status_code": "number"},
        )
        .add_end()
        .connect("start", "api_call")
        .connect("api_call", "end")
        .build())

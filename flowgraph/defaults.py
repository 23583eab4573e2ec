"""
Flowgraph Default Values

Version: 1.0.0
"""

from .constants import (
    EDGE_KIND_DEFAULT,
    EXPORT_SHAPE_BACKEND,
    DATA_TYPE_ANY,
)

# =============================================================================
# SPEC DEFAULTS
# =============================================================================

DEFAULT_SPEC_VERSION = "1.0"
DEFAULT_EXPORT_SHAPE = EXPORT_SHAPE_BACKEND
DEFAULT_CONDITION = "true"

# =============================================================================
# WORKFLOW DEFAULTS
# =============================================================================

DEFAULT_WORKFLOW_NAME = "Untitled Workflow"
DEFAULT_IMPORTED_WORKFLOW_PREFIX = "imported"
DEFAULT_EDGE_ID_PREFIX = "edge"
DEFAULT_EDGE_KIND = EDGE_KIND_DEFAULT
DEFAULT_DATA_TYPE = DATA_TYPE_ANY
DEFAULT_POSITION_X = 0.0
DEFAULT_POSITION_Y = 0.0

# =============================================================================
# NODE CONFIG DEFAULTS
# =============================================================================

DEFAULT_LLM_MODEL = "gpt-4"
DEFAULT_LLM_TEMPERATURE = 0.7
DEFAULT_LLM_MAX_TOKENS = 1024
DEFAULT_LLM_TEMPERATURE_MAX = 2.0

DEFAULT_TOOL_NAME = ""

DEFAULT_INTERRUPT_PROMPT = "User input required"
DEFAULT_INTERRUPT_TIMEOUT_S = 60

DEFAULT_INPUT_FIELD_TYPE = "string"

# =============================================================================
# EDGE CONFIG DEFAULTS
# =============================================================================

DEFAULT_PARALLEL_WAIT_FOR_ALL = True
DEFAULT_PARALLEL_DESCRIPTION = "Executes all outgoing branches simultaneously."
DEFAULT_LOOP_MAX_ITERATIONS = 5
DEFAULT_LOOP_BREAK_CONDITION = ""

# =============================================================================
# TEMPLATE KEYS USED BY DEFAULT PORTS
# =============================================================================

DEFAULT_LLM_API_KEY_TEMPLATE = "llm_api_key"
DEFAULT_LLM_MODEL_TEMPLATE = "llm_model"
DEFAULT_TOOL_METHOD = "GET"

# =============================================================================
# SERIALIZATION DEFAULTS
# =============================================================================

DEFAULT_JSON_INDENT = 2
DEFAULT_LOG_LEVEL = "INFO"

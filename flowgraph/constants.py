"""
Flowgraph Constants

Defines string constants for the workflow graph and its portable
specification to maintain consistency and enable easy refactoring.

Version: 1.0.0
"""

# =============================================================================
# NODE KINDS
# =============================================================================

NODE_KIND_START = "start"
NODE_KIND_END = "end"
NODE_KIND_LLM = "llm"
NODE_KIND_TOOL = "tool"
NODE_KIND_INTERRUPT = "interrupt"
NODE_KIND_USER_INPUT = "userInput"

# Older exports wrote interrupt nodes with this wire type
LEGACY_NODE_KIND_INPUT = "input"

# =============================================================================
# EDGE KINDS
# =============================================================================

EDGE_KIND_DEFAULT = "default"
EDGE_KIND_CONDITIONAL = "conditional"
EDGE_KIND_PARALLEL = "parallel"
EDGE_KIND_LOOPING = "looping"

# =============================================================================
# DATA TYPES
# =============================================================================

DATA_TYPE_STRING = "string"
DATA_TYPE_NUMBER = "number"
DATA_TYPE_BOOLEAN = "boolean"
DATA_TYPE_OBJECT = "object"
DATA_TYPE_ARRAY = "array"
DATA_TYPE_FILE = "file"
DATA_TYPE_ANY = "any"
DATA_TYPE_FOREIGN = "foreign"

# =============================================================================
# PORT BINDINGS
# =============================================================================

PORT_BINDING_LITERAL = "literal"
PORT_BINDING_CONNECTION = "connection"
PORT_BINDING_TEMPLATE = "template"

# =============================================================================
# EXPORT SHAPES AND DOCUMENT FORMATS
# =============================================================================

EXPORT_SHAPE_SIMPLE = "simple"
EXPORT_SHAPE_BACKEND = "backend"
EXPORT_SHAPE_ENHANCED = "enhanced"

DOCUMENT_FORMAT_SPEC = "spec"
DOCUMENT_FORMAT_GRAPH = "graph"

# =============================================================================
# SENTINELS AND REFERENCE SYNTAX
# =============================================================================

START_SENTINEL = "__start__"
END_SENTINEL = "__end__"

REFERENCE_PREFIX = "$"
REFERENCE_SEPARATOR = "."
TEMPLATE_NAMESPACE = "config"
TEMPLATE_PREFIX = f"{REFERENCE_PREFIX}{TEMPLATE_NAMESPACE}{REFERENCE_SEPARATOR}"

# $<nodeId>.<N> written by older exports
LEGACY_INDEX_REFERENCE_PATTERN = r"^\$(?P<node_id>[^.]+)\.(?P<index>\d+)$"

# =============================================================================
# WIRE FORMAT KEYS
# =============================================================================

SPEC_KEY_VERSION = "version"
SPEC_KEY_ID = "id"
SPEC_KEY_NAME = "name"
SPEC_KEY_DESCRIPTION = "description"
SPEC_KEY_NODES = "nodes"
SPEC_KEY_EDGES = "edges"
SPEC_KEY_METADATA = "metadata"
SPEC_KEY_FROM = "from"
SPEC_KEY_TO = "to"
SPEC_KEY_IF = "if"

# LLM model name; the "model" key belongs to the deployment-time input port
WIRE_KEY_LLM_MODEL = "model_name"

# =============================================================================
# LEGACY PORT ENTRY KEYS
# =============================================================================

PORT_KEY_NAME = "name"
PORT_KEY_VALUE = "value"
PORT_KEY_REFERENCE = "reference"
PORT_KEY_CONNECTED_TO = "connectedTo"
PORT_KEY_DATA_TYPE = "dataType"
PORT_KEY_DATA_TYPE_SNAKE = "data_type"
PORT_KEY_IS_TEMPLATE = "isTemplate"
PORT_KEY_DEFAULT_VALUE = "defaultValue"

# =============================================================================
# GRAPH DOCUMENT KEYS
# =============================================================================

DOC_KEY_DATA = "data"
DOC_KEY_TYPE = "type"
DOC_KEY_SOURCE = "source"
DOC_KEY_TARGET = "target"
DOC_KEY_POSITION = "position"
DOC_KEY_LABEL = "label"
DOC_KEY_CONFIG = "config"
DOC_KEY_CONDITION = "condition"
DOC_KEY_INPUTS = "inputs"
DOC_KEY_OUTPUTS = "outputs"
DOC_KEY_ANIMATED = "animated"
DOC_KEY_STYLE = "style"
DOC_KEY_CREATED_AT = "createdAt"
DOC_KEY_UPDATED_AT = "updatedAt"

# =============================================================================
# PYDANTIC MODEL CONFIG KEYS
# =============================================================================

ARBITRARY_TYPES_ALLOWED = "arbitrary_types_allowed"
POPULATE_BY_NAME = "populate_by_name"
FROZEN = "frozen"

# =============================================================================
# ERROR MESSAGES
# =============================================================================

ERROR_NODE_NOT_FOUND = "Node '{node_id}' not found in workflow"
ERROR_EDGE_NOT_FOUND = "Edge '{edge_id}' not found in workflow"
ERROR_DUPLICATE_NODE_ID = "Node '{node_id}' already exists in workflow"
ERROR_DUPLICATE_EDGE_ID = "Edge '{edge_id}' already exists in workflow"
ERROR_SINGLETON_KIND = "Workflow cannot have more than one '{kind}' node"
ERROR_MULTIPLE_START_NODES = "Workflow cannot have multiple start nodes"
ERROR_DANGLING_EDGE = "Edge '{edge_id}' references unknown node '{node_id}'"
ERROR_FOREIGN_LITERAL = "Port '{port}' of type foreign must hold a connection reference"
ERROR_FOREIGN_LITERAL_VALUE = "Foreign ports cannot hold literal values"
ERROR_INVALID_CONFIG = "Node '{node_id}' has invalid configuration: {message}"
ERROR_INVALID_EDGE_CONFIG = "Edge '{edge_id}' has invalid configuration: {message}"
ERROR_SPEC_NOT_OBJECT = "Workflow spec must be a JSON object, got {actual}"
ERROR_SPEC_MISSING_ARRAY = "Workflow spec is missing the '{key}' array"
ERROR_SPEC_INVALID = "Workflow spec could not be parsed: {error}"
ERROR_DOCUMENT_NOT_OBJECT = "Workflow document must be a JSON object, got {actual}"

# Config variant validation messages
MSG_CONDITION_EMPTY = "Condition cannot be empty."
MSG_MAX_ITERATIONS_INVALID = "Max iterations must be a positive number."
MSG_TOOL_NAME_EMPTY = "Tool name cannot be empty."
MSG_TEMPERATURE_RANGE = "Temperature must be between 0 and 2."
MSG_MAX_TOKENS_INVALID = "Max tokens must be a positive number."
MSG_TIMEOUT_INVALID = "Timeout must be a positive number."
MSG_INPUT_FIELDS_EMPTY = "At least one input field is required."
MSG_INPUT_FIELDS_DUPLICATE = "Input field keys must be unique."
MSG_INPUT_FIELDS_BLANK = "All input fields must have both key and label."

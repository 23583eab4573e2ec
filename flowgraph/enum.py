"""
Flowgraph Enumerations

Version: 1.0.0
"""

from enum import Enum

from .constants import (
    # Node kinds
    NODE_KIND_START,
    NODE_KIND_END,
    NODE_KIND_LLM,
    NODE_KIND_TOOL,
    NODE_KIND_INTERRUPT,
    NODE_KIND_USER_INPUT,
    # Edge kinds
    EDGE_KIND_DEFAULT,
    EDGE_KIND_CONDITIONAL,
    EDGE_KIND_PARALLEL,
    EDGE_KIND_LOOPING,
    # Data types
    DATA_TYPE_STRING,
    DATA_TYPE_NUMBER,
    DATA_TYPE_BOOLEAN,
    DATA_TYPE_OBJECT,
    DATA_TYPE_ARRAY,
    DATA_TYPE_FILE,
    DATA_TYPE_ANY,
    DATA_TYPE_FOREIGN,
    # Port bindings
    PORT_BINDING_LITERAL,
    PORT_BINDING_CONNECTION,
    PORT_BINDING_TEMPLATE,
    # Export shapes / document formats
    EXPORT_SHAPE_SIMPLE,
    EXPORT_SHAPE_BACKEND,
    EXPORT_SHAPE_ENHANCED,
    DOCUMENT_FORMAT_SPEC,
    DOCUMENT_FORMAT_GRAPH,
)


class NodeKind(str, Enum):
    """Kinds of nodes that can be placed on a workflow graph."""
    START = NODE_KIND_START
    END = NODE_KIND_END
    LLM = NODE_KIND_LLM
    TOOL = NODE_KIND_TOOL
    INTERRUPT = NODE_KIND_INTERRUPT
    USER_INPUT = NODE_KIND_USER_INPUT


class EdgeKind(str, Enum):
    """Kinds of edges connecting two nodes."""
    DEFAULT = EDGE_KIND_DEFAULT
    CONDITIONAL = EDGE_KIND_CONDITIONAL
    PARALLEL = EDGE_KIND_PARALLEL
    LOOPING = EDGE_KIND_LOOPING


class DataType(str, Enum):
    """Declared type of a node port."""
    STRING = DATA_TYPE_STRING
    NUMBER = DATA_TYPE_NUMBER
    BOOLEAN = DATA_TYPE_BOOLEAN
    OBJECT = DATA_TYPE_OBJECT
    ARRAY = DATA_TYPE_ARRAY
    FILE = DATA_TYPE_FILE
    ANY = DATA_TYPE_ANY
    FOREIGN = DATA_TYPE_FOREIGN


class PortBinding(str, Enum):
    """What an input port value is bound to."""
    LITERAL = PORT_BINDING_LITERAL
    CONNECTION = PORT_BINDING_CONNECTION
    TEMPLATE = PORT_BINDING_TEMPLATE


class ExportShape(str, Enum):
    """Supported shapes of the exported workflow spec."""
    SIMPLE = EXPORT_SHAPE_SIMPLE
    BACKEND = EXPORT_SHAPE_BACKEND
    ENHANCED = EXPORT_SHAPE_ENHANCED


class DocumentFormat(str, Enum):
    """Formats accepted by the document loader."""
    SPEC = DOCUMENT_FORMAT_SPEC
    GRAPH = DOCUMENT_FORMAT_GRAPH

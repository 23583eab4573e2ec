"""
Serialization Utilities.

JSON reading and writing for workflow documents and specs. The converters
only exchange plain JSON-ready objects (``WorkflowSpec.to_dict`` and
``workflow_to_document``), so values are written as they are; anything
else is reported as a SerializationError.

Usage:
    from flowgraph.utils.serialization import to_json, from_json, save_json, load_json

    json_str = to_json(spec_dict)
    data = load_json("workflow.json")

Version: 1.0.0
"""

import json
from pathlib import Path
from typing import Any, Union

from ..exceptions import SerializationError


def to_json(data: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Serialize data to a JSON string.

    Raises:
        SerializationError: If data holds a value JSON cannot represent
    """
    try:
        return json.dumps(data, indent=indent, sort_keys=sort_keys)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to serialize to JSON: {e}") from e


def from_json(json_str: str) -> Any:
    """
    Deserialize a JSON string.

    Raises:
        SerializationError: If the string is not valid JSON
    """
    try:
        return json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            f"Invalid JSON: {e}",
            details={"line": e.lineno, "column": e.colno},
        ) from e


def save_json(data: Any, path: Union[str, Path], indent: int = 2) -> None:
    """
    Save data to a JSON file, creating parent directories.

    Raises:
        SerializationError: If serialization fails
        OSError: If the file cannot be written
    """
    path = Path(path)
    content = to_json(data, indent=indent)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding='utf-8')


def load_json(path: Union[str, Path]) -> Any:
    """
    Load data from a JSON file.

    Raises:
        SerializationError: If the file is not valid JSON
        FileNotFoundError: If the file doesn't exist
    """
    content = Path(path).read_text(encoding='utf-8')
    return from_json(content)

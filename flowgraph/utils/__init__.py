"""
Flowgraph Utilities
"""

from .serialization import to_json, from_json, save_json, load_json

__all__ = [
    "to_json",
    "from_json",
    "save_json",
    "load_json",
]

"""
Flowgraph Settings

Centralized settings with environment variable support.
Priority: Environment Variables > Defaults

Usage:
    from flowgraph.config import get_settings

    settings = get_settings()
    version = settings.spec_version

Version: 1.0.0
"""

from functools import lru_cache
from typing import Any, Dict

from pydantic import Field
from pydantic_settings import BaseSettings

from .defaults import Defaults
from ..enum import ExportShape


class Settings(BaseSettings):
    """
    Flowgraph settings with automatic environment variable loading.

    Environment variables are automatically loaded with the prefix FLOWGRAPH_.
    Example: FLOWGRAPH_DEFAULT_EXPORT_SHAPE=simple overrides default_export_shape
    """

    # =========================================================================
    # Wire Format
    # =========================================================================
    spec_version: str = Field(
        default=Defaults.SPEC_VERSION,
        description="Version string written to exported specs"
    )
    default_export_shape: ExportShape = Field(
        default=ExportShape(Defaults.EXPORT_SHAPE),
        description="Shape used when no shape is passed to the exporter"
    )
    default_condition: str = Field(
        default=Defaults.CONDITION,
        description="Condition emitted for conditional edges without a predicate"
    )

    # =========================================================================
    # Identifiers
    # =========================================================================
    edge_id_prefix: str = Field(default=Defaults.EDGE_ID_PREFIX)
    imported_workflow_prefix: str = Field(default=Defaults.IMPORTED_WORKFLOW_PREFIX)
    default_workflow_name: str = Field(default=Defaults.WORKFLOW_NAME)

    # =========================================================================
    # Tooling
    # =========================================================================
    log_level: str = Field(default=Defaults.LOG_LEVEL)
    json_indent: int = Field(default=Defaults.JSON_INDENT)

    model_config = {
        "env_prefix": "FLOWGRAPH_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def to_dict(self) -> Dict[str, Any]:
        """Export settings to dictionary."""
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Call Settings() directly if you need a fresh instance, or
    get_settings.cache_clear() after changing the environment.

    Returns:
        Settings instance
    """
    return Settings()

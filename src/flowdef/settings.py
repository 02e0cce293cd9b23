"""Settings loaded from environment variables (prefix ``FLOWDEF_``) with .env support."""

from functools import lru_cache
from typing import Dict, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .workflow.metrics import NODE_DURATIONS
from .workflow.models import NodeType


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FLOWDEF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Metrics estimator; a FLOWDEF_NODE_DURATIONS JSON object replaces the whole table
    node_durations: Dict[NodeType, float] = Field(
        default_factory=lambda: dict(NODE_DURATIONS),
        description="Minutes per node type",
    )
    default_node_duration: float = Field(default=5.0, ge=0, description="Minutes for node types missing from node_durations")
    branching_weight: int = Field(default=2, ge=0, description="Extra complexity per condition/approval node")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

"""Configuration management for the deprecation audit.

Loads configuration from environment variables using Pydantic models.
Provides sensible defaults for all settings while allowing override via
environment.

Provides:
- Config: Pydantic model with all application settings
- load_config: Factory function to create Config instance
"""

import os

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Audit configuration loaded from environment.

    Attributes:
        log_level: Minimum structlog level emitted by the CLI
        deprecation_source_tag: Console message ``source`` value that marks
            a legacy entry as a deprecation warning
    """

    log_level: str = Field(
        default_factory=lambda: os.getenv("DEPRECATION_AUDIT_LOG_LEVEL", "warning")
    )
    deprecation_source_tag: str = Field(
        default_factory=lambda: os.getenv("DEPRECATION_AUDIT_SOURCE_TAG", "deprecation")
    )


def load_config() -> Config:
    """Load configuration from environment.

    Returns:
        Populated Config instance
    """
    return Config()

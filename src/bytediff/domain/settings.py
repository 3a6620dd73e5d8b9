"""
Service settings domain model.

This module defines the settings that control storage, the HTTP listener
and logging for the whole application.
"""

import logging
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


class ServiceSettings(BaseModel):
    """
    Runtime settings for bytediff.

    Loaded from service_settings.json; CLI flags may override single fields.
    """

    storage_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Where diff cases are persisted"
    )

    database_path: str = Field(
        default="output/diff_cases.db",
        description="SQLite database file (sqlite backend only)"
    )

    host: str = Field(
        default="127.0.0.1",
        description="Interface the HTTP API binds to"
    )

    port: int = Field(
        default=8080,
        description="Port the HTTP API listens on",
        ge=1,
        le=65535
    )

    max_request_bytes: int = Field(
        default=16 * 1024 * 1024,
        description="Largest accepted request body in bytes",
        ge=1024
    )

    log_level: str = Field(
        default="INFO",
        description="Console log level"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Optional log file (always written at DEBUG)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only standard logging level names."""
        name = v.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v}")
        return name

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

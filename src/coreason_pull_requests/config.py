# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_pull_requests

"""
Configuration management for git-pull-requests.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OutputFormat(str, Enum):
    """Output formats understood by the reporters."""

    MARKDOWN = "markdown"


class Config(BaseModel):
    """
    Presentation options for a single run.
    """

    model_config = {"frozen": True}

    output_format: OutputFormat = Field(default=OutputFormat.MARKDOWN, description="Selected output format.")
    repo_name: Optional[str] = Field(default=None, description="Repository name printed before the PR number.")
    omit_author: bool = Field(default=False, description="Do not print pull request authors.")


class Settings(BaseSettings):
    """
    Process level configuration using environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="GIT_PULL_REQUESTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Minimum level of diagnostics written to stderr."
    )
    log_file: Optional[Path] = Field(default=None, description="Optional log file receiving debug output.")
    git_timeout: float = Field(default=300, description="Timeout in seconds for git commands.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("git_timeout")
    @classmethod
    def validate_git_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("git_timeout must be positive.")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Returns a cached instance of the Settings class.
    """
    return Settings()

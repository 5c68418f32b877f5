"""
CLI context and configuration.

Manages CLI state, exit codes, and shared context.
"""

from __future__ import annotations

import os
from enum import IntEnum
from pathlib import Path  # noqa: TC003

from pydantic import BaseModel, Field

# Default input size limit for CLI usage (can be overridden via flag/env).
DEFAULT_MAX_BYTES = 16 * 1024 * 1024  # 16 MiB

MAX_BYTES_ENV = "ZENGIN_LINT_MAX_BYTES"


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # No issues found
    ERROR = 1  # Validation errors found
    FATAL = 2  # File could not be read
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


class CliContext(BaseModel):
    """Shared context for CLI commands."""

    # Output settings
    format: str = Field(default="terminal")
    output_file: Path | None = Field(default=None)
    color: bool = Field(default=True)
    quiet: bool = Field(default=False)
    verbose: bool = Field(default=False)

    # Validation settings
    config_file: Path | None = Field(default=None)
    fail_on: str = Field(default="error")  # error, warning
    max_bytes: int | None = Field(default=DEFAULT_MAX_BYTES)

    model_config = {"frozen": False}


def resolve_max_bytes(max_bytes: int | None) -> int | None:
    """
    Resolve the input size limit from flag, environment or default.

    Returns:
        Limit in bytes, None for unlimited

    Raises:
        ValueError: If the environment variable is not an integer
    """
    if max_bytes is not None:
        return None if max_bytes <= 0 else max_bytes

    env_value = os.environ.get(MAX_BYTES_ENV)
    if env_value:
        try:
            parsed = int(env_value)
        except ValueError:
            raise ValueError(f"{MAX_BYTES_ENV} must be an integer") from None
        return None if parsed <= 0 else parsed

    return DEFAULT_MAX_BYTES


def get_exit_code(has_io_error: bool, has_error: bool, has_warning: bool, fail_on: str) -> ExitCode:
    """Determine exit code based on diagnostics and fail_on setting."""
    if has_io_error:
        return ExitCode.FATAL

    fail_on_lower = fail_on.lower()

    if fail_on_lower == "warning":
        if has_error or has_warning:
            return ExitCode.ERROR
    elif has_error:
        return ExitCode.ERROR

    return ExitCode.SUCCESS

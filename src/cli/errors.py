"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from src.webscript_client.errors import WebScriptError


class CLIError(WebScriptError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when the connection configuration file is missing or invalid."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Config error in field '{config_field}': {message}"
        else:
            full_message = f"Config error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message


class StateError(CLIError):
    """Raised when cursor state file validation fails."""

    def __init__(self, message: str, state_field: Optional[str] = None):
        if state_field:
            full_message = f"State error in field '{state_field}': {message}"
        else:
            full_message = f"State error: {message}"
        super().__init__(full_message)
        self.state_field = state_field
        self.original_message = message


class StateFilesystemError(CLIError):
    """Raised when cursor state file filesystem operations fail."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"State file operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason

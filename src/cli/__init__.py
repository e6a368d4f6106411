"""Command-line interface for the repository web script client.

This package provides the `webscript-sync` CLI tool that loads connection
settings, persists the change-feed cursor between runs and prints the result
of one web script call per invocation.
"""

from .config import ConfigLoader, StateManager
from .models import ExitCode, ConnectionConfig
from .errors import (
    CLIError,
    ConfigError,
    StateError,
    StateFilesystemError,
)

__all__ = [
    'ConfigLoader',
    'StateManager',
    'ExitCode',
    'ConnectionConfig',
    'CLIError',
    'ConfigError',
    'StateError',
    'StateFilesystemError',
]

"""Connection config and cursor state file handling.

This module loads the repository connection settings from a YAML config file
and persists the change-feed cursor between runs in a YAML state file.
"""

import os
from typing import Any, Dict

import yaml

from src.webscript_client.filters import IndexingFilters
from src.webscript_client.models import Cursor

from .errors import ConfigError, StateError, StateFilesystemError
from .models import ConnectionConfig


def _read_yaml(path: str) -> Any:
    """Read and parse a YAML file; returns None for an empty file."""
    with open(path, 'r', encoding='utf-8') as f:
        content = f.read()
    if not content.strip():
        return None
    return yaml.safe_load(content)


class ConfigLoader:
    """Loads and validates the connection config file.

    Config file structure:
        hostname: "localhost:8080"
        protocol: "http"
        endpoint: "/alfresco/service"
        store_protocol: "workspace"
        store_id: "SpacesStore"
        timeout: 30
        filters:
          siteFilters: ["swsdp"]
    """

    DEFAULT_CONFIG_DIR = '.webscript-sync'
    DEFAULT_CONFIG_FILE = 'config.yaml'

    _STRING_FIELDS = ('protocol', 'endpoint', 'store_protocol', 'store_id')

    @classmethod
    def default_path(cls) -> str:
        return os.path.join(cls.DEFAULT_CONFIG_DIR, cls.DEFAULT_CONFIG_FILE)

    @classmethod
    def load(cls, config_path: str) -> ConnectionConfig:
        """Load and parse connection settings from a YAML file.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        try:
            config_dict = _read_yaml(config_path)
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found at {config_path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {str(e)}")

        if config_dict is None:
            raise ConfigError(f"Configuration file {config_path} is empty")

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Config must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ConnectionConfig:
        hostname = config_dict.get('hostname')
        if not isinstance(hostname, str) or not hostname.strip():
            raise ConfigError("Field 'hostname' is required and must be a non-empty string", 'hostname')

        values: Dict[str, Any] = {'hostname': hostname.strip()}
        for name in cls._STRING_FIELDS:
            if name in config_dict:
                value = config_dict[name]
                if not isinstance(value, str):
                    raise ConfigError(
                        f"Field '{name}' must be a string, got {type(value).__name__}",
                        name
                    )
                values[name] = value

        if 'timeout' in config_dict:
            timeout = config_dict['timeout']
            if timeout is not None and (
                isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
            ):
                raise ConfigError("Field 'timeout' must be a positive number or null", 'timeout')
            values['timeout'] = timeout

        filters = config_dict.get('filters')
        if filters is not None:
            if not isinstance(filters, dict):
                raise ConfigError(
                    f"Field 'filters' must be a dictionary, got {type(filters).__name__}",
                    'filters'
                )
            values['filters'] = IndexingFilters.from_dict(filters)

        return ConnectionConfig(**values)


class StateManager:
    """Handles cursor state file loading, validation, and saving.

    State file structure:
        last_transaction_id: 1234
        last_acl_changeset_id: 56

    If the file is missing or empty, it's treated as a fresh state and the
    initial cursor is returned.
    """

    DEFAULT_STATE_DIR = '.webscript-sync'
    DEFAULT_STATE_FILE = 'state.yaml'

    @classmethod
    def default_path(cls) -> str:
        return os.path.join(cls.DEFAULT_STATE_DIR, cls.DEFAULT_STATE_FILE)

    @classmethod
    def load(cls, state_path: str) -> Cursor:
        """Load the cursor from a YAML state file.

        Raises:
            StateFilesystemError: If file cannot be read (except FileNotFoundError)
            StateError: If state file is invalid or malformed
        """
        try:
            state_dict = _read_yaml(state_path)
        except FileNotFoundError:
            # Missing state file is normal for the first run
            return Cursor()
        except yaml.YAMLError as e:
            raise StateError(f"Invalid YAML syntax: {str(e)}")
        except PermissionError:
            raise StateFilesystemError(state_path, 'read', 'Permission denied')
        except OSError as e:
            raise StateFilesystemError(state_path, 'read', str(e))

        if state_dict is None:
            return Cursor()

        if not isinstance(state_dict, dict):
            raise StateError(
                f"State must be a YAML dictionary, got {type(state_dict).__name__}"
            )

        return Cursor(
            last_transaction_id=cls._parse_id(state_dict, 'last_transaction_id'),
            last_acl_changeset_id=cls._parse_id(state_dict, 'last_acl_changeset_id'),
        )

    @classmethod
    def save(cls, state_path: str, cursor: Cursor) -> None:
        """Save the cursor to a YAML state file.

        Raises:
            StateFilesystemError: If file cannot be written
        """
        yaml_str = yaml.safe_dump(
            {
                'last_transaction_id': cursor.last_transaction_id,
                'last_acl_changeset_id': cursor.last_acl_changeset_id,
            },
            default_flow_style=False,
            sort_keys=False
        )

        state_dir = os.path.dirname(state_path)
        if state_dir:
            try:
                os.makedirs(state_dir, exist_ok=True)
            except OSError as e:
                raise StateFilesystemError(state_dir, 'create_directory', str(e))

        try:
            with open(state_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise StateFilesystemError(state_path, 'write', 'Permission denied')
        except OSError as e:
            raise StateFilesystemError(state_path, 'write', str(e))

    @classmethod
    def _parse_id(cls, state_dict: Dict[str, Any], name: str) -> int:
        value = state_dict.get(name, 0)
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, int):
            raise StateError(
                f"Field '{name}' must be an integer, got {type(value).__name__}",
                name
            )
        if value < 0:
            raise StateError(f"Field '{name}' cannot be negative", name)
        return value

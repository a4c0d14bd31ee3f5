"""
YAML configuration for the tldsplit CLI.

Example file:

    source:
      location: https://publicsuffix.org/list/public_suffix_list.dat
      frozen: false
      timeout: 30
    output:
      format: table
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from tldsplit.exceptions import ConfigError

DEFAULT_PSL_URL = 'https://publicsuffix.org/list/public_suffix_list.dat'

DEFAULTS: Dict[str, Any] = {
    'source': {
        'location': DEFAULT_PSL_URL,
        'frozen': False,
        'timeout': 30,
    },
    'output': {
        'format': 'table',
    },
}

OUTPUT_FORMATS = ('table', 'json')


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration values addressed by dotted keys, e.g. 'source.timeout'"""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data = _merge(DEFAULTS, data or {})

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dotted key"""
        node: Any = self.data
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def validate(self) -> None:
        """
        Check value types.

        Raises:
            ConfigError: On the first invalid value
        """
        if not isinstance(self.get('source.location'), str) or not self.get('source.location').strip():
            raise ConfigError("source.location must be a non-empty string")

        if not isinstance(self.get('source.frozen'), bool):
            raise ConfigError("source.frozen must be true or false")

        timeout = self.get('source.timeout')
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("source.timeout must be a positive number")

        if self.get('output.format') not in OUTPUT_FORMATS:
            raise ConfigError(f"output.format must be one of: {', '.join(OUTPUT_FORMATS)}")

    def __repr__(self):
        return f"<Config source={self.get('source.location')}>"


def load_config(path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from a YAML file.

    A missing path (None) gives the defaults; a path that does not exist is
    an error since it was asked for explicitly.

    Raises:
        ConfigError: If the file cannot be read or parsed, or is invalid
    """
    if path is None:
        return Config()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"config file not found or unreadable: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file must contain a mapping: {path}")

    config = Config(data)
    config.validate()
    return config

"""Utility functions for application configuration management.

Store configuration is resolved from three layers, each one overriding
the previous:

    1. Built-in defaults (see `localshortener.constants.Defaults`)
    2. An optional YAML file
    3. Environment variables (`SHORTENER_DOMAIN`, `SHORTENER_DATA_FILE`)

The YAML file is looked up in this order:

    - the `path` argument of `load_config()`;
    - the `SHORTENER_CONFIG_FILE` environment variable;
    - `<project root>/config/<app env>.yml`, used only if it exists.

Expected YAML structure:

    store:
      domain: http://short.rl/
      data_file: /var/lib/localshortener/url_data.json

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    load_yaml(path: Path) -> dict
        Safely load a YAML document, defaulting to {} for empty files.

    load_config(path: str | Path | None = None) -> StoreConfig
        Resolve the store configuration.

Example:
    >>> from localshortener.utils.config import load_config
    >>> os.environ['SHORTENER_DOMAIN'] = 'https://sho.rt/'
    >>> load_config().domain
    'https://sho.rt/'
"""

import os
import logging
from pathlib import Path
from typing import Any

import yaml

from localshortener.constants import ENV, Defaults
from localshortener.exceptions import BadConfigurationError
from localshortener.models import StoreConfig


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Reads the PROJECT_ROOT environment variable and falls back to the
    current working directory.

    Returns:
        Path:
            Absolute path to the project root directory.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd())).resolve()


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file into a Python dictionary.

    Args:
        path (Path):
            Path to a YAML file.

    Returns:
        dict[str, Any]:
            Parsed YAML document. Returns {} for empty files.

    Raises:
        FileNotFoundError:
            If the file does not exist.
        BadConfigurationError:
            If the file is not valid YAML or its top level is not a mapping.
    """
    if not path.is_file():
        raise FileNotFoundError(f'YAML not found: {path}')

    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise BadConfigurationError(f'Invalid YAML in {path}: {e}') from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Configuration in {path} must be a mapping (given type: {type(data).__name__}).')
    return data


def _config_file(path: str | Path | None) -> Path | None:
    if path is not None:
        return Path(path)

    from_env = os.environ.get(ENV.Store.CONFIG_FILE)
    if from_env:
        return Path(from_env)

    candidate = project_root() / 'config' / f'{app_env()}.yml'
    return candidate if candidate.is_file() else None


def load_config(path: str | Path | None = None) -> StoreConfig:
    """Resolve the store configuration from defaults, YAML and environment

    Args:
        path (str | Path | None):
            Explicit YAML configuration file. When given, the file must exist.

    Returns:
        StoreConfig: resolved domain and data file.

    Raises:
        FileNotFoundError:
            If an explicitly requested configuration file does not exist.
        BadConfigurationError:
            If the YAML document or one of its values is malformed.

    Example:
        >>> load_config('config/dev.yml')
        StoreConfig(domain='http://short.rl/', data_file='url_data.json')
    """
    values: dict[str, Any] = {'domain': Defaults.DOMAIN, 'data_file': Defaults.DATA_FILE}

    config_file = _config_file(path)
    if config_file is not None:
        section = load_yaml(config_file).get('store') or {}
        if not isinstance(section, dict):
            raise BadConfigurationError(f"'store' section in {config_file} must be a mapping.")
        for key in values:
            if key in section:
                values[key] = section[key]
        logger.debug('Loaded configuration file.', extra={'configFile': str(config_file)})

    # fmt: off
    overrides = {
        'domain': os.environ.get(ENV.Store.DOMAIN),
        'data_file': os.environ.get(ENV.Store.DATA_FILE),
    }
    # fmt: on
    values.update({key: value for key, value in overrides.items() if value})

    for key, value in values.items():
        if not isinstance(value, str) or (key == 'data_file' and not value.strip()):
            raise BadConfigurationError(f"Configuration value '{key}' must be a non-empty string (given value: {value!r}).")

    return StoreConfig(**values)

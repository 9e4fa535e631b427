"""
Centralized configuration for binomial-finder.

Configuration priority (highest to lowest):
1. Command-line arguments
2. Environment variables
3. ~/.binomial_env file
4. Default values
"""

import argparse
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .reference_store import ReferenceStore

# Cache for .binomial_env file contents
_binomial_env_cache: Optional[Dict[str, str]] = None

ENV_FILE = Path.home() / '.binomial_env'


def _load_binomial_env() -> Dict[str, str]:
    """
    Load configuration from the ~/.binomial_env file.

    This file uses VAR=value syntax (compatible with shell source but not exported).

    Returns:
        Dictionary of key-value pairs from the file
    """
    global _binomial_env_cache
    if _binomial_env_cache is not None:
        return _binomial_env_cache

    _binomial_env_cache = {}
    if ENV_FILE.exists():
        try:
            with open(ENV_FILE) as f:
                for line in f:
                    line = line.strip()
                    if not line or line.startswith('#'):
                        continue
                    if '=' in line:
                        key, _, value = line.partition('=')
                        value = value.strip()
                        if (value.startswith('"') and value.endswith('"')) or \
                           (value.startswith("'") and value.endswith("'")):
                            value = value[1:-1]
                        _binomial_env_cache[key.strip()] = value
        except OSError:
            pass  # Not readable, use defaults

    return _binomial_env_cache


def _get_env(key: str, default: str = '') -> str:
    """
    Get environment variable with fallback to the .binomial_env file.

    Args:
        key: Environment variable name
        default: Default value if not found anywhere

    Returns:
        Value from environment, .binomial_env file, or default
    """
    value = os.environ.get(key)
    if value is not None:
        return value

    binomial_env = _load_binomial_env()
    if key in binomial_env:
        return binomial_env[key]

    return default


def _parse_list(value: Optional[str]) -> List[str]:
    """Parse a comma-separated list, dropping empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]


def get_env_config(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Get configuration from command-line args, environment variables, or defaults.

    Arguments follow the pattern --config-key for config['config_key'].
    Unknown arguments are ignored so callers can keep their own parsers.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Dictionary of configuration values
    """
    base_config = {
        # Ordered dataset locations tried by ReferenceStore.load_default()
        'dataset_sources': _parse_list(_get_env(
            'BINOMIAL_DATASETS', ','.join(ReferenceStore.DEFAULT_SOURCES))),
        'fetch_timeout': int(_get_env('FETCH_TIMEOUT', '30')),

        # Extraction settings
        'context_length': int(_get_env('CONTEXT_LENGTH', '100')),
        'stop_words_file': _get_env('STOP_WORDS_FILE', ''),

        # General settings
        'verbosity': int(_get_env('VERBOSITY', '1')),
    }

    parser = argparse.ArgumentParser(add_help=False)
    for key in ['fetch_timeout', 'context_length', 'verbosity']:
        parser.add_argument('--' + key.replace('_', '-'), type=int, default=None, dest=key)
    parser.add_argument('--stop-words-file', type=str, default=None, dest='stop_words_file')
    parser.add_argument('--dataset-sources', type=str, default=None, dest='dataset_sources',
                        help='Comma-separated default dataset locations')

    args, _ = parser.parse_known_args(argv)

    for key, value in vars(args).items():
        if value is not None:
            if key == 'dataset_sources':
                base_config[key] = _parse_list(value)
            else:
                base_config[key] = value

    return base_config

"""
ABOUTME: Environment variable lookup utilities
ABOUTME: Provides the default lookup, fallback resolution and .env loading used by the binder
"""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import MissingValueError

Lookup = Callable[[str], str]


def get_env_var(key: str) -> str:
    """Get environment variable, with an empty string meaning "not set"."""
    return os.getenv(key, "")


def resolve_value(
    key: str,
    fallbacks: Optional[Mapping[str, str]] = None,
    lookup: Optional[Lookup] = None,
) -> tuple[str, str]:
    """
    Resolve the string value for an environment key.

    The live environment wins when it yields a non-empty value; otherwise the
    fallback mapping is consulted.

    Returns:
        tuple[str, str]: The value and where it came from ("environment" or "fallback").

    Raises:
        MissingValueError: If both sources are empty for `key`.
    """
    lookup = lookup or get_env_var
    value = lookup(key) or ""
    if value:
        return value, "environment"

    value = (fallbacks or {}).get(key) or ""
    if value:
        return value, "fallback"

    raise MissingValueError(key)


def load_environment(env_file: str | Path = ".env") -> bool:
    """
    Load variables from a dotenv file if it exists.

    Variables already present in the process environment are not overridden.

    Returns:
        bool: True if a file was found and loaded.
    """
    env_path = Path(env_file)
    if not env_path.exists():
        logging.debug(f"No env file at {env_path}, using system environment variables")
        return False

    load_dotenv(env_path, override=False)
    logging.debug(f"Loaded environment from {env_path}")
    return True

from __future__ import annotations
import logging
import os


_DEFAULT_ENV_INIT_SIZE = 16
_DEFAULT_PROMPT = '==> '
_DEFAULT_RECURSION_LIMIT = 5000
_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: int, minimum: int = 1) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def get_env_init_size() -> int:
    """Bucket count of a freshly created frame."""
    return int_from_env('KAPPA_ENV_INIT_SIZE', _DEFAULT_ENV_INIT_SIZE)


def get_prompt() -> str:
    return os.environ.get('KAPPA_PROMPT', _DEFAULT_PROMPT)


def get_recursion_limit() -> int:
    return int_from_env('KAPPA_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT, minimum=100)


def get_log_level() -> int:
    name = os.environ.get('KAPPA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING

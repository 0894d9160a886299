"""
Logging settings sourced from the environment.

Exported variables win; a ``.env`` file in the working directory fills in
anything left unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

LOG_LEVEL_KEY = 'DUALSLOT_LOG_LEVEL'
LOG_STRUCTURED_KEY = 'DUALSLOT_LOG_STRUCTURED'

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

_BOOLEANS = {
    '1': True,
    'true': True,
    'yes': True,
    'on': True,
    '0': False,
    'false': False,
    'no': False,
    'off': False,
}


@dataclass(frozen=True)
class RuntimeSettings:
    """How the ``dualslot`` logger reports slot transitions."""

    log_level: str = 'INFO'
    log_structured: bool = False


def load_runtime_settings(env: Mapping[str, str] | None = None) -> RuntimeSettings:
    """
    Parse runtime settings from environment variables.

    Args:
        env: Optional mapping for testability. Defaults to os.environ merged over `.env`.

    Raises:
        ValueError: If a variable is set to an unrecognised value
    """
    source = _environment_with_dotenv(Path('.env')) if env is None else env

    log_level = (source.get(LOG_LEVEL_KEY) or '').strip().upper() or 'INFO'
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(f'{LOG_LEVEL_KEY} must be one of {", ".join(VALID_LOG_LEVELS)}, got {log_level!r}')

    raw_structured = (source.get(LOG_STRUCTURED_KEY) or '').strip().lower()
    if not raw_structured:
        log_structured = False
    elif raw_structured in _BOOLEANS:
        log_structured = _BOOLEANS[raw_structured]
    else:
        raise ValueError(
            f'{LOG_STRUCTURED_KEY} must be a boolean (1/0, true/false, yes/no, on/off), '
            f'got {source.get(LOG_STRUCTURED_KEY)!r}'
        )

    return RuntimeSettings(log_level=log_level, log_structured=log_structured)


def _environment_with_dotenv(path: Path) -> dict[str, str]:
    defaults = {key: value for key, value in dotenv_values(path).items() if value is not None}
    return {**defaults, **os.environ}

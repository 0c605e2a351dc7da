"""Runtime settings for pslookup.

Values come from the environment and can be overridden per call (the
CLI passes its flags as overrides):

    PSLOOKUP_PSL_FILE   path to public_suffix_list.dat
    PSLOOKUP_ENCODING   text encoding of that file (default utf-8)
    PSLOOKUP_LOG_LEVEL  logging level name (default WARNING)
"""
from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PSL_FILE = "PSLOOKUP_PSL_FILE"
ENV_ENCODING = "PSLOOKUP_ENCODING"
ENV_LOG_LEVEL = "PSLOOKUP_LOG_LEVEL"

DEFAULT_PSL_FILE = "public_suffix_list.dat"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when a setting is missing or invalid."""


@dataclass(frozen=True, slots=True)
class Settings:
    psl_path: str = DEFAULT_PSL_FILE
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(
    env: Mapping[str, str] | None = None,
    psl_path: str | None = None,
    encoding: str | None = None,
    log_level: str | None = None,
) -> Settings:
    """Resolve settings from env, letting non-None arguments win."""
    if env is None:
        env = os.environ

    psl_path = psl_path if psl_path is not None else env.get(ENV_PSL_FILE, DEFAULT_PSL_FILE)
    encoding = encoding if encoding is not None else env.get(ENV_ENCODING, DEFAULT_ENCODING)
    log_level = log_level if log_level is not None else env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    psl_path = psl_path.strip()
    if not psl_path:
        raise ConfigError(f"{ENV_PSL_FILE} must not be empty")

    try:
        codecs.lookup(encoding)
    except LookupError:
        raise ConfigError(f"unknown encoding: {encoding!r}") from None

    log_level = log_level.strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"invalid log level {log_level!r}: must be one of "
            f"{', '.join(sorted(_LOG_LEVELS))}"
        )

    return Settings(psl_path=psl_path, encoding=encoding, log_level=log_level)

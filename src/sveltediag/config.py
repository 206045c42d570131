# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the option subset consulted while translating diagnostics."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from pydantic import ValidationError

from .core.models import ResolvedOptions

DEBUG_ENV_VAR: Final[str] = "SVELTEDIAG_DEBUG"
_FALSEY_ENV_VALUES: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


class ConfigError(ValueError):
    """Raised when configuration input is invalid."""


def debug_requested(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when the environment asks for debug verbosity.

    Args:
        env: Environment mapping to inspect; defaults to :data:`os.environ`.

    Returns:
        bool: Whether :data:`DEBUG_ENV_VAR` holds a truthy value.
    """

    source = os.environ if env is None else env
    value = source.get(DEBUG_ENV_VAR)
    return value is not None and value.strip().lower() not in _FALSEY_ENV_VALUES


def load_options(
    raw: Mapping[str, object] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ResolvedOptions:
    """Validate ``raw`` into :class:`ResolvedOptions`.

    Both the host's camelCase keys (``isBuild``) and snake_case keys
    (``is_build``) are accepted. Debug verbosity is also enabled by the
    environment.

    Args:
        raw: Option mapping supplied by the host, or ``None`` for defaults.
        env: Environment mapping consulted for :data:`DEBUG_ENV_VAR`.

    Returns:
        ResolvedOptions: Frozen options model.

    Raises:
        ConfigError: If ``raw`` is not a mapping or holds invalid values.
    """

    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"options must be a mapping, got {type(raw).__name__}")
    try:
        options = ResolvedOptions.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc
    if not options.is_debug and debug_requested(env):
        options = options.model_copy(update={"is_debug": True})
    return options


__all__ = ["DEBUG_ENV_VAR", "ConfigError", "debug_requested", "load_options"]

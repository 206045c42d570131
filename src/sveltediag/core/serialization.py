# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for converting translated diagnostics to serializable data."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel

from .models import CompileDiagnostic, JsonValue


@runtime_checkable
class SupportsToPayload(Protocol):
    """Protocol describing consumer shapes that know their external field names."""

    def to_payload(self) -> dict[str, JsonValue]:
        """Return the consumer payload for the value."""


SerializableValue: TypeAlias = (
    "JsonValue | Path | BaseModel | SupportsToPayload | Mapping[str, SerializableValue] | Sequence[SerializableValue]"
)


def serialize_diagnostic(diagnostic: CompileDiagnostic) -> dict[str, JsonValue]:
    """Convert a compiler diagnostic into a JSON-friendly mapping without unset fields."""
    return diagnostic.model_dump(mode="json", exclude_none=True)


def jsonify(value: SerializableValue) -> JsonValue:
    """Convert ``value`` into a JSON-compatible structure.

    Consumer shapes are rendered through ``to_payload`` so their external field
    names and omitted optional fields are preserved.

    Args:
        value: Value that must be convertible into a JSON-compatible representation.

    Returns:
        JsonValue: Representation that can be serialized by JSON encoders.
    """

    if value is None:
        return None
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, SupportsToPayload):
        return jsonify(value.to_payload())
    if isinstance(value, CompileDiagnostic):
        return serialize_diagnostic(value)
    if isinstance(value, BaseModel):
        return jsonify(value.model_dump(mode="python", by_alias=True))
    if isinstance(value, Mapping):
        return {str(key): jsonify(item) for key, item in value.items()}
    return [jsonify(item) for item in value]


def dumps(value: SerializableValue, *, indent: int | None = 2) -> str:
    """Serialize ``value`` to a JSON document."""
    return json.dumps(jsonify(value), indent=indent)


__all__ = ["SupportsToPayload", "dumps", "jsonify", "serialize_diagnostic"]

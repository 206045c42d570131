# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the sveltediag package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


class DiagnosticPayloadError(ValueError):
    """Raised when a compiler diagnostic payload cannot be interpreted."""


class SourcePosition(BaseModel):
    """Line/column position reported by the component compiler."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    character: int | None = None


class CompileDiagnostic(BaseModel):
    """Warning or error emitted by the component compiler.

    The enhancer appends hints to ``message`` in place; every other consumer
    treats instances as read-only.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    message: str
    name: str = "CompileError"
    code: str | None = None
    filename: str | None = None
    frame: str | None = None
    start: SourcePosition | None = None
    end: SourcePosition | None = None
    pos: int | None = None
    stack: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> CompileDiagnostic:
        """Build a diagnostic from a JSON-like mapping produced by the compiler.

        Args:
            payload: Decoded JSON object describing the diagnostic.

        Returns:
            CompileDiagnostic: Validated diagnostic model.

        Raises:
            DiagnosticPayloadError: If ``payload`` is not a mapping or fails validation.
        """

        if not isinstance(payload, Mapping):
            raise DiagnosticPayloadError(f"expected a JSON object, got {type(payload).__name__}")
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            raise DiagnosticPayloadError(f"invalid diagnostic payload: {exc}") from exc


class ResolvedOptions(BaseModel):
    """Subset of the resolved plugin options consulted during translation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_build: bool = Field(default=False, alias="isBuild")
    is_debug: bool = Field(default=False, alias="isDebug")


class PreprocessorDescriptor(BaseModel):
    """Preprocessor group registered by the host; only hook presence matters."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, from_attributes=True)

    name: str | None = None
    script: Any = None
    style: Any = None

    @property
    def has_script(self) -> bool:
        """Return ``True`` when the descriptor provides a script hook."""
        return self.script is not None

    @property
    def has_style(self) -> bool:
        """Return ``True`` when the descriptor provides a style hook."""
        return self.style is not None


class _PayloadModel(BaseModel):
    """Base for consumer-facing shapes serialised with their external field names."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, JsonValue]:
        """Return the consumer payload, omitting optional fields that are unset."""
        return self.model_dump(by_alias=True, exclude_none=True)


class RollupLocation(_PayloadModel):
    """``loc`` block attached to a build-pipeline error."""

    line: int
    column: int
    file: str | None = None


class RollupError(_PayloadModel):
    """Build-pipeline error shape consumed by the bundler and its overlay."""

    name: str
    id: str | None = None
    message: str
    frame: str = ""
    code: str | None = None
    stack: str = ""
    loc: RollupLocation | None = None


class ESBuildLocation(_PayloadModel):
    """``location`` block attached to a CLI/editor message."""

    line: int
    column: int
    file: str | None = None
    line_text: str = Field(default="", alias="lineText")


class ESBuildMessage(_PayloadModel):
    """Partial message shape consumed by the dependency pre-bundler."""

    text: str
    location: ESBuildLocation | None = None
    detail: str | None = None


__all__ = [
    "CompileDiagnostic",
    "DiagnosticPayloadError",
    "ESBuildLocation",
    "ESBuildMessage",
    "JsonValue",
    "PreprocessorDescriptor",
    "ResolvedOptions",
    "RollupError",
    "RollupLocation",
    "SourcePosition",
]

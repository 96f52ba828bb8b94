"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from openapi_normalizer.rule_rewriting import DEFAULT_STATUS_DESCRIPTIONS

DEFAULT_OUTPUT_INDENT = 2


@dataclass(frozen=True)
class ResponseSettings:
    """Descriptions injected into responses by status code."""

    descriptions: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_STATUS_DESCRIPTIONS)
    )


@dataclass(frozen=True)
class OutputSettings:
    """Serialization options for written documents."""

    indent: int = DEFAULT_OUTPUT_INDENT


@dataclass(frozen=True)
class NormalizerConfiguration:
    """Top-level configuration aggregate."""

    path: Path | None
    responses: ResponseSettings
    output: OutputSettings


def default_configuration() -> NormalizerConfiguration:
    """Return the configuration used when no file is given."""
    return NormalizerConfiguration(path=None, responses=ResponseSettings(), output=OutputSettings())

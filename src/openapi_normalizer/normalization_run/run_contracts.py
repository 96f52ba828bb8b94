"""Normalization run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NormalizationRequest:
    """Input contract for one normalization run."""

    input_path: str
    output_path: str
    config_path: str | None = None
    fix: bool = True
    hoist: bool = True


@dataclass(frozen=True)
class NormalizationOutcome:
    """Output contract for one completed run."""

    output_path: Path
    hoisted_schemas: int
    reused_references: int

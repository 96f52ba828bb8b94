"""Normalization run exports."""

from .normalization_use_case import NormalizationRunError, execute_normalization_run
from .run_contracts import NormalizationOutcome, NormalizationRequest

__all__ = [
    "NormalizationRequest",
    "NormalizationOutcome",
    "NormalizationRunError",
    "execute_normalization_run",
]

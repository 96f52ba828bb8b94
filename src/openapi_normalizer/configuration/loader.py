"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from openapi_normalizer.rule_rewriting import DEFAULT_STATUS_DESCRIPTIONS

from .runtime_settings import (
    DEFAULT_OUTPUT_INDENT,
    NormalizerConfiguration,
    OutputSettings,
    ResponseSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> NormalizerConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return NormalizerConfiguration(
        path=path,
        responses=_parse_responses_section(parsed.get("responses")),
        output=_parse_output_section(parsed.get("output")),
    )


def _parse_responses_section(value: Any) -> ResponseSettings:
    section = _optional_mapping(value, "responses")
    overrides = _optional_mapping(section.get("descriptions"), "responses.descriptions")
    descriptions = dict(DEFAULT_STATUS_DESCRIPTIONS)
    for raw_status, description in overrides.items():
        status = str(raw_status)
        if status not in DEFAULT_STATUS_DESCRIPTIONS:
            supported = ", ".join(DEFAULT_STATUS_DESCRIPTIONS)
            raise ConfigurationError(
                f"responses.descriptions '{status}' is not supported (expected one of {supported})."
            )
        descriptions[status] = _require_non_empty_string(
            description, f"responses.descriptions.{status}"
        )
    return ResponseSettings(descriptions=descriptions)


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    indent = _require_positive_int(section.get("indent", DEFAULT_OUTPUT_INDENT), "output.indent")
    return OutputSettings(indent=indent)


def _optional_mapping(value: Any, section_name: str) -> Mapping[Any, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value

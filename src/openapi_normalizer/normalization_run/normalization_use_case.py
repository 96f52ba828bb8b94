"""Normalization run use-case service."""

from __future__ import annotations

import logging

from openapi_normalizer.configuration import (
    ConfigurationError,
    NormalizerConfiguration,
    default_configuration,
    load_configuration,
)
from openapi_normalizer.document_files import DocumentError, read_document, write_document
from openapi_normalizer.rule_rewriting import apply_rules, build_standard_rules
from openapi_normalizer.schema_hoisting import SchemaRegistry, extract_inline_schemas

from .run_contracts import NormalizationOutcome, NormalizationRequest

logger = logging.getLogger(__name__)


class NormalizationRunError(Exception):
    """Raised when a normalization run cannot be completed."""


def execute_normalization_run(request: NormalizationRequest) -> NormalizationOutcome:
    """Read a document, run the requested stages in order and write the result."""
    configuration = _load_run_configuration(request.config_path)
    try:
        document = read_document(request.input_path)
    except DocumentError as exc:
        raise NormalizationRunError(str(exc)) from exc

    if request.fix:
        rules = build_standard_rules(configuration.responses.descriptions)
        document = apply_rules(document, rules)
        logger.info("Applied rewrite rules to %s", request.input_path)

    registry: SchemaRegistry | None = None
    if request.hoist:
        registry = extract_inline_schemas(document)
        if registry is not None:
            logger.info(
                "Extracted %d inline schemas (%d duplicates referenced)",
                len(registry.hoisted_names),
                registry.reused_count,
            )

    try:
        output_path = write_document(
            document, request.output_path, indent=configuration.output.indent
        )
    except DocumentError as exc:
        raise NormalizationRunError(str(exc)) from exc

    return NormalizationOutcome(
        output_path=output_path,
        hoisted_schemas=len(registry.hoisted_names) if registry is not None else 0,
        reused_references=registry.reused_count if registry is not None else 0,
    )


def _load_run_configuration(config_path: str | None) -> NormalizerConfiguration:
    if config_path is None:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise NormalizationRunError(str(exc)) from exc

"""Extraction of inline object schemas into ``components.schemas``."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping, Sequence
from typing import Any

from openapi_normalizer.document_tree import is_array, is_plain_object

from .schema_naming import NameSegment, build_name, to_pascal
from .schema_registry import SchemaRegistry, content_signature, reference_to

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "options", "head", "trace")
COMBINATOR_KEYS = ("anyOf", "oneOf", "allOf")

NamePath = tuple[NameSegment, ...]


def hoist_inline_schemas(document: Any) -> Any:
    """Move every inline object schema of ``document`` into ``components.schemas``.

    The document is rewritten in place and returned. Structurally identical
    schemas share one registry entry.
    """
    extract_inline_schemas(document)
    return document


def extract_inline_schemas(document: Any) -> SchemaRegistry | None:
    """Run one hoisting pass over ``document`` and return its registry.

    Returns None, leaving the document untouched, when the document has no
    usable place for a schema registry.
    """
    if not is_plain_object(document):
        logger.warning("Document root is not an object; skipping schema extraction.")
        return None

    components = document.setdefault("components", {})
    if not is_plain_object(components):
        logger.warning("components is not an object; skipping schema extraction.")
        return None
    schemas = components.setdefault("schemas", {})
    if not is_plain_object(schemas):
        logger.warning("components.schemas is not an object; skipping schema extraction.")
        return None

    hoister = SchemaHoister(SchemaRegistry.seeded_from(schemas))
    hoister.hoist_paths(document)
    hoister.hoist_components(document)
    logger.debug(
        "Extracted %d schemas, reused %d",
        len(hoister.registry.hoisted_names),
        hoister.registry.reused_count,
    )
    return hoister.registry


class SchemaHoister:
    """Visitor replacing hoistable schema nodes with references into a registry."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self.registry = registry

    def visit(self, node: Any, name_path: NamePath, can_hoist: bool = True) -> Any:
        """Rewrite the children of ``node``, then hoist ``node`` itself if allowed."""
        if not is_plain_object(node) or node.get("$ref"):
            return node

        if node.get("type") == "array" and node.get("items"):
            node["items"] = self.visit(node["items"], (*name_path, "items"))

        for key in COMBINATOR_KEYS:
            branches = node.get(key)
            if is_array(branches):
                node[key] = [
                    self.visit(branch, (*name_path, key, index))
                    for index, branch in enumerate(branches)
                ]

        properties = node.get("properties")
        if is_plain_object(properties):
            for property_name, property_schema in list(properties.items()):
                properties[property_name] = self.visit(
                    property_schema, (*name_path, property_name)
                )

        additional = node.get("additionalProperties")
        if is_plain_object(additional):
            node["additionalProperties"] = self.visit(
                additional, (*name_path, "additionalProperties")
            )

        if not (can_hoist and is_object_like(node)):
            return node

        signature = content_signature(node)
        existing = self.registry.name_for(signature)
        if existing is not None:
            logger.debug("Reusing schema %s for %s", existing, name_path)
            return reference_to(existing)

        name = self.registry.register(build_name(name_path), node, signature)
        logger.debug("Hoisted schema %s", name)
        return reference_to(name)

    def hoist_paths(self, document: MutableMapping[str, Any]) -> None:
        """Visit parameter, request body, response and header schemas of every operation."""
        paths = document.get("paths")
        if not is_plain_object(paths):
            return
        for raw_path, path_item in paths.items():
            if not is_plain_object(path_item):
                continue
            path_name = to_pascal(str(raw_path).removeprefix("/"))
            for method, operation in path_item.items():
                method_name = str(method).lower()
                if method_name not in HTTP_METHODS or not is_plain_object(operation):
                    continue
                self._hoist_operation(operation, (path_name, method_name))

    def _hoist_operation(self, operation: MutableMapping[str, Any], prefix: NamePath) -> None:
        parameters = operation.get("parameters")
        if is_array(parameters):
            for index, parameter in enumerate(parameters):
                self._hoist_schema_of(parameter, (*prefix, "parameters", index, "schema"))

        request_body = operation.get("requestBody")
        if is_plain_object(request_body):
            self._hoist_content(
                request_body.get("content"), (*prefix, "requestBody", "content"), "schema"
            )

        responses = operation.get("responses")
        if not is_plain_object(responses):
            return
        for status, response in responses.items():
            if not is_plain_object(response):
                continue
            status_prefix = (*prefix, "responses", status)
            self._hoist_content(response.get("content"), (*status_prefix, "content"), "schema")
            headers = response.get("headers")
            if is_plain_object(headers):
                for header_name, header in headers.items():
                    self._hoist_schema_of(
                        header, (*status_prefix, "headers", header_name, "schema")
                    )

    def hoist_components(self, document: MutableMapping[str, Any]) -> None:
        """Visit reusable component schemas; registry entries keep their own identity."""
        components = document.get("components")
        if not is_plain_object(components):
            return

        for name, parameter in _entries(components.get("parameters")):
            self._hoist_schema_of(parameter, ("Components", "Parameters", name, "Schema"))

        for section, label in (("requestBodies", "RequestBodies"), ("responses", "Responses")):
            for name, entry in _entries(components.get(section)):
                if is_plain_object(entry):
                    self._hoist_content(
                        entry.get("content"), ("Components", label, name, "Content"), "Schema"
                    )

        for name, header in _entries(components.get("headers")):
            self._hoist_schema_of(header, ("Components", "Headers", name, "Schema"))

        schemas = components.get("schemas")
        for name, schema in _entries(schemas):
            schemas[name] = self.visit(schema, ("Components", "Schemas", name), can_hoist=False)

    def _hoist_content(self, content: Any, prefix: NamePath, schema_segment: str) -> None:
        for media_type, media in _entries(content):
            self._hoist_schema_of(media, (*prefix, media_type, schema_segment))

    def _hoist_schema_of(self, holder: Any, name_path: NamePath) -> None:
        if is_plain_object(holder) and holder.get("schema"):
            holder["schema"] = self.visit(holder["schema"], name_path)


def is_object_like(node: MutableMapping[str, Any]) -> bool:
    """Return True for schemas describing an object shape."""
    if node.get("type") == "object":
        return True
    properties = node.get("properties")
    if is_plain_object(properties) and properties:
        return True
    additional = node.get("additionalProperties")
    return is_plain_object(additional) and not additional.get("$ref")


def _entries(section: Any) -> Sequence[tuple[Any, Any]]:
    if not is_plain_object(section):
        return ()
    return list(section.items())

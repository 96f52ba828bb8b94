"""Standard rules that turn generator-specific OpenAPI output into OpenAPI 3.0."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from openapi_normalizer.document_tree import is_array, is_plain_object

from .rule_models import REMOVE_KEY, RewriteRule

DEFAULT_STATUS_DESCRIPTIONS: Mapping[str, str] = {
    "200": "成功回應",
    "201": "已建立",
    "400": "錯誤的請求",
    "401": "未授權",
    "500": "伺服器錯誤",
}

NULL_TYPE = "null"


def build_standard_rules(
    status_descriptions: Mapping[str, str] | None = None,
) -> dict[str, RewriteRule]:
    """Build the rule table keyed by property name."""
    descriptions = dict(DEFAULT_STATUS_DESCRIPTIONS)
    if status_descriptions:
        descriptions.update(status_descriptions)

    rules = [
        RewriteRule(key="multipart/form-data", transform=_keep_file_upload_media),
        RewriteRule(key="text/plain", transform=_remove),
        RewriteRule(key="application/json", transform=_drop_file_upload_media),
        RewriteRule(key="const", transform=_remove, enrich=_const_as_enum),
        RewriteRule(
            key="200",
            transform=_describe_response(descriptions["200"], drop_items=True),
        ),
        RewriteRule(key="400", transform=_describe_response(descriptions["400"])),
        RewriteRule(key="401", transform=_describe_response(descriptions["401"])),
        RewriteRule(key="201", transform=_describe_response(descriptions["201"])),
        RewriteRule(key="500", transform=_describe_response(descriptions["500"])),
        RewriteRule(key="type", transform=_null_type_as_string, enrich=_null_type_as_enum),
        RewriteRule(key="anyOf", transform=_remove_collapsible_any_of, enrich=_collapse_any_of),
    ]
    return {rule.key: rule for rule in rules}


def _remove(_value: Any) -> Any:
    return REMOVE_KEY


def _declares_file_property(media: Any) -> bool:
    if not is_plain_object(media):
        return False
    schema = media.get("schema")
    if not is_plain_object(schema):
        return False
    properties = schema.get("properties")
    return is_plain_object(properties) and properties.get("file") is not None


def _keep_file_upload_media(media: Any) -> Any:
    return media if _declares_file_property(media) else REMOVE_KEY


def _drop_file_upload_media(media: Any) -> Any:
    return REMOVE_KEY if _declares_file_property(media) else media


def _const_as_enum(value: Any) -> Mapping[str, Any]:
    return {"enum": [value]}


def _describe_response(description: str, *, drop_items: bool = False):
    def transform(response: Any) -> Any:
        if not is_plain_object(response):
            return response
        described = dict(response)
        described["description"] = description
        if drop_items:
            described.pop("items", None)
        return described

    return transform


def _null_type_as_string(value: Any) -> Any:
    return "string" if value == NULL_TYPE else value


def _null_type_as_enum(value: Any) -> Mapping[str, Any] | None:
    if value == NULL_TYPE:
        return {"enum": [NULL_TYPE]}
    return None


def _remove_collapsible_any_of(branches: Any) -> Any:
    return REMOVE_KEY if _collapse_any_of(branches) is not None else branches


def _collapse_any_of(branches: Any) -> Mapping[str, Any] | None:
    """Return the schema fragment replacing ``anyOf``, or None to keep it.

    Conditions are checked in a fixed order and the first match wins: a Date
    branch, a two-branch nullable pair, a single branch, branches sharing one
    type, a numeric string branch.
    """
    if not is_array(branches) or not branches:
        return None

    types = [_branch_attribute(branch, "type") for branch in branches]

    if "Date" in types:
        return {"format": "date-time", "type": "string"}

    if len(branches) == 2 and NULL_TYPE in types:
        other_types = [branch_type for branch_type in types if branch_type != NULL_TYPE]
        if other_types:
            collapsed: dict[str, Any] = {}
            if other_types[0] is not None:
                collapsed["type"] = other_types[0]
            collapsed["nullable"] = True
            return collapsed

    if len(branches) == 1 and is_plain_object(branches[0]):
        return dict(branches[0])

    shared_type = types[0]
    if shared_type is not None and shared_type != NULL_TYPE and all(
        branch_type == shared_type for branch_type in types
    ):
        return {
            "type": shared_type,
            "enum": [_branch_attribute(branch, "const") for branch in branches],
        }

    if any(
        _branch_attribute(branch, "format") == "numeric"
        and _branch_attribute(branch, "type") == "string"
        for branch in branches
    ):
        return {"type": "number", "default": 0}

    return None


def _branch_attribute(branch: Any, name: str) -> Any:
    if not is_plain_object(branch):
        return None
    return branch.get(name)


STANDARD_RULES: Mapping[str, RewriteRule] = build_standard_rules()

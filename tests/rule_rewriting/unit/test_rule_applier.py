"""Recursive rule application tests."""

from __future__ import annotations

import copy

from openapi_normalizer.rule_rewriting import REMOVE_KEY, RewriteRule, apply_rules


def _request_body(properties: dict) -> dict:
    return {
        "content": {
            "multipart/form-data": {"schema": {"type": "object", "properties": properties}},
            "application/json": {"schema": {"type": "object", "properties": properties}},
            "text/plain": {"schema": {"type": "string"}},
        }
    }


def test_file_upload_keeps_multipart_and_drops_json() -> None:
    body = _request_body({"file": {"type": "string", "format": "binary"}})

    result = apply_rules(body)

    assert list(result["content"]) == ["multipart/form-data"]


def test_non_file_body_keeps_json_only() -> None:
    body = _request_body({"note": {"type": "string"}})

    result = apply_rules(body)

    assert list(result["content"]) == ["application/json"]


def test_response_description_injected_and_items_removed() -> None:
    document = {
        "responses": {
            "200": {"content": {"application/json": {"schema": {"type": "string"}}}, "items": {}},
            "401": {"content": {}},
        }
    }

    result = apply_rules(document)

    assert result["responses"]["200"] == {
        "content": {"application/json": {"schema": {"type": "string"}}},
        "description": "成功回應",
    }
    assert result["responses"]["401"] == {"content": {}, "description": "未授權"}


def test_any_of_null_collapse_replaces_any_of_with_nullable_type() -> None:
    schema = {"anyOf": [{"type": "string"}, {"type": "null"}]}

    assert apply_rules(schema) == {"type": "string", "nullable": True}


def test_any_of_const_collapse_builds_enum() -> None:
    schema = {
        "anyOf": [
            {"type": "string", "const": "Other"},
            {"type": "string", "const": "Ours"},
            {"type": "string", "const": "Both"},
        ]
    }

    assert apply_rules(schema) == {"type": "string", "enum": ["Other", "Ours", "Both"]}


def test_const_and_null_type_are_rewritten_in_nested_arrays() -> None:
    document = {
        "allOf": [
            {"properties": {"kind": {"type": "string", "const": "user"}}},
            {"properties": {"gone": {"type": "null"}}},
        ]
    }

    result = apply_rules(document)

    assert result["allOf"][0]["properties"]["kind"] == {"type": "string", "enum": ["user"]}
    assert result["allOf"][1]["properties"]["gone"] == {"type": "string", "enum": ["null"]}


def test_single_branch_any_of_contents_are_rewritten_too() -> None:
    schema = {"anyOf": [{"type": "string", "const": "only"}]}

    assert apply_rules(schema) == {"type": "string", "enum": ["only"]}


def test_enrich_overwrites_properties_already_visited() -> None:
    schema = {"type": "object", "anyOf": [{"type": "null"}]}

    assert apply_rules(schema) == {"type": "string", "enum": ["null"]}


def test_any_of_that_cannot_collapse_is_kept_and_visited() -> None:
    schema = {
        "anyOf": [
            {"type": "integer"},
            {"type": "object", "properties": {"id": {"const": 1}}},
            {"type": "boolean"},
        ]
    }

    result = apply_rules(schema)

    assert result["anyOf"][1]["properties"]["id"] == {"enum": [1]}
    assert len(result["anyOf"]) == 3


def test_malformed_values_are_left_unchanged() -> None:
    document = {"anyOf": None, "200": "OK", "type": ["string", "null"], "items": [1, "a", None]}

    assert apply_rules(copy.deepcopy(document)) == document


def test_scalars_and_arrays_at_the_root() -> None:
    assert apply_rules("text") == "text"
    assert apply_rules(None) is None
    assert apply_rules([{"const": 1}, 2]) == [{"enum": [1]}, 2]


def test_objects_are_rewritten_in_place() -> None:
    document = {"properties": {"flag": {"const": True}}}

    result = apply_rules(document)

    assert result is document
    assert document["properties"]["flag"] == {"enum": [True]}


def test_apply_is_idempotent() -> None:
    document = {
        "paths": {
            "/items": {
                "post": {
                    "requestBody": _request_body({"file": {"type": "string"}}),
                    "responses": {
                        "200": {
                            "content": {
                                "application/json": {
                                    "schema": {
                                        "type": "object",
                                        "properties": {
                                            "state": {
                                                "anyOf": [
                                                    {"type": "string", "const": "a"},
                                                    {"type": "string", "const": "b"},
                                                ]
                                            },
                                            "createdAt": {
                                                "anyOf": [{"type": "Date"}, {"type": "string"}]
                                            },
                                            "count": {
                                                "anyOf": [
                                                    {"type": "string", "format": "numeric"},
                                                    {"type": "number"},
                                                    {"type": "integer"},
                                                ]
                                            },
                                            "nothing": {"type": "null"},
                                        },
                                    }
                                }
                            }
                        },
                        "500": {},
                    },
                }
            }
        }
    }

    once = apply_rules(document)
    snapshot = copy.deepcopy(once)

    assert apply_rules(once) == snapshot


def test_custom_rule_table() -> None:
    rules = {
        "x-internal": RewriteRule(
            key="x-internal", transform=lambda _value: REMOVE_KEY, enrich=lambda _v: {"x": 1}
        ),
        "title": RewriteRule(key="title", transform=lambda value: {"const": value}),
    }
    document = {"x-internal": True, "title": "Pet", "nested": {"x-internal": False}}

    result = apply_rules(document, rules)

    assert result == {"title": {"const": "Pet"}, "nested": {"x": 1}, "x": 1}


def test_integer_status_keys_from_yaml_match_status_rules() -> None:
    document = {"responses": {200: {"content": {}}, 404: {"content": {}}}}

    result = apply_rules(document)

    assert result["responses"][200] == {"content": {}, "description": "成功回應"}
    assert result["responses"][404] == {"content": {}}

"""Recursive rule application over a document tree."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from typing import Any

from openapi_normalizer.document_tree import is_array, is_plain_object

from .rule_models import REMOVE_KEY, RewriteRule
from .standard_rules import STANDARD_RULES

logger = logging.getLogger(__name__)


def apply_rules(node: Any, rules: Mapping[str, RewriteRule] = STANDARD_RULES) -> Any:
    """Apply ``rules`` depth-first to every object property of ``node``.

    Objects are rewritten in place and returned; arrays are rebuilt. Values
    produced by a transform are visited again, as are properties merged into
    an object by an enrich function.
    """
    if is_array(node):
        return [apply_rules(item, rules) for item in node]
    if not is_plain_object(node):
        return node

    pending = deque(node.keys())
    while pending:
        key = pending.popleft()
        if key not in node:
            continue

        value = node[key]
        rule = rules.get(str(key))
        if rule is None:
            if is_plain_object(value) or is_array(value):
                node[key] = apply_rules(value, rules)
            continue

        replacement = rule.transform(value)
        extra = rule.enrich(value) if rule.enrich is not None else None
        if extra:
            node.update(extra)
            for extra_key in extra:
                if extra_key != key and extra_key not in pending:
                    pending.append(extra_key)

        if replacement is REMOVE_KEY:
            logger.debug("Rule %r removed property", key)
            node.pop(key, None)
        else:
            node[key] = apply_rules(replacement, rules)

    return node

"""Per-run schema registry state."""

from __future__ import annotations

import copy
import hashlib
import json
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any

SCHEMA_REF_PREFIX = "#/components/schemas/"


def content_signature(node: Any) -> str:
    """Return a digest identifying ``node`` by structure, independent of key order."""
    canonical = json.dumps(
        _with_string_keys(node),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def reference_to(name: str) -> dict[str, str]:
    """Build a ``$ref`` node pointing at a registry entry."""
    return {"$ref": f"{SCHEMA_REF_PREFIX}{name}"}


@dataclass
class SchemaRegistry:
    """Named schema definitions plus the content cache used for deduplication.

    ``schemas`` is the document's ``components.schemas`` mapping and is
    mutated in place. One registry serves exactly one hoisting run.
    """

    schemas: MutableMapping[str, Any]
    used_names: set[str] = field(default_factory=set)
    signatures: dict[str, str] = field(default_factory=dict)
    hoisted_names: list[str] = field(default_factory=list)
    reused_count: int = 0

    @classmethod
    def seeded_from(cls, schemas: MutableMapping[str, Any]) -> SchemaRegistry:
        """Create a registry that never reuses a name already in ``schemas``."""
        return cls(schemas=schemas, used_names=set(schemas.keys()))

    def claim_name(self, base: str) -> str:
        """Reserve ``base``, or ``base`` with the first free numeric suffix from 2."""
        name = base
        suffix = 2
        while name in self.used_names:
            name = f"{base}{suffix}"
            suffix += 1
        self.used_names.add(name)
        return name

    def name_for(self, signature: str) -> str | None:
        """Return the name already assigned to identical content, if any."""
        name = self.signatures.get(signature)
        if name is not None:
            self.reused_count += 1
        return name

    def register(self, base_name: str, definition: Any, signature: str) -> str:
        """Store an independent copy of ``definition`` under a fresh unique name."""
        name = self.claim_name(base_name)
        self.schemas[name] = copy.deepcopy(definition)
        self.signatures[signature] = name
        self.hoisted_names.append(name)
        return name


def _with_string_keys(node: Any) -> Any:
    # Keys compare by their string form; YAML mappings may mix int and str keys.
    if isinstance(node, Mapping):
        return {str(key): _with_string_keys(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_with_string_keys(item) for item in node]
    return node

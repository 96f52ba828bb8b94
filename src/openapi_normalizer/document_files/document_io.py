"""Reading and writing API description documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")
YAML_INDENT_RANGE = range(2, 10)


class DocumentError(Exception):
    """Raised when a document cannot be read or written."""


def read_document(document_path: Path | str) -> Any:
    """Parse a JSON or YAML document, chosen by file suffix."""
    path = Path(document_path)
    if not path.is_file():
        raise DocumentError(f"Document file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Failed to read document {path}: {exc}") from exc

    if _is_yaml(path):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentError(f"Invalid YAML document {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON document {path}: {exc}") from exc


def write_document(document: Any, output_path: Path | str, *, indent: int = 2) -> Path:
    """Serialize ``document`` to ``output_path`` and return the resolved path."""
    destination = Path(output_path)
    if _is_yaml(destination):
        if indent not in YAML_INDENT_RANGE:
            raise DocumentError(
                f"YAML output indent must be between 2 and 9, got {indent}: {destination}"
            )
        text = yaml.safe_dump(
            document, allow_unicode=True, sort_keys=False, indent=indent, default_flow_style=False
        )
    else:
        text = json.dumps(document, indent=indent, ensure_ascii=False, default=str) + "\n"

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"Failed to write document {destination}: {exc}") from exc
    return destination.resolve()


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES

"""Readable registry names built from a schema's location in the document."""

from __future__ import annotations

import re
from collections.abc import Iterable

_WORD_SEPARATOR = re.compile(r"[^a-zA-Z0-9]+")

_KEYWORD_FRAGMENTS = {
    "schema": "Schema",
    "content": "Content",
    "responses": "Responses",
    "requestBody": "RequestBody",
    "parameters": "Parameters",
    "items": "Item",
    "properties": "",
}

NameSegment = str | int | None


def to_pascal(text: object) -> str:
    """Capitalize every alphanumeric word of ``text`` and join them."""
    words = _WORD_SEPARATOR.sub(" ", str(text)).split()
    return "".join(word[0].upper() + word[1:] for word in words)


def build_name(segments: Iterable[NameSegment]) -> str:
    """Concatenate name fragments for ``segments`` in order.

    Falsy segments, including array index 0, contribute nothing.
    """
    fragments = []
    for segment in segments:
        if not segment:
            continue
        text = str(segment)
        fragment = _KEYWORD_FRAGMENTS.get(text)
        fragments.append(fragment if fragment is not None else to_pascal(text))
    return "".join(fragments)

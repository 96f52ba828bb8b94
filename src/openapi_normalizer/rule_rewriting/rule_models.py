"""Rule rewriting entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Final


class _RemoveKey:
    """Marker returned by a transform to delete the matched key."""

    def __repr__(self) -> str:
        return "REMOVE_KEY"


REMOVE_KEY: Final = _RemoveKey()

Transform = Callable[[Any], Any]
Enrich = Callable[[Any], Mapping[str, Any] | None]


@dataclass(frozen=True)
class RewriteRule:
    """Rewrite applied to every object property named ``key``.

    ``transform`` computes the replacement for the property itself (or
    ``REMOVE_KEY``); ``enrich`` computes sibling properties merged into the
    enclosing object. Both receive the original property value.
    """

    key: str
    transform: Transform
    enrich: Enrich | None = None

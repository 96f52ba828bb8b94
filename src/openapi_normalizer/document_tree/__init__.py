"""Document tree exports."""

from .tree_predicates import is_array, is_plain_object

__all__ = ["is_array", "is_plain_object"]

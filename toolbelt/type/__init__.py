"""
Shape and emptiness predicates shared by the other topic packages.
"""

from toolbelt.type.checks import is_array, is_empty, is_object

__all__ = [
    "is_array",
    "is_empty",
    "is_object",
]

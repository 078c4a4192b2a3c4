"""
String helpers: case conversion and truncation.
"""

from toolbelt.string.case import camel_case, capitalize, kebab_case
from toolbelt.string.truncate import truncate

__all__ = [
    "camel_case",
    "capitalize",
    "kebab_case",
    "truncate",
]

"""
Dict helpers: key selection (pick, omit), recursive merge and deep clone.
"""

from toolbelt.object.clone import clone
from toolbelt.object.merge import merge
from toolbelt.object.pick import omit, pick

__all__ = [
    "clone",
    "merge",
    "omit",
    "pick",
]

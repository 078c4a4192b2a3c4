"""
toolbelt: small, independent helpers over lists, strings, dicts and numbers.

Topic subpackages:
  - toolbelt.array: accessors, search, slicing, sorted-array binary search,
    in-place pull/remove, flattening and de-duplication.
  - toolbelt.function: debounce, throttle and memoize wrappers.
  - toolbelt.math: arithmetic, precision rounding and aggregation.
  - toolbelt.object: pick, omit, deep merge and deep clone.
  - toolbelt.string: case conversion and truncation.
  - toolbelt.type: emptiness and shape checks.
"""

__version__ = "0.1.0"

"""
Infrastructure shared across modules.

Includes the clock/timer abstractions used by the debounce and throttle
wrappers, and the package logging setup.
"""

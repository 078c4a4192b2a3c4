"""
Error taxonomy for toolbelt.

**Conceptual**: Every helper in this package is a single atomic step from the
caller's point of view. The only failure a helper reports on its own is a
contract violation on its inputs: a list function handed a string, a string
function handed a number, a higher-order wrapper handed something that is not
callable. That failure is raised immediately, before any work is done, and is
never caught inside the package.

Exceptions raised by user-supplied callbacks (iteratees, predicates,
comparators, wrapped functions) are not wrapped: they propagate unchanged to
whichever call triggered them.
"""


class ToolbeltError(Exception):
    """
    Base exception for errors raised by toolbelt itself.

    Catch this to handle every toolbelt-originated error in one place.
    """
    pass


class InvalidArgumentError(ToolbeltError, TypeError):
    """
    Raised when an argument does not have the shape a function accepts.

    **Conceptual**: This is a ``TypeError`` as well as a ``ToolbeltError``, so
    code written against the builtin (``except TypeError``) keeps working.

    Attributes:
        expected: Short description of the accepted shape (e.g. "a list").
        received: The offending value's type name.
    """

    def __init__(self, expected: str, value: object):
        self.expected = expected
        self.received = type(value).__name__
        super().__init__(f"Expected {expected}, got {self.received}")

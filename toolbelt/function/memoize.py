"""
Memoize: cache a function's results by key.

The cache is a plain ``dict`` exposed as ``.cache``: inspect it, delete
entries, clear it, or replace it with another mutable mapping. It grows
without bound; eviction is the caller's job. Keys must be hashable.
"""

import functools
from typing import Any, Callable, Dict, MutableMapping, Optional, Tuple

from toolbelt.errors import InvalidArgumentError


class Memoized:
    """
    Callable wrapper returned by ``memoize``.

    Used as a method, the instance is passed to ``func`` but takes no part
    in the key: neither the default key nor the resolver sees it, so one
    cache serves every instance of the class.

    Attributes:
        func: The wrapped function.
        resolver: Optional callable computing the cache key from the call's
            arguments.
        cache: Mapping from key to cached result.
    """

    def __init__(self, func: Callable[..., Any], resolver: Optional[Callable[..., Any]] = None):
        if not callable(func):
            raise InvalidArgumentError("a callable", func)
        if resolver is not None and not callable(resolver):
            raise InvalidArgumentError("a callable resolver", resolver)

        functools.update_wrapper(self, func)
        self.func = func
        self.resolver = resolver
        self.cache: MutableMapping[Any, Any] = {}

    def __get__(self, instance: Any, owner: Any = None) -> Any:
        if instance is None:
            return self
        return BoundMemoized(self, instance)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._lookup(args, kwargs, lambda: self.func(*args, **kwargs))

    def _lookup(self, args: Tuple[Any, ...], kwargs: Dict[str, Any], compute: Callable[[], Any]) -> Any:
        if self.resolver is not None:
            key = self.resolver(*args, **kwargs)
        else:
            key = args[0] if args else None

        if key in self.cache:
            return self.cache[key]

        result = compute()
        self.cache[key] = result
        return result


class BoundMemoized:
    """
    A ``Memoized`` bound to an instance, as returned by attribute access.

    Calls pass the instance to the wrapped function and key on the remaining
    arguments. Other attributes (``cache``, ``func``, ``__name__``) are read
    from the underlying ``Memoized``.
    """

    __slots__ = ("__self__", "__func__")

    def __init__(self, memoized: Memoized, instance: Any):
        self.__func__ = memoized
        self.__self__ = instance

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        memoized = self.__func__
        return memoized._lookup(
            args, kwargs, lambda: memoized.func(self.__self__, *args, **kwargs)
        )

    def __getattr__(self, name: str) -> Any:
        return getattr(self.__func__, name)

    def __repr__(self) -> str:
        return f"<bound memoized {self.__func__.func!r} of {self.__self__!r}>"


def memoize(
    func: Callable[..., Any],
    resolver: Optional[Callable[..., Any]] = None,
) -> Memoized:
    """
    Create a function that memoizes the result of func.

    By default the first positional argument is the cache key (None when the
    call has no positional arguments). Pass ``resolver`` to derive the key
    from all arguments; it receives exactly what the memoized function was
    called with. Keys from different argument shapes are not disambiguated:
    the resolver must produce consistent keys.

    Args:
        func: The function to have its output memoized.
        resolver: Computes the cache key.

    Returns:
        A ``Memoized`` wrapper with a ``cache`` attribute.

    Raises:
        InvalidArgumentError: If func or resolver is not callable.

    Example:
        >>> square = memoize(lambda n: n * n)
        >>> square(4)
        16
        >>> 4 in square.cache
        True
    """
    return Memoized(func, resolver)

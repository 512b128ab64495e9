"""Error categories used to decide whether a failure gets wrapped.

Python has no checked exceptions, so the fatal / runtime / checked split is an
explicit tag.  ``classify`` resolves the category of an exception in order:

1. an ``error_category`` attribute (class or instance) holding an ``ErrorCategory``;
2. a category registered with ``register_category`` (most specific class first);
3. the built-in defaults below.
"""

from __future__ import annotations

import threading
from enum import StrEnum


class ErrorCategory(StrEnum):
    FATAL = "fatal"
    RUNTIME = "runtime"
    CHECKED = "checked"


_FATAL_TYPES: tuple[type[BaseException], ...] = (MemoryError, RecursionError, SystemError)

_RUNTIME_TYPES: tuple[type[BaseException], ...] = (
    ArithmeticError,
    AssertionError,
    AttributeError,
    BufferError,
    LookupError,
    NameError,
    RuntimeError,
    StopAsyncIteration,
    StopIteration,
    TypeError,
    ValueError,
)

_registry: dict[type[BaseException], ErrorCategory] = {}
_registry_lock = threading.Lock()


def register_category(exc_type: type[BaseException], category: ErrorCategory) -> None:
    """Assign a category to an exception type and its subclasses.

    Registrations take precedence over the built-in defaults but not over an
    explicit ``error_category`` attribute.
    """
    if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
        msg = f"Expected an exception type, got {exc_type!r}"
        raise TypeError(msg)
    category = ErrorCategory(category)
    with _registry_lock:
        _registry[exc_type] = category


def unregister_category(exc_type: type[BaseException]) -> None:
    """Drop a registration made with ``register_category``. Unknown types are ignored."""
    with _registry_lock:
        _registry.pop(exc_type, None)


def classify(exc: BaseException) -> ErrorCategory:
    """Return the category of ``exc``."""
    tagged = getattr(exc, "error_category", None)
    if isinstance(tagged, ErrorCategory):
        return tagged

    with _registry_lock:
        registered = dict(_registry)
    for klass in type(exc).__mro__:
        category = registered.get(klass)
        if category is not None:
            return category

    # RecursionError is a RuntimeError, so fatal types are checked first
    if not isinstance(exc, Exception) or isinstance(exc, _FATAL_TYPES):
        return ErrorCategory.FATAL
    if isinstance(exc, _RUNTIME_TYPES):
        return ErrorCategory.RUNTIME
    return ErrorCategory.CHECKED

"""Dynamic invocation helpers and the invocation-failure classifier."""

from __future__ import annotations

import logging
import pickle
from typing import TYPE_CHECKING, NoReturn, ParamSpec, TypeVar

from internal_errors.classification import ErrorCategory, classify
from internal_errors.exceptions import InternalError, InvocationError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def raise_internal_error(module: str, error: InvocationError) -> NoReturn:
    """Re-raise the failure wrapped by ``error`` as the right kind of exception.

    Fatal and runtime failures propagate unchanged.  Anything else was not
    expected by the caller and is raised as ``InternalError(module, target)``.
    Never returns, so call sites may also write ``raise raise_internal_error(...)``.

    Re-raising inside an ``except InvocationError`` block makes the interpreter
    record that InvocationError as the target's ``__context__``; its
    ``__cause__`` and original traceback entries are kept.  Call it after the handler, as
    ``ObjectProxy`` does, to keep ``__context__`` untouched too.
    """
    target = error.target
    category = classify(target)
    logger.debug(
        "Invocation of %s failed with %s (category=%s)",
        error.callable_name,
        type(target).__name__,
        category,
    )
    if category is ErrorCategory.CHECKED:
        raise InternalError(module, target) from target
    raise target


def _callable_name(func: object) -> str:
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    return name if isinstance(name, str) else repr(func)


def invoke(func: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> T:
    """Call ``func`` and wrap any exception it raises in ``InvocationError``.

    Exceptions that do not derive from ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit``) are never wrapped.
    """
    try:
        return func(*args, **kwargs)
    except Exception as exc:
        raise InvocationError(exc, _callable_name(func)) from exc


def invoke_method(obj: object, name: str, /, *args: object, **kwargs: object) -> object:
    """Look up ``name`` on ``obj`` and invoke it.

    A missing attribute raises ``AttributeError`` directly: the lookup failed,
    not the call.
    """
    method = getattr(obj, name)
    return invoke(method, *args, **kwargs)


def deep_clone(obj: T) -> T:
    """Return a deep copy of ``obj`` made by pickling and unpickling it.

    Raises ``InternalError`` (with the pickling failure as cause) when the
    object cannot be serialized.
    """
    if obj is None:
        return obj
    try:
        return pickle.loads(pickle.dumps(obj, protocol=pickle.HIGHEST_PROTOCOL))  # noqa: S301
    except (pickle.PickleError, AttributeError, TypeError, EOFError, ImportError) as exc:
        raise InternalError(exc) from exc

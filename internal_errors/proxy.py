"""Object proxy that forwards every call through ``invoke``."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any

from internal_errors.exceptions import InvocationError
from internal_errors.reflect import invoke, raise_internal_error

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class ObjectProxy:
    """Delegate attribute access to a proxied object.

    Calls made through the proxy that fail re-raise the original exception, or,
    when a ``module`` is given, go through ``raise_internal_error`` so that
    unexpected failures surface as ``InternalError``.

    Only regular attribute access is forwarded; special methods (``len()``,
    ``iter()``, operators) and other dunder names are not.  Copying or pickling
    a proxy builds a new proxy around the (copied) proxied object.
    """

    __slots__ = ("_module", "_proxied")

    def __init__(self, proxied: object, module: str | None = None) -> None:
        object.__setattr__(self, "_proxied", proxied)
        object.__setattr__(self, "_module", module)

    @property
    def proxied_object(self) -> object:
        return self._proxied

    @property
    def proxy_module(self) -> str | None:
        return self._module

    def __getattr__(self, name: str) -> Any:
        # slots are unset while copy or unpickle builds the instance
        if name in ObjectProxy.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        value = getattr(self._proxied, name)
        if not callable(value):
            return value
        return self._forward(value)

    def __setattr__(self, name: str, value: object) -> None:
        setattr(self._proxied, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._proxied, name)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._proxied, self._module))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._proxied!r})"

    def _forward(self, method: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(method)
        def call(*args: Any, **kwargs: Any) -> Any:
            try:
                return invoke(method, *args, **kwargs)
            except InvocationError as exc:
                error = exc
            # raised outside the handler so the target does not pick up the
            # InvocationError as its __context__
            if self._module is None:
                raise error.target
            raise_internal_error(self._module, error)

        return call


def create_proxy(obj: object, *interfaces: type, module: str | None = None) -> ObjectProxy:
    """Proxy ``obj`` after checking it implements every interface.

    Interfaces may be classes, ABCs or runtime-checkable protocols.

    Raises ValueError if ``obj`` does not implement one of them.
    """
    for interface in interfaces:
        if not isinstance(obj, interface):
            msg = f"{type(obj).__name__} does not implement {interface.__name__}"
            raise ValueError(msg)
    logger.debug("Proxying %s (module=%s)", type(obj).__name__, module)
    return ObjectProxy(obj, module=module)


def get_proxied_object(obj: object) -> object:
    """Return the object behind ``obj``, unwrapping nested proxies.

    Anything that is not an ``ObjectProxy`` is returned as is.
    """
    while isinstance(obj, ObjectProxy):
        obj = obj.proxied_object
    return obj

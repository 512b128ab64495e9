"""Library-level exception types.

Convention:
- ``InternalError`` — for unexpected low-level failures (a database that is
  down, a disk that is full, a dynamically invoked call that blew up).  It
  carries the name of the module that detected the failure and, usually, the
  underlying cause.  It must *not* be used for business errors; those are
  ``ValueError`` and friends, or the application's own types.
- ``InvocationError`` — raised by ``internal_errors.reflect.invoke`` when the
  invoked callable itself fails.  It only wraps the real failure (``target``)
  and is meant to be routed through ``raise_internal_error`` right away.
"""

from __future__ import annotations

from typing import Any

from internal_errors.classification import ErrorCategory


class InternalError(Exception):
    """Raised when something low level broke that the caller did not anticipate.

    Accepted forms, mirroring how the error is usually raised::

        InternalError("db", exc)                  # module + cause
        InternalError("db", "connection refused")  # module + detail
        InternalError("db", "connection refused", exc)
        InternalError("db")
        InternalError(exc)                        # cause only
        InternalError()

    The message is ``module:detail`` when a detail is given, ``module`` when
    only a module is given, and the cause's own message otherwise.  All fields
    are read-only.
    """

    error_category = ErrorCategory.RUNTIME

    def __init__(
        self,
        module: str | BaseException | None = None,
        detail: str | BaseException | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if isinstance(module, BaseException):
            cause = cause if cause is not None else module
            module = None
        if isinstance(detail, BaseException):
            cause = cause if cause is not None else detail
            detail = None

        if detail is not None:
            message = f"{module or ''}:{detail}"
        elif module is not None:
            message = module
        elif cause is not None:
            message = str(cause)
        else:
            message = ""

        super().__init__(message)
        self._module = module
        self._detail = detail
        self._cause = cause
        self._message = message
        if cause is not None:
            self.__cause__ = cause

    @property
    def module(self) -> str:
        return self._module or ""

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        fields = [
            f"{name}={value!r}"
            for name, value in (
                ("module", self._module),
                ("detail", self._detail),
                ("cause", self._cause),
            )
            if value is not None
        ]
        return f"{type(self).__name__}({', '.join(fields)})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._module, self._detail, self._cause))


class InvocationError(Exception):
    """Wraps the exception raised inside a dynamically invoked callable."""

    def __init__(self, target: BaseException, callable_name: str = "<callable>") -> None:
        super().__init__(f"{callable_name} raised {type(target).__name__}: {target}")
        self.target = target
        self.callable_name = callable_name

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.target, self.callable_name))

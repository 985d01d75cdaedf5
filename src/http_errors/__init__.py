"""HTTP errors as first-class exceptions.

This package provides an exception hierarchy carrying HTTP status codes,
one generated class per registered 4xx/5xx status, and a factory that
builds or decorates errors from loosely typed arguments.

Every generated class is available as a package attribute under both its
identifier and its class name::

    from http_errors import NotFound, NotFoundError, create_error

    raise create_error(404, "No such user")
"""

from __future__ import annotations

from .deprecation import HttpErrorsDeprecationWarning
from .errors import ClientError, HttpError, HttpErrorLike, ServerError, is_http_error
from .factory import ErrorOptions, create_error, from_exception, from_status
from .registry import ERRORS, code_class, error_class

__all__ = [
    # Factory
    "create_error",
    "from_status",
    "from_exception",
    "ErrorOptions",
    # Hierarchy
    "HttpError",
    "ClientError",
    "ServerError",
    "HttpErrorLike",
    "is_http_error",
    # Generated classes
    "ERRORS",
    "error_class",
    "code_class",
    # Warnings
    "HttpErrorsDeprecationWarning",
]


def __getattr__(name: str) -> type[HttpError]:
    error_cls = error_class(name)
    if error_cls is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return error_cls


def __dir__() -> list[str]:
    names = {key for key in ERRORS if isinstance(key, str)}
    names.update(cls.__name__ for cls in ERRORS.values())
    return sorted(set(globals()) | names)

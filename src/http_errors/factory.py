"""Factory for building HTTP errors from loosely typed arguments.

``create_error`` accepts any combination of an existing exception, a numeric
status (first argument only), a message string and a property mapping, and
returns a single exception carrying ``status``, ``status_code`` and
``expose``. ``from_status`` and ``from_exception`` are the explicit
construction paths over the same ``ErrorOptions`` structure.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from . import statuses
from .deprecation import deprecate
from .errors import HttpError, _is_number
from .registry import ERRORS, code_class

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500

_RESERVED_PROPS = frozenset({"status", "status_code"})


@dataclass
class ErrorOptions:
    """Normalized inputs for building an HTTP error.

    Attributes:
        status: Working status; validated and normalized by ``build``.
        message: Message for a newly created error.
        props: Extra attributes copied onto the result.
        error: Existing exception to decorate instead of creating one.
    """

    status: Any = DEFAULT_STATUS
    message: str | None = None
    props: Mapping[str, Any] = field(default_factory=dict)
    error: BaseException | None = None

    @classmethod
    def from_args(cls, args: tuple[Any, ...]) -> ErrorOptions:
        """Classify positional arguments left to right.

        Args:
            args: Any mix of an exception, a numeric status (first position
                only), a message string and a property mapping.

        Returns:
            The collected options.

        Raises:
            TypeError: If an argument has an unsupported type, or a property
                mapping has a non-string key.
        """
        options = cls()
        for index, arg in enumerate(args):
            if isinstance(arg, BaseException):
                options.error = arg
                options.status = (
                    getattr(arg, "status", None)
                    or getattr(arg, "status_code", None)
                    or options.status
                )
            elif _is_number(arg) and index == 0:
                options.status = arg
            elif isinstance(arg, str):
                options.message = arg
            elif isinstance(arg, Mapping):
                _check_prop_keys(arg, index)
                options.props = arg
            elif arg is None:
                options.props = {}
            else:
                raise TypeError(
                    f"argument #{index + 1} unsupported type {type(arg).__name__}"
                )
        return options

    def build(self) -> BaseException:
        """Build the error described by these options.

        Returns:
            A new instance of the matching status class, or the supplied
            exception decorated with ``status``, ``status_code`` and ``expose``.
        """
        status = _normalize_status(self.status)
        error_cls = ERRORS.get(status) or ERRORS.get(code_class(status))

        err = self.error
        if err is None:
            if error_cls is not None:
                err = error_cls(self.message)
            else:
                text = self.message or statuses.message(status) or ""
                err = Exception(text)
                err.message = text  # type: ignore[attr-defined]

        if (
            error_cls is None
            or not isinstance(err, error_cls)
            or err.status != status
        ):
            err.expose = status < 500  # type: ignore[attr-defined]
            err.status = status  # type: ignore[attr-defined]
            if not isinstance(err, HttpError):
                err.status_code = status  # type: ignore[attr-defined]

        for key, value in self.props.items():
            if key in _RESERVED_PROPS:
                continue
            setattr(err, key, value)
            if key == "message" and not isinstance(err, HttpError):
                # keep str(err) in step with the message attribute
                err.args = (value,)

        return err


def _check_prop_keys(props: Mapping[Any, Any], index: int) -> None:
    for key in props:
        if not isinstance(key, str):
            raise TypeError(
                f"argument #{index + 1} has non-string property name {key!r}"
            )


def _normalize_status(status: Any) -> Any:
    """Return ``status``, or the default when it is not a usable error status."""
    is_number = _is_number(status)
    if is_number and not 400 <= status < 600:
        deprecate("non-error status code; use only 4xx or 5xx status codes")

    if not is_number or (not statuses.is_registered(status) and not 400 <= status < 600):
        logger.debug("Unusable status %r, falling back to %d", status, DEFAULT_STATUS)
        return DEFAULT_STATUS

    return status


def create_error(*args: Any) -> BaseException:
    """Create an HTTP error.

    Arguments are classified by type, left to right:

    - an exception is decorated instead of creating a new one, and its own
      ``status`` (or ``status_code``) becomes the working status;
    - a number in first position is the status;
    - a string is the message;
    - a mapping holds extra attributes (``status`` and ``status_code`` are
      never copied).

    Statuses outside 4xx/5xx trigger a deprecation advisory. Statuses that
    are neither registered nor 4xx/5xx fall back to 500.

    Usage::

        raise create_error(404)
        raise create_error(403, "Access denied", {"code": "FORBIDDEN"})
        raise create_error(exc, {"path": path})

    Returns:
        The resulting exception, ready to raise.

    Raises:
        TypeError: If an argument has an unsupported type.
    """
    return ErrorOptions.from_args(args).build()


def from_status(status: Any, /, message: str | None = None, **props: Any) -> BaseException:
    """Create a new HTTP error for ``status`` with an optional message and attributes.

    Raises:
        TypeError: If ``status`` is not a number or ``message`` is not a string.
    """
    if not _is_number(status):
        raise TypeError(f"status must be a number, got {type(status).__name__}")
    args = (status, props) if message is None else (status, message, props)
    return ErrorOptions.from_args(args).build()


def from_exception(exc: BaseException, /, **props: Any) -> BaseException:
    """Decorate an existing exception as an HTTP error.

    Raises:
        TypeError: If ``exc`` is not an exception instance.
    """
    if not isinstance(exc, BaseException):
        raise TypeError(f"expected an exception instance, got {type(exc).__name__}")
    return create_error(exc, props)

"""HTTP error exception hierarchy.

Defines the abstract ``HttpError`` base together with the client (4xx) and
server (5xx) bases that every generated status class derives from, plus the
``is_http_error`` predicate for recognising errors built elsewhere.
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, TypeGuard

from . import statuses


class HttpErrorLike(Protocol):
    """Structural interface shared by HTTP errors and decorated exceptions."""

    status: int
    status_code: int
    expose: bool


class HttpError(Exception):
    """Abstract base for errors that carry an HTTP status code.

    Only concrete subclasses can be instantiated; constructing ``HttpError``
    (or one of the abstract ``ClientError``/``ServerError`` bases) raises
    ``TypeError``.

    Attributes:
        status: The HTTP status code.
        status_code: Alias of ``status``; reads and writes go to ``status``.
        message: Human-readable error description; stored as the exception's
            first argument, so ``str(err)`` always matches it.
        name: Display name, defaults to the class name.
        expose: Whether ``message`` is safe to show an untrusted client.
    """

    _abstract: ClassVar[bool] = True

    name: str = "HttpError"
    expose: bool = False
    status: int

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "_abstract" not in cls.__dict__:
            cls._abstract = False
        if "name" not in cls.__dict__:
            cls.name = cls.__name__

    def __new__(cls, *args: Any, **kwargs: Any) -> HttpError:
        if cls._abstract:
            raise TypeError("cannot construct abstract class")
        return super().__new__(cls, *args, **kwargs)

    def __init__(self, status: int, message: str | None = None) -> None:
        super().__init__("" if message is None else message)
        self.status = status

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    @message.setter
    def message(self, value: str) -> None:
        self.args = (value,)

    @property
    def status_code(self) -> int:
        return self.status

    @status_code.setter
    def status_code(self, value: int) -> None:
        self.status = value


class _StatusError(HttpError):
    """Base for classes bound to a single registered status code."""

    _abstract = True

    def __init__(self, message: str | None = None) -> None:
        if message is None:
            message = statuses.message(self.status)
        super().__init__(self.status, message)


class ClientError(_StatusError):
    """Base for 4xx errors. Messages are exposed to clients."""

    _abstract = True
    expose = True


class ServerError(_StatusError):
    """Base for 5xx errors. Messages are hidden from clients."""

    _abstract = True
    expose = False


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_http_error(value: object) -> TypeGuard[HttpErrorLike]:
    """Return True if ``value`` is an HTTP error.

    Instances of ``HttpError`` always qualify. Any other exception qualifies
    when it carries a boolean ``expose``, a numeric ``status_code`` and a
    matching ``status``, which is the shape ``create_error`` gives to
    foreign exceptions.
    """
    if not isinstance(value, BaseException):
        return False

    if isinstance(value, HttpError):
        return True

    status_code = getattr(value, "status_code", None)
    return (
        isinstance(getattr(value, "expose", None), bool)
        and _is_number(status_code)
        and getattr(value, "status", None) == status_code
    )

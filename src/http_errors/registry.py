"""Generated error classes for every registered 4xx and 5xx status code.

The classes are created once, at import time, from the status registry.
Each is registered in ``ERRORS`` under its numeric code and under its
identifier (``404`` and ``"NotFound"`` both map to ``NotFoundError``).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from . import statuses
from .errors import ClientError, HttpError, ServerError
from .identifiers import to_class_name, to_identifier

logger = logging.getLogger(__name__)

# Public module the generated classes are exposed on.
_EXPORT_MODULE = "http_errors"


def code_class(status: object) -> int:
    """Return the class bucket of a status code (404 -> 400, 503 -> 500).

    Uses the leading decimal digit of the status. Input that does not start
    with a digit yields 0, which matches no class.
    """
    text = str(status)
    if not text[:1].isdigit():
        return 0
    return int(text[0]) * 100


def _make_error_class(
    code: int, base: type[ClientError] | type[ServerError]
) -> type[HttpError]:
    class_name = to_class_name(to_identifier(statuses.message(code) or ""))
    return type(
        class_name,
        (base,),
        {
            "__module__": _EXPORT_MODULE,
            "__qualname__": class_name,
            "__doc__": f"{code} {statuses.message(code)}.",
            "status": code,
            "name": class_name,
        },
    )


def _build_error_classes(codes: Iterable[int]) -> dict[int | str, type[HttpError]]:
    """Generate one class per 4xx/5xx code, keyed by code and identifier.

    Codes outside the 4xx and 5xx classes are skipped.
    """
    table: dict[int | str, type[HttpError]] = {}
    for code in codes:
        klass = code_class(code)
        if klass == 400:
            error_cls = _make_error_class(code, ClientError)
        elif klass == 500:
            error_cls = _make_error_class(code, ServerError)
        else:
            continue

        table[code] = error_cls
        table[to_identifier(statuses.message(code) or "")] = error_cls

    return table


ERRORS: Mapping[int | str, type[HttpError]] = MappingProxyType(
    _build_error_classes(statuses.codes)
)

_BY_CLASS_NAME: Mapping[str, type[HttpError]] = MappingProxyType(
    {cls.__name__: cls for cls in ERRORS.values()}
)

logger.debug(
    "Registered %d HTTP error classes", sum(1 for key in ERRORS if isinstance(key, int))
)


def error_class(key: int | str) -> type[HttpError] | None:
    """Look up a generated error class.

    Args:
        key: Status code (``404``), identifier (``"NotFound"``) or class
            name (``"NotFoundError"``).

    Returns:
        The matching class, or None if there is none.
    """
    try:
        return ERRORS.get(key) or _BY_CLASS_NAME.get(key)  # type: ignore[arg-type]
    except TypeError:
        return None

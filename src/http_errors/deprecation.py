"""Deprecation advisories for callers of the error factory.

Advisories go through the :mod:`warnings` machinery as ``FutureWarning``
subclasses, so the default filters show each one once per call site.
They can be silenced with the ``NO_DEPRECATION`` environment variable,
which holds a comma- or space-separated list of namespaces (``*``
matches every namespace).
"""

from __future__ import annotations

import logging
import os
import re
import warnings

logger = logging.getLogger(__name__)

NAMESPACE = "http-errors"

_PACKAGE_DIR = os.path.dirname(__file__) + os.sep


class HttpErrorsDeprecationWarning(FutureWarning):
    """Issued when a caller relies on deprecated factory behaviour.

    Derives from ``FutureWarning`` so that it is visible to application
    callers under the default filters, not only in ``__main__`` or tests.
    """


def is_suppressed(namespace: str = NAMESPACE) -> bool:
    """Return True if NO_DEPRECATION silences advisories for ``namespace``."""
    no_deprecation = os.environ.get("NO_DEPRECATION")
    if not no_deprecation:
        return False

    names = [name for name in re.split(r"[\s,]+", no_deprecation) if name]
    return "*" in names or namespace in names


def deprecate(message: str) -> None:
    """Emit a deprecation advisory attributed to the first caller outside this package.

    Args:
        message: Description of the deprecated usage.
    """
    if is_suppressed():
        logger.debug("Suppressed deprecation advisory: %s", message)
        return

    warnings.warn(
        f"{NAMESPACE} deprecated {message}",
        HttpErrorsDeprecationWarning,
        skip_file_prefixes=(_PACKAGE_DIR,),
    )

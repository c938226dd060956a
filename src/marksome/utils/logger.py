"""Logger factory for Marksome.

Every module logs under the ``marksome`` namespace, so one call such as
``logging.getLogger("marksome").setLevel(logging.DEBUG)`` controls the whole
package. The library never installs handlers.

Loggers in use:
    marksome.parser: DEBUG summary of the matches found per parse
    marksome.renderers.html: WARNING for references missing from the table
"""

from __future__ import annotations

import logging

_NAMESPACE = "marksome"


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name``.

    Module names (``__name__``) are used as is; any other name is placed
    under the ``marksome.`` namespace.

    Example:
        >>> get_logger("marksome.parser").name
        'marksome.parser'
        >>> get_logger("plugins").name
        'marksome.plugins'
    """
    if name != _NAMESPACE and not name.startswith(f"{_NAMESPACE}."):
        name = f"{_NAMESPACE}.{name}"
    return logging.getLogger(name)

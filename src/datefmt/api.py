"""Process-wide default formatter and module-level convenience functions.

    >>> from datefmt import api
    >>> api.render("ISODate", 0)  # doctest: +SKIP
    '1970-01-01'

The default ``DateFormatter`` is built from ``DATEFMT_*`` environment
settings on first use.
"""
from __future__ import annotations

from datefmt.engine import DateFormatter
from datefmt.normalize.date_input import ABSENT

_default: DateFormatter | None = None


def get_default_formatter() -> DateFormatter:
    global _default
    if _default is None:
        _default = DateFormatter()
    return _default


def reset_default_formatter(formatter: DateFormatter | None = None) -> None:
    """Replace (or drop, to rebuild lazily) the process-wide formatter."""
    global _default
    _default = formatter


def render(format: object = ABSENT, date: object = ABSENT) -> str:
    return get_default_formatter().render(format, date)


def language(code: str | None = None) -> str:
    return get_default_formatter().language(code)


def supported_languages() -> frozenset[str]:
    return get_default_formatter().supported_languages()


def register(name: str, pattern: str) -> None:
    get_default_formatter().register(name, pattern)


def formatters() -> set[str]:
    return get_default_formatter().formatters()

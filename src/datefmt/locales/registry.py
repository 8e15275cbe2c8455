"""Locale registry holding the per-language tables and the active language."""
from __future__ import annotations

from collections.abc import Mapping

from datefmt.locales.tables import LOCALE_TABLES
from datefmt.models.locale import LocaleTable
from datefmt.utils.logging import get_logger

logger = get_logger(__name__)


class LocaleRegistry:
    """Fixed set of locale tables plus one mutable active-language slot.

    Reads are safe from anywhere; switching the language assumes a single
    writer, as nothing here is locked.
    """

    def __init__(self, tables: Mapping[str, LocaleTable] | None = None, default: str = "en"):
        self._tables: dict[str, LocaleTable] = dict(tables if tables is not None else LOCALE_TABLES)
        if default not in self._tables:
            raise ValueError(f"Default language {default!r} has no locale table")
        self._active = default

    def supported_languages(self) -> frozenset[str]:
        """Return the codes that ``language()`` will accept."""
        return frozenset(self._tables)

    def language(self, code: str | None = None) -> str:
        """Get or set the active language.

        An unsupported code leaves the active language unchanged; the current
        code is returned either way.
        """
        if code is None:
            return self._active
        if not isinstance(code, str) or code not in self._tables:
            logger.debug("unsupported_language_ignored", requested=code, active=self._active)
            return self._active
        if code != self._active:
            logger.info("language_changed", previous=self._active, active=code)
        self._active = code
        return self._active

    def table_for(self, code: str) -> LocaleTable:
        return self._tables[code]

    def active_table(self) -> LocaleTable:
        return self._tables[self._active]

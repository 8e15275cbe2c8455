"""Named formatter registry (alias → pattern)."""
from __future__ import annotations

from datefmt.errors import ArgumentTypeError
from datefmt.utils.logging import get_logger

logger = get_logger(__name__)

BUILTIN_FORMATTERS: dict[str, str] = {
    "ISODate": "YYYY-MM-DD",
    "ISOTime": "HH:mm:ss",
    "ISODateTime": "YYYY-MM-DDTHH:mm:ss",
    "ISODateTimeTZ": "YYYY-MM-DDTHH:mm:ssZ",
}


class FormatterRegistry:
    """Maps formatter names to pattern strings.

    Seeded with the ISO built-ins, which may themselves be overwritten.
    Patterns are not validated on registration; anything unrecognised simply
    renders as literal text.
    """

    def __init__(self):
        self._patterns: dict[str, str] = dict(BUILTIN_FORMATTERS)

    def register(self, name: str, pattern: str) -> None:
        """Insert or overwrite the pattern stored under *name*."""
        if not isinstance(name, str) or not name:
            raise ArgumentTypeError("name must be a non-empty string")
        if not isinstance(pattern, str):
            raise ArgumentTypeError("pattern must be a string")
        overwritten = name in self._patterns
        self._patterns[name] = pattern
        logger.info("formatter_registered", name=name, pattern=pattern, overwritten=overwritten)

    def formatters(self) -> set[str]:
        """Return every known formatter name (built-in and registered)."""
        return set(self._patterns)

    def resolve(self, name_or_pattern: str) -> str:
        """Return the pattern registered under the argument, or the argument itself."""
        return self._patterns.get(name_or_pattern, name_or_pattern)

"""Formatting engine: validates arguments and runs normalize → resolve → compile → render.

``DateFormatter`` owns all mutable state (the active language and the
formatter table). Mutation assumes a single writer; hosts that render from
several threads while switching languages should use one instance per
thread or serialise the writes themselves.
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import functools

from datefmt.config import Settings
from datefmt.errors import ArgumentTypeError
from datefmt.locales.registry import LocaleRegistry
from datefmt.normalize.date_input import ABSENT, DateNormalizer, classify_date
from datefmt.normalize.zones import resolve_zone
from datefmt.patterns.compiler import CompiledPattern, compile_pattern
from datefmt.patterns.registry import FormatterRegistry
from datefmt.patterns.renderer import render_tokens

FORMAT_TYPE_MESSAGE = "format must be a string"


class DateFormatter:
    """Renders dates through named or literal patterns in the active language."""

    def __init__(self, settings: Settings | None = None,
                 clock: Callable[[], datetime] | None = None):
        self.settings = settings or Settings()
        self.locales = LocaleRegistry(default=self.settings.default_language)
        self.formatter_registry = FormatterRegistry()
        self._normalizer = DateNormalizer(resolve_zone(self.settings.timezone), clock)
        self._compile: Callable[[str], CompiledPattern] = functools.lru_cache(
            maxsize=self.settings.pattern_cache_size
        )(compile_pattern)

    def render(self, format: object = ABSENT, date: object = ABSENT) -> str:
        """Render *date* (default: now) using *format*, a formatter name or a raw pattern.

        Raises:
            ArgumentTypeError: *format* is not a string, or *date* is not an
                accepted shape.
            InvalidDateError: *date* cannot be resolved to a calendar point.
        """
        if not isinstance(format, str):
            raise ArgumentTypeError(FORMAT_TYPE_MESSAGE)
        date_input = classify_date(date)
        calendar = self._normalizer.normalize(date_input)
        pattern = self.formatter_registry.resolve(format)
        tokens = self._compile(pattern)
        return render_tokens(tokens, calendar, self.locales.active_table())

    def language(self, code: str | None = None) -> str:
        return self.locales.language(code)

    def supported_languages(self) -> frozenset[str]:
        return self.locales.supported_languages()

    def register(self, name: str, pattern: str) -> None:
        self.formatter_registry.register(name, pattern)

    def formatters(self) -> set[str]:
        return self.formatter_registry.formatters()

    def compile(self, pattern: str) -> CompiledPattern:
        """Compile *pattern* through this instance's cache."""
        if not isinstance(pattern, str):
            raise ArgumentTypeError("pattern must be a string")
        return self._compile(pattern)

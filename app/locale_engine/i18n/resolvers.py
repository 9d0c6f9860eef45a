"""Locale resolution: picking a supported locale from user input.

Provides validation of raw locale strings against a supported list and
Accept-Language negotiation (exact match first, then language-only).
"""

from typing import Iterable, List, Optional, Tuple

from locale_engine.core.config import LOCALE_CODE_PATTERN
from locale_engine.core.logging import get_module_logger
from locale_engine.i18n.plurals import primary_language

logger = get_module_logger()


def parse_accept_language(header: Optional[str]) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (range, quality) pairs.

    "en-US,en;q=0.9,fr;q=0.8" -> [("en-US", 1.0), ("en", 0.9), ("fr", 0.8)]

    Pairs are sorted by quality, highest first; ties keep header order.
    Malformed quality values count as 1.0, and "*" is ignored.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        lang_range, _, params = part.partition(";")
        lang_range = lang_range.strip()
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0
        preferences.append((lang_range, quality))

    return sorted(preferences, key=lambda pref: pref[1], reverse=True)


class LocaleResolver:
    """Resolves a supported locale from requested locales.

    Attributes:
        supported_locales: Locales the application ships catalogs for.
            Empty means any well-formed locale is accepted as-is.
        default_locale: Returned when nothing matches.
    """

    def __init__(
        self,
        supported_locales: Optional[Iterable[str]] = None,
        default_locale: str = "en",
    ):
        self.supported_locales = list(supported_locales or [])
        self.default_locale = default_locale
        # lowercase -> canonical casing ("en-us" -> "en-US")
        self._canonical = {locale.lower(): locale for locale in self.supported_locales}
        self.log = logger.bind(default_locale=default_locale)

    def validate(self, locale: Optional[str]) -> str:
        """Normalize a raw locale string to a supported locale.

        With a supported list, tries in order: exact match (case-insensitive),
        the base language ("pl-PL" -> "pl"), then a regional variant of the
        base language ("en" -> "en-US"). Without one, any well-formed locale
        code is accepted as-is.

        Returns:
            The locale in its canonical casing, or the default locale when the
            input is empty, malformed or unsupported.
        """
        if not locale or not locale.strip():
            return self.default_locale
        trimmed = locale.strip()

        if not self.supported_locales:
            if LOCALE_CODE_PATTERN.match(trimmed):
                return trimmed
            self.log.warning("malformed_locale", locale=trimmed)
            return self.default_locale

        match = self._canonical.get(trimmed.lower())
        if match is not None:
            return match

        language = primary_language(trimmed)
        base_match = self._canonical.get(language)
        if base_match is not None:
            return base_match

        for supported in self.supported_locales:
            if primary_language(supported) == language and supported.lower() != language:
                return supported

        self.log.warning("unsupported_locale", locale=trimmed)
        return self.default_locale

    def best_match(self, requested: Iterable[str]) -> Optional[str]:
        """Find the best supported locale for requested tags in preference order.

        Each tag is first matched exactly (case-insensitive), then by
        primary language ("pt-BR" matches "pt", "en" matches "en-US").

        Returns:
            The matching supported locale, or None.
        """
        for tag in requested:
            exact = self._canonical.get(tag.lower())
            if exact is not None:
                return exact
            language = primary_language(tag)
            for locale in self.supported_locales:
                if primary_language(locale) == language:
                    return locale
        return None

    def resolve_from_header(self, accept_language: Optional[str]) -> str:
        """Resolve a locale from an HTTP Accept-Language header.

        Returns:
            The best supported locale, or the default locale.
        """
        preferences = [lang for lang, _ in parse_accept_language(accept_language)]
        match = self.best_match(preferences)
        if match is None:
            self.log.info("no_matching_locale_in_header", header=accept_language)
            return self.default_locale
        self.log.info("resolved_from_header", locale=match)
        return match

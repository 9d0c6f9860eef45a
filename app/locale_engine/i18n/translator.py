"""Translation resolution pipeline.

translate() is the stateless core: look the key up in the current locale,
pick a plural form, retry in the fallback locale, and interpolate. The
Translator class wraps it with catalogs and locale state.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from locale_engine.core.logging import get_module_logger
from locale_engine.i18n import formatters
from locale_engine.i18n.interpolation import interpolate
from locale_engine.i18n.loader import CatalogLoader, deep_merge
from locale_engine.i18n.lookup import resolve_path
from locale_engine.i18n.models import (
    MissingKeyHandler,
    ParameterMap,
    TranslationCatalog,
    get_count,
    is_plural_form_set,
)
from locale_engine.i18n.plurals import plural_category

logger = get_module_logger()


def _resolve_template(
    messages: Optional[Mapping[str, Any]],
    key: str,
    locale: str,
    params: Optional[ParameterMap],
) -> Optional[str]:
    """Find the template string for a key in a single locale's messages.

    With a numeric params["count"], tries "<key>.<category>", then
    "<key>.other", then a plain string at "<key>". Without a count only a
    plain string resolves.
    """
    count = get_count(params)
    if count is not None:
        category = plural_category(locale, count)
        for path in (f"{key}.{category.value}", f"{key}.other"):
            text = resolve_path(messages, path)
            if isinstance(text, str):
                return text

    text = resolve_path(messages, key)
    return text if isinstance(text, str) else None


def debug_representation(key: str, params: Optional[ParameterMap] = None) -> str:
    """Render "[key]" or "[key] {a=1, b=2}" for debug mode."""
    if not params:
        return f"[{key}]"
    rendered = ", ".join(f"{name}={value}" for name, value in params.items())
    return f"[{key}] {{{rendered}}}"


def translate(
    current_locale: str,
    fallback_locale: str,
    catalog: TranslationCatalog,
    key: str,
    params: Optional[ParameterMap] = None,
    on_missing_key: Optional[MissingKeyHandler] = None,
    debug: bool = False,
) -> str:
    """Resolve and interpolate a translation.

    Example:
        translate("en", "en", {"en": {"greeting": "Hello"}}, "greeting")  # "Hello"

    Args:
        current_locale: Active locale.
        fallback_locale: Locale retried when the key is missing.
        catalog: Mapping of locale code to nested messages.
        key: Dot-separated translation key.
        params: Interpolation parameters; "count" drives plural selection.
        on_missing_key: Called with (key, current_locale) when the key is
            missing in the current locale and a fallback is attempted.
        debug: Return "[key] {params}" instead of translating.

    Returns:
        The translated string, or the key itself if nothing was found.
    """
    if debug:
        return debug_representation(key, params)

    text = _resolve_template(catalog.get(current_locale), key, current_locale, params)

    if text is None and current_locale != fallback_locale:
        if on_missing_key is not None:
            on_missing_key(key, current_locale)
        logger.warning(
            "translation_missing_in_locale",
            key=key,
            locale=current_locale,
            fallback_locale=fallback_locale,
        )
        # The fallback text is selected with the fallback locale's plural rules.
        text = _resolve_template(
            catalog.get(fallback_locale), key, fallback_locale, params
        )

    if text is None:
        logger.warning(
            "translation_not_found",
            key=key,
            locale=current_locale,
            fallback_locale=fallback_locale,
        )
        return key

    return interpolate(text, params, current_locale, key=key)


class Translator:
    """Stateful translator holding catalogs and the active locale.

    Attributes:
        catalogs: Loaded messages by locale code.
        locale: Active locale.
        fallback_locale: Locale to use when a key is not found.
        debug: When True, translate() returns "[key] {params}".
        on_missing_key: Optional callback for keys missing in the active locale.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, Any]]] = None,
        locale: str = "en",
        fallback_locale: str = "en",
        loader: Optional[CatalogLoader] = None,
        on_missing_key: Optional[MissingKeyHandler] = None,
        debug: bool = False,
    ):
        self.catalogs: Dict[str, Mapping[str, Any]] = dict(catalogs or {})
        self.locale = locale
        self.fallback_locale = fallback_locale
        self.loader = loader
        self.on_missing_key = on_missing_key
        self.debug = debug
        logger.info(
            "initialized_translator",
            locale=locale,
            fallback_locale=fallback_locale,
        )

    def load_all(self) -> None:
        """Load every locale the loader knows about."""
        if self.loader is None:
            raise ValueError("Translator has no catalog loader")
        self.catalogs.update(self.loader.load_all())
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: str) -> None:
        """Load a single locale from the loader.

        Raises:
            FileNotFoundError: If no catalog files exist for the locale.
        """
        if self.loader is None:
            raise ValueError("Translator has no catalog loader")
        self.catalogs[locale] = self.loader.load(locale)
        logger.info("loaded_locale_translations", locale=locale)

    def add_catalog(self, locale: str, messages: Mapping[str, Any]) -> None:
        """Merge messages into a locale's catalog (later entries win)."""
        self.catalogs[locale] = deep_merge(self.catalogs.get(locale, {}), messages)

    def translate(
        self,
        key: str,
        params: Optional[ParameterMap] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key in the active (or given) locale."""
        return translate(
            locale or self.locale,
            self.fallback_locale,
            self.catalogs,
            key,
            params,
            on_missing_key=self.on_missing_key,
            debug=self.debug,
        )

    __call__ = translate

    def has_message(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether a key resolves to a string or plural set in a locale."""
        value = resolve_path(self.catalogs.get(locale or self.locale), key)
        return isinstance(value, str) or is_plural_form_set(value)

    def set_locale(self, locale: str) -> bool:
        """Switch the active locale if it has a catalog.

        Returns:
            True if the locale was changed.
        """
        if locale not in self.catalogs:
            logger.warning("locale_not_loaded", locale=locale)
            return False
        self.locale = locale
        return True

    def set_debug(self, enabled: bool) -> None:
        """Enable or disable debug mode."""
        self.debug = enabled

    def get_available_locales(self) -> List[str]:
        """Return the locales that have catalogs."""
        return list(self.catalogs.keys())

    def format_number(self, value: Any, style: str = "decimal") -> str:
        """Format a number in the active locale."""
        return formatters.format_number(value, self.locale, style)

    def format_currency(self, value: Any, currency: Optional[str] = None) -> str:
        """Format an amount in the active locale."""
        return formatters.format_currency(value, self.locale, currency)

    def format_date(self, value: Any, style: str = "medium") -> str:
        """Format a date in the active locale."""
        return formatters.format_date(value, self.locale, style)

    def format_list(self, items: Iterable[Any], style: str = "conjunction") -> str:
        """Join items in the active locale."""
        return formatters.format_list(items, self.locale, style)

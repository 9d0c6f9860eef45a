"""Translation service facade.

Provides a class-based interface combining translation and safe markup
rendering, for easier injection and mocking.
"""

from typing import Any, Mapping, Optional

from locale_engine.i18n.factory import create_translator
from locale_engine.i18n.models import ParameterMap
from locale_engine.i18n.translator import Translator
from locale_engine.markup.models import Segments
from locale_engine.markup.parser import segment
from locale_engine.markup.rich import SlotRenderer, render_rich


class TranslationService:
    """Class-based translation service.

    A thin facade: translation is delegated to a Translator, markup
    handling to the markup package.

    Usage:
        service = TranslationService()
        service.translate("greeting", {"name": "Ada"})
        service.translate_rich("terms", renderers={"link": render_link})
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: str,
        params: Optional[ParameterMap] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate and interpolate a key."""
        return self._translator.translate(key, params, locale=locale)

    def segment(
        self,
        key: str,
        params: Optional[ParameterMap] = None,
        locale: Optional[str] = None,
    ) -> Segments:
        """Translate a key and split the result into text/slot segments."""
        return segment(self.translate(key, params, locale=locale))

    def translate_rich(
        self,
        key: str,
        params: Optional[ParameterMap] = None,
        renderers: Optional[Mapping[str, SlotRenderer]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key and render it as escaped HTML.

        Inline tags from the allowlist become elements; slots named in
        renderers are rendered by the caller; everything else is escaped.
        """
        return render_rich(self.segment(key, params, locale=locale), renderers)

    def has_message(self, key: str, locale: Optional[str] = None) -> bool:
        return self._translator.has_message(key, locale)

    def get_available_locales(self) -> list[str]:
        return self._translator.get_available_locales()

    def add_catalog(self, locale: str, messages: Mapping[str, Any]) -> None:
        self._translator.add_catalog(locale, messages)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator

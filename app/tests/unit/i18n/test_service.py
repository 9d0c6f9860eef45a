"""Tests for locale_engine.i18n.service and factory modules."""

from unittest.mock import MagicMock, patch

import pytest

from locale_engine.core.config import I18nSettings
from locale_engine.i18n.factory import create_translator
from locale_engine.i18n.service import TranslationService
from locale_engine.i18n.translator import Translator
from locale_engine.markup.models import SlotSegment, TextSegment

pytestmark = pytest.mark.unit


class TestCreateTranslator:
    def test_preloads_yaml(self, temp_translations_dir):
        translator = create_translator(translations_dir=temp_translations_dir)
        assert set(translator.get_available_locales()) == {"en", "fr", "pl-PL"}
        assert translator.translate("nav.home") == "Home"

    def test_lazy(self, temp_translations_dir):
        translator = create_translator(translations_dir=temp_translations_dir, preload=False)
        assert translator.get_available_locales() == []
        assert translator.loader is not None

    def test_uses_settings(self, temp_translations_dir):
        config = I18nSettings(
            I18N_DEFAULT_LOCALE="fr",
            I18N_FALLBACK_LOCALE="en",
            I18N_DEBUG=True,
            I18N_TRANSLATIONS_DIR=str(temp_translations_dir),
        )
        translator = create_translator(i18n_settings=config)
        assert translator.locale == "fr"
        assert translator.fallback_locale == "en"
        assert translator.translate("greeting") == "[greeting]"

    @patch("locale_engine.i18n.factory.logger")
    def test_without_directory(self, mock_logger):
        translator = create_translator(i18n_settings=I18nSettings())
        assert translator.loader is None
        assert translator.get_available_locales() == []
        mock_logger.info.assert_called_once_with("translator_created_without_catalogs")

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ValueError):
            create_translator(translations_dir=tmp_path / "nope")


class TestTranslationService:
    @pytest.fixture
    def service(self, catalog):
        catalog["en"]["styled"] = 'Read <b class="x" onclick="no">this</b>, <Em style="c">{{name}}</Em>'
        catalog["en"]["unsafe"] = "Hi <i>{{name}}</i>"
        return TranslationService(translator=Translator(catalogs=catalog))

    def test_translate(self, service):
        assert service.translate("welcome", {"name": "Ada"}) == "Welcome, Ada!"

    def test_translate_locale(self, service):
        assert service.translate("greeting", locale="fr") == "Bonjour"

    def test_segment(self, service):
        assert service.segment("terms") == (
            TextSegment("Accept the "),
            SlotSegment("link", {"href": "/terms"}, "terms"),
        )

    def test_translate_rich_with_renderer(self, service):
        render_link = MagicMock(return_value='<a href="/terms">terms</a>')
        html = service.translate_rich("terms", renderers={"Link": render_link})
        assert html == 'Accept the <a href="/terms">terms</a>'
        render_link.assert_called_once_with("terms", {"href": "/terms"})

    def test_translate_rich_safe_tags(self, service):
        html = service.translate_rich("styled", {"name": "A&B"})
        # onclick drops all attributes of <b>; style is not allowlisted on <em>
        assert html == "Read <b>this</b>, <em>A&amp;B</em>"

    def test_translate_rich_escapes_params(self, service):
        html = service.translate_rich("unsafe", {"name": "<script>x</script>"})
        assert "<script>" not in html
        assert html == "Hi <i>&lt;script&gt;x&lt;/script&gt;</i>"

    def test_has_message(self, service):
        assert service.has_message("greeting") is True
        assert service.has_message("nope") is False

    def test_add_catalog(self, service):
        service.add_catalog("de", {"greeting": "Hallo"})
        assert "de" in service.get_available_locales()
        assert service.translate("greeting", locale="de") == "Hallo"

    def test_translator_property(self, service):
        assert isinstance(service.translator, Translator)

    def test_default_translator_from_factory(self):
        with patch("locale_engine.i18n.service.create_translator") as mock_create:
            service = TranslationService()
        assert service.translator is mock_create.return_value

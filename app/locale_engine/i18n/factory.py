"""Factory functions for creating i18n components.

Builds translators from the application settings, optionally preloading
YAML catalogs.
"""

from pathlib import Path
from typing import Optional

from locale_engine.core.config import I18nSettings, settings
from locale_engine.core.logging import get_module_logger
from locale_engine.i18n.loader import YAMLCatalogLoader
from locale_engine.i18n.models import MissingKeyHandler
from locale_engine.i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    i18n_settings: Optional[I18nSettings] = None,
    on_missing_key: Optional[MissingKeyHandler] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        translations_dir: Directory of YAML catalogs. Defaults to
            I18N_TRANSLATIONS_DIR; when neither is set the translator starts
            with no catalogs and callers add them with add_catalog().
        i18n_settings: Settings to use instead of the global ones.
        on_missing_key: Callback for keys missing in the active locale.
        use_cache: Whether the loader caches parsed YAML.
        preload: Whether to load every locale immediately.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        translator = create_translator(translations_dir=Path("locales"))
        translator.translate("nav.home")
    """
    config = i18n_settings or settings.i18n
    if translations_dir is None and config.TRANSLATIONS_DIR:
        translations_dir = Path(config.TRANSLATIONS_DIR)

    loader = None
    if translations_dir is not None:
        loader = YAMLCatalogLoader(translations_dir=translations_dir, use_cache=use_cache)

    translator = Translator(
        locale=config.DEFAULT_LOCALE,
        fallback_locale=config.FALLBACK_LOCALE,
        loader=loader,
        on_missing_key=on_missing_key,
        debug=config.DEBUG,
    )

    if loader is None:
        logger.info("translator_created_without_catalogs")
    elif preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator

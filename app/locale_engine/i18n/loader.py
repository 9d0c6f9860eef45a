"""Catalog loading interface and implementations.

Loaders are collaborators that produce in-memory catalogs; the engine
itself never reads files. Everything a loader returns passes through
normalize_fragment() so unsafe keys never reach a catalog.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from locale_engine.core.config import LOCALE_CODE_PATTERN
from locale_engine.core.logging import get_module_logger
from locale_engine.i18n.lookup import is_unsafe_key

logger = get_module_logger()


class CatalogLoadError(Exception):
    """Raised when a locale or namespace catalog cannot be loaded."""

    def __init__(self, message: str, locale: str | None = None):
        super().__init__(message)
        self.locale = locale


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge source into a copy of target, recursively.

    Unsafe keys (__proto__, constructor, prototype) are skipped. When source
    holds a mapping where target holds a string, the string is replaced.

    Args:
        target: Existing messages (not modified).
        source: Messages to merge in; later entries win.

    Returns:
        A new merged dict.
    """
    output: Dict[str, Any] = dict(target)
    for key, source_value in source.items():
        if is_unsafe_key(str(key)):
            logger.warning("skipped_unsafe_catalog_key", key=str(key))
            continue
        if isinstance(source_value, Mapping):
            target_value = target.get(key)
            merge_target = target_value if isinstance(target_value, Mapping) else {}
            output[key] = deep_merge(merge_target, source_value)
        else:
            output[key] = source_value
    return output


def normalize_fragment(fragment: Any) -> Dict[str, Any]:
    """Normalize a loader result into a plain, sanitized catalog dict.

    Accepts either a mapping or a module-style {"default": mapping} wrapper;
    both produce the same result.

    Raises:
        CatalogLoadError: If the fragment is not a mapping.
    """
    if isinstance(fragment, Mapping) and set(fragment.keys()) == {"default"}:
        if isinstance(fragment["default"], Mapping):
            fragment = fragment["default"]
    if not isinstance(fragment, Mapping):
        raise CatalogLoadError(
            f"Catalog fragment must be a mapping, got {type(fragment).__name__}"
        )
    return deep_merge({}, fragment)


class CatalogLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load(self, locale: str) -> Dict[str, Any]:
        """Load the catalog for a specific locale.

        Raises:
            FileNotFoundError: If no catalog exists for the locale.
            ValueError: If the catalog format is invalid.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load catalogs for every available locale."""


class YAMLCatalogLoader(CatalogLoader):
    """Loader for YAML catalog files.

    Expects files named <locale>.yml or <namespace>.<locale>.yml in the
    translations directory. All files for a locale are deep-merged.

    Attributes:
        translations_dir: Directory containing YAML files.
        cache: Loaded catalogs by locale, when use_cache is set.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dict[str, Any]] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @staticmethod
    def _locale_from_file(yaml_file: Path) -> str | None:
        # "incident.en-US.yml" -> "en-US", "pl.yml" -> "pl"
        locale = yaml_file.stem.split(".")[-1]
        return locale if LOCALE_CODE_PATTERN.match(locale) else None

    def _files_for(self, locale: str) -> list[Path]:
        return sorted(
            path
            for path in self.translations_dir.glob("*.yml")
            if self._locale_from_file(path) == locale
        )

    def load(self, locale: str) -> Dict[str, Any]:
        """Load and merge every YAML file for a locale.

        Raises:
            FileNotFoundError: If no YAML files exist for the locale.
            ValueError: If a file cannot be parsed.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        catalog: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, Mapping):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="mapping"
                )
                continue
            catalog = deep_merge(catalog, data)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            key_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[str, Dict[str, Any]]:
        """Load every locale found in the directory.

        Raises:
            ValueError: If no translation files are found at all.
        """
        locales = {
            locale
            for locale in map(self._locale_from_file, self.translations_dir.glob("*.yml"))
            if locale
        }
        if not locales:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return {locale: self.load(locale) for locale in sorted(locales)}

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

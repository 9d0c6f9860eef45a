"""Async locale store: lazy catalog loading and locale switching.

Loaders are zero-argument coroutine functions returning a catalog mapping
(or a {"default": mapping} module-style wrapper). Concurrent loads of the
same locale or namespace share one task, and a locale switch that is
superseded by a newer set_locale() call never takes effect.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Set

from locale_engine.core.logging import get_module_logger
from locale_engine.i18n.loader import CatalogLoadError, deep_merge, normalize_fragment
from locale_engine.i18n.models import MissingKeyHandler, ParameterMap
from locale_engine.i18n.translator import translate

logger = get_module_logger()

CatalogFactory = Callable[[], Awaitable[Any]]


class LocaleStore:
    """Holds catalogs for several locales and the currently active one.

    Attributes:
        catalogs: Loaded messages by locale code.
        locale: Active locale.
        fallback_locale: Locale used when a key is missing.
        debug: Debug mode flag passed to translate().
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, Any]]] = None,
        loaders: Optional[Mapping[str, CatalogFactory]] = None,
        namespace_loaders: Optional[Mapping[str, Mapping[str, CatalogFactory]]] = None,
        locale: str = "en",
        fallback_locale: str = "en",
        on_missing_key: Optional[MissingKeyHandler] = None,
        debug: bool = False,
    ):
        self.catalogs: Dict[str, Dict[str, Any]] = {
            code: normalize_fragment(messages) for code, messages in (catalogs or {}).items()
        }
        self.loaders: Dict[str, CatalogFactory] = dict(loaders or {})
        self.namespace_loaders = {
            code: dict(namespaces) for code, namespaces in (namespace_loaders or {}).items()
        }
        self.locale = locale
        self.fallback_locale = fallback_locale
        self.on_missing_key = on_missing_key
        self.debug = debug

        self._request_id = 0
        self._locale_tasks: Dict[str, asyncio.Task] = {}
        self._namespace_tasks: Dict[str, asyncio.Task] = {}
        self._loaded_namespaces: Dict[str, Set[str]] = {}

    @property
    def loading_locales(self) -> Set[str]:
        """Locales with a load in flight."""
        return set(self._locale_tasks)

    @property
    def is_loading_namespace(self) -> bool:
        """True while any namespace load is in flight."""
        return bool(self._namespace_tasks)

    async def load_locale(self, locale: str) -> None:
        """Load a locale's catalog through its loader.

        Does nothing if the catalog is already present. Concurrent calls for
        the same locale await the same load.

        Raises:
            CatalogLoadError: If no loader is registered for the locale or the
                loader result is not a mapping.
        """
        if locale in self.catalogs:
            return
        if locale not in self.loaders:
            raise CatalogLoadError(f"No loader defined for locale '{locale}'", locale)

        task = self._locale_tasks.get(locale)
        if task is None:
            task = asyncio.ensure_future(self._run_locale_loader(locale))
            self._locale_tasks[locale] = task
        await asyncio.shield(task)

    async def _run_locale_loader(self, locale: str) -> None:
        started_for = self._request_id
        try:
            fragment = await self.loaders[locale]()
            self.catalogs[locale] = normalize_fragment(fragment)
            logger.info("loaded_locale", locale=locale)
        except Exception as e:
            logger.error("locale_load_failed", locale=locale, error=str(e))
            raise
        finally:
            self._locale_tasks.pop(locale, None)
            if started_for != self._request_id:
                logger.debug("stale_locale_load_completed", locale=locale)

    async def set_locale(self, locale: str, lazy_load: bool = True) -> bool:
        """Switch the active locale, loading it first if needed.

        If another set_locale() call starts before this one finishes loading,
        this call is abandoned and the newer request decides the locale.

        Returns:
            True if the active locale was changed by this call.
        """
        self._request_id += 1
        request_id = self._request_id

        if locale not in self.catalogs:
            if not (lazy_load and locale in self.loaders):
                logger.warning("locale_not_found", locale=locale)
                return False
            try:
                await self.load_locale(locale)
            except Exception as e:
                logger.error("locale_switch_failed", locale=locale, error=str(e))
                return False

        if request_id != self._request_id:
            logger.debug("superseded_locale_request", locale=locale)
            return False

        self.locale = locale
        logger.info("locale_changed", locale=locale)
        return True

    async def load_namespace(self, namespace: str, locale: Optional[str] = None) -> None:
        """Load a namespace fragment and deep-merge it into a locale catalog.

        Args:
            namespace: Namespace name, e.g. "dashboard".
            locale: Target locale; defaults to the active locale.
        """
        target = locale or self.locale
        if namespace in self._loaded_namespaces.get(target, set()):
            return

        loader = self.namespace_loaders.get(target, {}).get(namespace)
        if loader is None:
            logger.warning("namespace_loader_missing", namespace=namespace, locale=target)
            return

        task_key = f"{target}:{namespace}"
        task = self._namespace_tasks.get(task_key)
        if task is None:
            task = asyncio.ensure_future(self._run_namespace_loader(target, namespace, loader))
            self._namespace_tasks[task_key] = task
        await asyncio.shield(task)

    async def _run_namespace_loader(
        self, locale: str, namespace: str, loader: CatalogFactory
    ) -> None:
        try:
            fragment = normalize_fragment(await loader())
            self.catalogs[locale] = deep_merge(self.catalogs.get(locale, {}), fragment)
            self._loaded_namespaces.setdefault(locale, set()).add(namespace)
            logger.info("loaded_namespace", namespace=namespace, locale=locale)
        except Exception as e:
            logger.error(
                "namespace_load_failed", namespace=namespace, locale=locale, error=str(e)
            )
            raise
        finally:
            self._namespace_tasks.pop(f"{locale}:{namespace}", None)

    def is_namespace_loaded(self, namespace: str, locale: Optional[str] = None) -> bool:
        """Check whether a namespace has been merged into a locale."""
        return namespace in self._loaded_namespaces.get(locale or self.locale, set())

    def mark_namespaces_loaded(self, locale: str, namespaces: list[str]) -> None:
        """Record namespaces that were merged elsewhere (e.g. preloaded)."""
        self._loaded_namespaces.setdefault(locale, set()).update(namespaces)

    def translate(self, key: str, params: Optional[ParameterMap] = None) -> str:
        """Translate a key with whatever catalogs are currently loaded."""
        return translate(
            self.locale,
            self.fallback_locale,
            self.catalogs,
            key,
            params,
            on_missing_key=self.on_missing_key,
            debug=self.debug,
        )

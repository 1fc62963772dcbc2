# src/html_spellchecker/managers/registry_manager.py
import logging
from typing import Callable, Dict, Iterable, Optional, Set

from html_spellchecker.checker import HTMLSpellchecker
from html_spellchecker.dom.policy import default_skip_tags
from html_spellchecker.managers.config_manager import config_manager
from html_spellchecker.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

CheckerFactory = Callable[[str, Set[str]], HTMLSpellchecker]


class SpellcheckerRegistry:
    """
    Builds one HTMLSpellchecker per locale on first use and caches it.

    Every checker the registry builds shares the registry's `skip_tags` set,
    so a registry acts as one configuration; separate registries can coexist.
    """

    def __init__(self, factory: Optional[CheckerFactory] = None, skip_tags: Optional[Iterable[str]] = None):
        """
        Args:
            factory: Callable (locale, skip_tags) -> HTMLSpellchecker. Defaults to enchant-backed checkers.
            skip_tags: Initial skip set; defaults to 'spellcheck.skip_tags' from settings.json.
        """
        self._factory = factory or self._build_default
        self.skip_tags: Set[str] = (
            {tag.lower() for tag in skip_tags} if skip_tags is not None else default_skip_tags()
        )
        self._checkers: Dict[str, HTMLSpellchecker] = {}

    @staticmethod
    def _build_default(locale: str, skip_tags: Set[str]) -> HTMLSpellchecker:
        word_list = None
        word_list_dir = config_manager.get_nested("spellcheck.personal_word_list_dir")
        if word_list_dir:
            word_list = PathUtils.get_personal_word_list(locale, word_list_dir)
        return HTMLSpellchecker(locale, skip_tags=skip_tags, personal_word_list=word_list)

    def for_language(self, locale: str, rebuild: bool = False) -> HTMLSpellchecker:
        """
        Returns the cached checker for `locale`, building it on first use.

        Args:
            locale (str): Locale identifier, e.g. 'en_US'.
            rebuild (bool): Forget any cached instance (and its custom words) and build a fresh one.
                Checkers already handed out stay open and usable.

        Raises:
            DictionaryUnavailableError: If the locale's dictionary cannot be loaded.
        """
        if rebuild and self._checkers.pop(locale, None) is not None:
            logger.debug("Replacing cached spellchecker for %s", locale)

        checker = self._checkers.get(locale)
        if checker is None:
            logger.info("Building spellchecker for %s", locale)
            checker = self._factory(locale, self.skip_tags)
            self._checkers[locale] = checker
        return checker

    def english(self, rebuild: bool = False) -> HTMLSpellchecker:
        return self.for_language("en_US", rebuild)

    def french(self, rebuild: bool = False) -> HTMLSpellchecker:
        return self.for_language("fr_FR", rebuild)

    def discard(self, locale: str) -> None:
        """Drops (and closes) the cached checker for `locale`, if any."""
        checker = self._checkers.pop(locale, None)
        if checker is not None:
            checker.close()
            logger.debug("Discarded spellchecker for %s", locale)

    def clear(self) -> None:
        for locale in list(self._checkers):
            self.discard(locale)

    def __contains__(self, locale: str) -> bool:
        return locale in self._checkers


# The process-wide default registry.
spellchecker_registry = SpellcheckerRegistry()


def for_language(locale: Optional[str] = None, rebuild: bool = False) -> HTMLSpellchecker:
    """Shortcut to the default registry; `locale` defaults to 'spellcheck.default_language'."""
    locale = locale or config_manager.get_nested("spellcheck.default_language", "en_US")
    return spellchecker_registry.for_language(locale, rebuild)

# src/html_spellchecker/services/dictionary_service.py
"""
Dictionary Client capability and its pyenchant-backed implementation.

The spellchecker only ever asks three things of a dictionary: does it
contain a word, add a word, remove a word. Anything satisfying the
`DictionaryClient` protocol can be handed to `HTMLSpellchecker`.
"""
import logging
from pathlib import Path
from typing import Optional, Protocol, Union

logger = logging.getLogger(__name__)


class SpellcheckError(Exception):
    """Base class for all errors raised by html_spellchecker."""


class DictionaryUnavailableError(SpellcheckError):
    """Raised when the dictionary for a locale cannot be loaded."""

    def __init__(self, language: str, reason: str):
        super().__init__(f"Dictionary for '{language}' is unavailable: {reason}")
        self.language = language
        self.reason = reason


class DictionaryClient(Protocol):
    """Minimal capability the spellchecker needs from a dictionary."""

    def contains(self, word: str) -> bool:
        ...

    def add(self, word: str) -> None:
        ...

    def remove(self, word: str) -> None:
        ...


class EnchantDictionary:
    """
    DictionaryClient backed by PyEnchant (Hunspell/Aspell/... via libenchant).

    Custom words are added to and removed from the enchant *session*, so
    they live as long as this instance and are never written to the user's
    personal word list on disk.
    """

    def __init__(self, language: str = "en_US", personal_word_list: Optional[Union[str, Path]] = None):
        """
        Load the dictionary for a locale.

        Args:
            language: Enchant language tag, e.g. 'en_US' or 'fr_FR'.
            personal_word_list: Optional word list file stacked on top of the base dictionary.

        Raises:
            DictionaryUnavailableError: If pyenchant, the C library or the locale dictionary is missing.
        """
        self.language = language
        self.personal_word_list = Path(personal_word_list) if personal_word_list else None

        try:
            import enchant
            from enchant.errors import DictNotFoundError
        except ImportError as e:
            raise DictionaryUnavailableError(language, f"pyenchant not installed: {e}") from e

        try:
            if self.personal_word_list:
                self._dict = enchant.DictWithPWL(language, str(self.personal_word_list))
            else:
                self._dict = enchant.Dict(language)
        except DictNotFoundError as e:
            raise DictionaryUnavailableError(language, str(e)) from e
        except OSError as e:
            raise DictionaryUnavailableError(
                language, f"cannot read personal word list {self.personal_word_list}: {e}"
            ) from e

        logger.info(
            "Loaded enchant dictionary %s (provider: %s)",
            language, getattr(self._dict.provider, "name", "unknown")
        )

    def _handle(self):
        if self._dict is None:
            raise SpellcheckError(f"Dictionary for '{self.language}' has been closed")
        return self._dict

    def contains(self, word: str) -> bool:
        return self._handle().check(word)

    def add(self, word: str) -> None:
        self._handle().add_to_session(word)

    def remove(self, word: str) -> None:
        self._handle().remove_from_session(word)

    def close(self) -> None:
        """Drops the enchant handle; lookups raise SpellcheckError afterwards."""
        self._dict = None
        logger.debug("Closed enchant dictionary %s", self.language)

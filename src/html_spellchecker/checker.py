# src/html_spellchecker/checker.py
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

from tqdm.auto import tqdm

from html_spellchecker.dom.builder import FragmentBuilder
from html_spellchecker.dom.policy import TagPolicy
from html_spellchecker.dom.walker import TreeWalker
from html_spellchecker.managers.report_manager import MisspellingReport
from html_spellchecker.model import SpellcheckResult
from html_spellchecker.services.dictionary_service import DictionaryClient, EnchantDictionary
from html_spellchecker.text.evaluator import SpellEvaluator
from html_spellchecker.text.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class HTMLSpellchecker:
    """
    Spellchecks the prose of HTML fragments against one locale's dictionary.

    Example:
        >>> checker = HTMLSpellchecker("en_US")
        >>> checker.spellcheck("<p>xzqwy is not a word!</p>").details
        {'xzqwy': 1, 'error_count': 1}
    """

    def __init__(
            self,
            language: str = "en_US",
            dictionary: Optional[DictionaryClient] = None,
            skip_tags: Optional[Iterable[str]] = None,
            personal_word_list: Optional[Union[str, Path]] = None
    ):
        """
        Args:
            language: Locale identifier, e.g. 'en_US' or 'fr_FR'.
            dictionary: Dictionary client to use; an EnchantDictionary for `language` is loaded if omitted.
            skip_tags: Element names whose content is never checked. A `set` is shared, not copied.
            personal_word_list: Extra word list for the enchant dictionary (ignored if `dictionary` is given).

        Raises:
            DictionaryUnavailableError: If no dictionary is given and the locale cannot be loaded.
        """
        self.language = language
        self.dictionary = dictionary or EnchantDictionary(language, personal_word_list)
        self.policy = TagPolicy(skip_tags)

        self._builder = FragmentBuilder()
        self._walker = TreeWalker(
            policy=self.policy,
            tokenizer=Tokenizer(),
            evaluator=SpellEvaluator(self.dictionary),
            builder=self._builder
        )

    @property
    def skip_tags(self) -> Set[str]:
        return self.policy.skip_tags

    # --- Spellchecking ---

    def spellcheck(self, html: str) -> SpellcheckResult:
        """
        Marks misspelled words in an HTML fragment.

        Args:
            html (str): The fragment to check. It is parsed into a private tree; the string is not modified.

        Returns:
            SpellcheckResult: The rewritten HTML and the per-word occurrence counts plus 'error_count'.
        """
        report = MisspellingReport()
        fragment = self._builder.parse(html)
        rewritten = self._walker.walk(fragment, report)

        logger.debug("Spellchecked %d chars (%s): %d distinct errors", len(html), self.language, report.error_count)
        return SpellcheckResult(html=rewritten, details=report.to_details())

    def spellcheck_many(self, documents: Iterable[str], show_progress: bool = False) -> List[SpellcheckResult]:
        """Spellchecks several fragments in order, optionally behind a progress bar."""
        documents = list(documents)
        iterator = documents if not show_progress else tqdm(
            documents, desc=f"Spellchecking ({self.language})", unit="doc", leave=False
        )
        return [self.spellcheck(html) for html in iterator]

    # --- Dictionary pass-through ---

    def add_word(self, word: str) -> None:
        self.dictionary.add(word)

    def remove_word(self, word: str) -> None:
        self.dictionary.remove(word)

    def check_word(self, word: str) -> bool:
        logger.debug("Checking word: %s", word)
        return self.dictionary.contains(word)

    def close(self) -> None:
        """Releases the dictionary, if it supports being closed."""
        close = getattr(self.dictionary, "close", None)
        if callable(close):
            close()

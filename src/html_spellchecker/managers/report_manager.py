# src/html_spellchecker/managers/report_manager.py
import logging
from collections import Counter
from typing import Dict

from html_spellchecker.model import ERROR_COUNT_KEY

logger = logging.getLogger(__name__)


class MisspellingReport:
    """
    Accumulates misspelled words for a single spellcheck call.

    Words are keyed by their exact surface form (case-sensitive) and counted
    once per occurrence, in document order.
    """

    def __init__(self):
        self._counts: Counter = Counter()

    def record(self, word: str) -> None:
        self._counts[word] += 1
        logger.debug("Misspelling recorded: %r (x%d)", word, self._counts[word])

    @property
    def counts(self) -> Dict[str, int]:
        return dict(self._counts)

    @property
    def error_count(self) -> int:
        """Number of distinct misspelled words, not the sum of occurrences."""
        return len(self._counts)

    def to_details(self) -> Dict[str, int]:
        """
        Word counts in first-seen order followed by 'error_count'.
        The aggregate key is written last and wins over a token spelled 'error_count'.
        """
        details = dict(self._counts)
        details[ERROR_COUNT_KEY] = self.error_count
        return details

    def __len__(self) -> int:
        return len(self._counts)

# src/html_spellchecker/text/evaluator.py
import logging
from typing import FrozenSet

from html_spellchecker.model import Token
from html_spellchecker.services.dictionary_service import DictionaryClient

logger = logging.getLogger(__name__)

# Literal references and punctuation that are never spelling errors.
PASSTHROUGH_TOKENS: FrozenSet[str] = frozenset({"&gt;", "&lt;", "&amp;", "&nbsp;", "-"})

POSSESSIVE_SUFFIX = "s'"


class SpellEvaluator:
    """Decides whether a token is acceptable or misspelled."""

    def __init__(self, dictionary: DictionaryClient):
        self.dictionary = dictionary

    def evaluate(self, token: Token) -> bool:
        """
        Returns True (accept) or False (reject) for a token.

        Order: pass-through list, dictionary lookup of the decoded form, then
        the plural possessive heuristic ("students'" is accepted when
        "students" is a word). The heuristic is applied for every locale.
        """
        if token.text in PASSTHROUGH_TOKENS:
            return True
        if self.dictionary.contains(token.lookup):
            return True
        if token.lookup.endswith(POSSESSIVE_SUFFIX) and self.dictionary.contains(token.lookup[:-1]):
            logger.debug("Accepted %r as plural possessive", token.text)
            return True
        return False

# src/html_spellchecker/text/tokenizer.py
"""
Splits the raw text of a text node into word tokens.

The text is scanned in its escaped surface form (as the serializer writes
it), so literal references such as '&lt;' or '&nbsp;' surface as tokens of
their own instead of being torn into 'lt' and 'nbsp'.
"""
import logging
import re
from typing import List, Optional, Tuple

from html_spellchecker.model import TextScan, Token
from html_spellchecker.text.entities import ENTITY_REFERENCE, EntityCodec

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,4}\b", re.IGNORECASE)
LINK_PATTERN = re.compile(r"\bhttps?://[-\w.]+(?::\d+)?(?:/(?:[\w/.]*(?:\?\S+)?)?)?\b", re.IGNORECASE)

# Either a short character reference or a maximal run of word characters,
# apostrophes (straight or typographic) and hyphens.
WORD_PATTERN = re.compile(rf"(?P<entity>{ENTITY_REFERENCE})|(?P<word>[\w'’-]+)")


class Tokenizer:
    """Stateless; one instance can be shared by every text node of every call."""

    def __init__(self, codec: Optional[EntityCodec] = None):
        self.codec = codec or EntityCodec()

    @staticmethod
    def strip_links(raw: str) -> str:
        """Replaces every e-mail address, then every http(s) URL, with a single space."""
        text = EMAIL_PATTERN.sub(" ", raw)
        return LINK_PATTERN.sub(" ", text)

    def scan(self, raw: str) -> TextScan:
        """
        Strips links from `raw` and tokenizes what remains.

        Returns:
            TextScan: the link-free text and its tokens; token offsets index into `TextScan.text`.
        """
        text = self.strip_links(raw)
        tokens = []
        for start, end in self._spans(text):
            surface = text[start:end]
            lookup = self.codec.decode(surface).replace("’", "'")
            if not self._is_candidate(surface, lookup):
                continue
            tokens.append(Token(text=surface, start=start, end=end, lookup=lookup))
        return TextScan(text=text, tokens=tokens)

    def tokenize(self, raw: str) -> List[Token]:
        return self.scan(raw).tokens

    def _spans(self, text: str) -> List[Tuple[int, int]]:
        """
        Match spans, with adjacent word runs and word-like references glued
        together (caf + &eacute; -> caf&eacute;).
        """
        spans: List[Tuple[int, int, bool]] = []
        for match in WORD_PATTERN.finditer(text):
            entity = match.group("entity")
            joinable = entity is None or self.codec.joins_word(entity)
            if spans and joinable and spans[-1][2] and spans[-1][1] == match.start():
                spans[-1] = (spans[-1][0], match.end(), True)
            else:
                spans.append((match.start(), match.end(), joinable))
        return [(start, end) for start, end, _ in spans]

    def _is_candidate(self, surface: str, lookup: str) -> bool:
        # Pure punctuation runs (a lone quote, '--') are not words; a bare
        # hyphen and references are kept for the evaluator's pass-through list.
        if any(ch.isalnum() for ch in lookup):
            return True
        return surface == "-" or self.codec.is_reference(surface)

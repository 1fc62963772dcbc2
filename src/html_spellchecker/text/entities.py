# src/html_spellchecker/text/entities.py
import html
import re

# Short named or numeric character reference, e.g. &amp; &eacute; &#233; &#x2019;
ENTITY_REFERENCE = r"&#?\w{2,8};"

_ENTITY_RE = re.compile(ENTITY_REFERENCE)
_APOSTROPHES = "'’"


class EntityCodec:
    """
    Decodes HTML character references for analysis only.

    The decoded text is what the dictionary sees; the surface text (with the
    references intact) is what ends up in the rewritten HTML.
    """

    @staticmethod
    def decode(text: str) -> str:
        return html.unescape(text)

    @staticmethod
    def is_reference(text: str) -> bool:
        """True if `text` is exactly one character reference."""
        return _ENTITY_RE.fullmatch(text) is not None

    @classmethod
    def joins_word(cls, reference: str) -> bool:
        """
        True if the reference decodes to word material (letters, digits or an
        apostrophe), so 'caf&eacute;' reads as one word.
        """
        decoded = cls.decode(reference)
        if decoded == reference:
            return False  # unknown entity, left as-is by the decoder
        return all(ch.isalnum() or ch in _APOSTROPHES for ch in decoded)

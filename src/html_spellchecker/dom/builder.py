# src/html_spellchecker/dom/builder.py
import logging
import warnings
from typing import Union

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

logger = logging.getLogger(__name__)


def ignore_locator_warnings() -> None:
    """Short text snippets ("index.html") would otherwise trigger a locator warning on every parse."""
    warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


ignore_locator_warnings()


def _substitute_flat(value: str) -> str:
    """Minimal escaping (&, <, >) that keeps non-breaking spaces visible as &nbsp;."""
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


class FlatFormatter(HTMLFormatter):
    """
    Flat output for re-embedding: no indentation, '<br>' rather than '<br/>',
    and attributes in source order (bs4 sorts them alphabetically by default).
    """

    def __init__(self):
        super().__init__(entity_substitution=_substitute_flat, void_element_close_prefix=None)

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return list(tag.attrs.items())


FLAT_FORMATTER = FlatFormatter()


class FragmentBuilder:
    """
    Parses HTML fragments into bs4 trees and serializes nodes back.

    Uses the stdlib 'html.parser' tree builder: it does not invent <html> or
    <body> wrappers, so a fragment stays a fragment.
    """

    PARSER = "html.parser"

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.PARSER)

    @staticmethod
    def serialize(node: Union[Tag, NavigableString]) -> str:
        """Renders a node (or a whole fragment) as flat HTML."""
        if isinstance(node, Tag):
            return node.decode(formatter=FLAT_FORMATTER)
        return node.output_ready(formatter=FLAT_FORMATTER)

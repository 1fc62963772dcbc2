# src/html_spellchecker/dom/walker.py
import logging

from bs4 import NavigableString, Tag
from bs4.element import PageElement, PreformattedString

from html_spellchecker.dom.builder import FragmentBuilder
from html_spellchecker.dom.policy import TagPolicy
from html_spellchecker.managers.report_manager import MisspellingReport
from html_spellchecker.text.evaluator import SpellEvaluator
from html_spellchecker.text.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

MARK_TEMPLATE = '<mark class="misspelled">{}</mark>'


class TreeWalker:
    """
    Rewrites a parsed fragment, wrapping misspelled words in <mark> tags.

    Depth-first: children are rewritten first, then re-parsed into their
    parent, so the tree itself (not just the output string) reflects the
    markup that was added. Skip-listed elements are serialized untouched.
    """

    def __init__(
            self,
            policy: TagPolicy,
            tokenizer: Tokenizer,
            evaluator: SpellEvaluator,
            builder: FragmentBuilder
    ):
        self.policy = policy
        self.tokenizer = tokenizer
        self.evaluator = evaluator
        self.builder = builder

    def walk(self, node: PageElement, report: MisspellingReport) -> str:
        """
        Returns the rewritten HTML of `node`, recording misspellings in `report`.

        Comments, doctypes and other declarations are emitted verbatim.
        """
        if isinstance(node, PreformattedString):
            return self.builder.serialize(node)
        if isinstance(node, NavigableString):
            return self._walk_text(node, report)
        if isinstance(node, Tag):
            return self._walk_element(node, report)

        logger.warning("Unknown node type %s emitted as-is", type(node).__name__)
        return str(node)

    def _walk_element(self, tag: Tag, report: MisspellingReport) -> str:
        if not self.policy.is_checkable(tag.name):
            return self.builder.serialize(tag)

        inner = "".join(self.walk(child, report) for child in list(tag.contents))

        rewritten = self.builder.parse(inner)
        tag.clear()
        tag.extend(list(rewritten.contents))

        return self.builder.serialize(tag)

    def _walk_text(self, text: NavigableString, report: MisspellingReport) -> str:
        scan = self.tokenizer.scan(self.builder.serialize(text))

        pieces = []
        cursor = 0
        for token in scan.tokens:
            if self.evaluator.evaluate(token):
                continue
            report.record(token.text)
            pieces.append(scan.text[cursor:token.start])
            pieces.append(MARK_TEMPLATE.format(token.text))
            cursor = token.end
        pieces.append(scan.text[cursor:])

        return "".join(pieces)

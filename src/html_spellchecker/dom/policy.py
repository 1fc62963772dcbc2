# src/html_spellchecker/dom/policy.py
import logging
from typing import Iterable, Optional, Set

from html_spellchecker.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

# Used when settings.json does not provide 'spellcheck.skip_tags'.
DEFAULT_SKIP_TAGS = ("script", "style", "code", "pre", "kbd", "samp", "var", "template", "textarea")


def default_skip_tags() -> Set[str]:
    """A fresh skip set built from the configuration."""
    tags = config_manager.get_nested("spellcheck.skip_tags", DEFAULT_SKIP_TAGS)
    return {str(tag).lower() for tag in tags}


class TagPolicy:
    """
    Classifies element names into 'skip' (content is never analyzed or
    rewritten) and 'checkable' (everything else, unknown tags included).

    A `set` passed in is used as-is rather than copied, so several policies
    can share one mutable skip set.
    """

    def __init__(self, skip_tags: Optional[Iterable[str]] = None):
        if skip_tags is None:
            skip_tags = default_skip_tags()
        elif not isinstance(skip_tags, set):
            skip_tags = {tag.lower() for tag in skip_tags}
        self.skip_tags: Set[str] = skip_tags

    def is_checkable(self, name: str) -> bool:
        # Lookup is by exact name; the html.parser builder already lowercases tag names.
        return name not in self.skip_tags

    def skip(self, *names: str) -> None:
        self.skip_tags.update(name.lower() for name in names)

    def allow(self, *names: str) -> None:
        self.skip_tags.difference_update(name.lower() for name in names)

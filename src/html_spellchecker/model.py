# src/html_spellchecker/model.py
from typing import Dict, List

from pydantic import BaseModel, Field

ERROR_COUNT_KEY = "error_count"


class Token(BaseModel):
    """
    A candidate word found in a text node.

    `text` is the literal surface form (entities intact) that is echoed back
    or wrapped in markup; `lookup` is the decoded form handed to the dictionary.
    """
    text: str
    start: int
    end: int
    lookup: str


class TextScan(BaseModel):
    """The scanned text of one text node (links removed) and its tokens in order."""
    text: str
    tokens: List[Token] = Field(default_factory=list)


class SpellcheckResult(BaseModel):
    """
    Outcome of one spellcheck call.

    `details` maps each misspelled word to its occurrence count and carries
    the number of distinct misspelled words under 'error_count'.
    """
    html: str
    details: Dict[str, int] = Field(default_factory=lambda: {ERROR_COUNT_KEY: 0})

    @property
    def error_count(self) -> int:
        return self.details.get(ERROR_COUNT_KEY, 0)

    @property
    def misspellings(self) -> Dict[str, int]:
        """The word counts without the aggregate key."""
        return {word: count for word, count in self.details.items() if word != ERROR_COUNT_KEY}

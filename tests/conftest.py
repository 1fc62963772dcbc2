# tests/conftest.py
import pytest

from html_spellchecker.checker import HTMLSpellchecker

ENGLISH_WORDS = """
a an and are as be bowls correct dog dogs doesn't dr for good hello i important
inferior is it it's matter mis my not now of or phd said see sentence she she's
smith spelled superior ampersand the this to well-known with word words write
julie adam fiancé café matter-of-fact contact today known
""".split()


class FakeDictionary:
    """In-memory DictionaryClient; accepts a word or its lowercase form."""

    def __init__(self, words=ENGLISH_WORDS):
        self.words = set(words)
        self.closed = False

    def contains(self, word):
        return word in self.words or word.lower() in self.words

    def add(self, word):
        self.words.add(word)

    def remove(self, word):
        self.words.discard(word)
        self.words.discard(word.lower())

    def close(self):
        self.closed = True


@pytest.fixture
def dictionary():
    return FakeDictionary()


@pytest.fixture
def checker(dictionary):
    """An HTMLSpellchecker backed by the fake dictionary and the default skip tags."""
    return HTMLSpellchecker("en_US", dictionary=dictionary)


@pytest.fixture
def dictionary_factory():
    """Builds fresh, independent fake dictionaries."""
    return FakeDictionary

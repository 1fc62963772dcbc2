# tests/core/test_enchant_dictionary.py
"""
Integration tests against real PyEnchant dictionaries.
Skipped when pyenchant, libenchant or the locale dictionary is not installed.
"""
import pytest

from html_spellchecker.managers.registry_manager import SpellcheckerRegistry
from html_spellchecker.services.dictionary_service import DictionaryUnavailableError, EnchantDictionary

try:
    import enchant
except ImportError as e:
    # pyenchant raises a plain ImportError when the C library is missing.
    pytest.skip(f"enchant unavailable: {e}", allow_module_level=True)


def require(locale):
    if not enchant.dict_exists(locale):
        pytest.skip(f"enchant dictionary {locale} not installed")


@pytest.fixture
def registry():
    registry = SpellcheckerRegistry()
    yield registry
    registry.clear()


@pytest.fixture
def english(registry):
    require("en_US")
    return registry.english(rebuild=True)


def test_unknown_locale_is_fatal():
    with pytest.raises(DictionaryUnavailableError) as exc_info:
        EnchantDictionary("xx_NOPE")
    assert exc_info.value.language == "xx_NOPE"


def test_doesnt_modify_correct_sentences(english):
    correct = "<p>This is a sentence with correct words.</p>"
    result = english.spellcheck(correct)

    assert result.html == correct
    assert result.details == {"error_count": 0}


def test_marks_spelling_errors(english):
    result = english.spellcheck("<p>xzqwy is not a word!</p>")

    assert result.html == '<p><mark class="misspelled">xzqwy</mark> is not a word!</p>'
    assert result.details == {"xzqwy": 1, "error_count": 1}


def test_custom_words_live_for_the_session(english, registry):
    english.add_word("bleghhhh")
    assert english.spellcheck("<p>bleghhhh is not a word!</p>").details == {"error_count": 0}

    english.remove_word("word")
    result = english.spellcheck("<p>This is not a word!</p>")
    assert result.details == {"word": 1, "error_count": 1}

    fresh = registry.english(rebuild=True)
    assert not fresh.check_word("bleghhhh")
    assert fresh.check_word("word")


def test_does_not_split_words_with_a_quote(english):
    assert english.spellcheck("<p>It doesn't matter</p>").details == {"error_count": 0}


def test_personal_word_list(tmp_path):
    require("en_US")
    word_list = tmp_path / "en_US.txt"
    word_list.write_text("xzqwy\n", encoding="utf-8")

    dictionary = EnchantDictionary("en_US", personal_word_list=word_list)
    assert dictionary.contains("xzqwy")
    dictionary.close()


def test_can_use_different_dictionaries(registry):
    require("fr_FR")
    french_text = "<p>Ceci est un texte correct, mais xzqwy n'est pas un mot</p>"
    result = registry.french(rebuild=True).spellcheck(french_text)

    assert result.html == french_text.replace("xzqwy", '<mark class="misspelled">xzqwy</mark>')
    assert result.details == {"xzqwy": 1, "error_count": 1}

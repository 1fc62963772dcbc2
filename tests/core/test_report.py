# tests/core/test_report.py
from html_spellchecker.managers.report_manager import MisspellingReport
from html_spellchecker.model import SpellcheckResult


def test_empty_report():
    report = MisspellingReport()
    assert report.error_count == 0
    assert report.to_details() == {"error_count": 0}


def test_counts_every_occurrence_but_error_count_is_distinct():
    report = MisspellingReport()
    for word in ["ttt", "yyy", "ttt", "ttt"]:
        report.record(word)

    assert report.counts == {"ttt": 3, "yyy": 1}
    assert report.error_count == 2
    assert len(report) == 2


def test_counting_is_case_sensitive():
    report = MisspellingReport()
    report.record("Xzqwy")
    report.record("xzqwy")
    assert report.to_details() == {"Xzqwy": 1, "xzqwy": 1, "error_count": 2}


def test_details_keep_first_seen_order_with_error_count_last():
    report = MisspellingReport()
    for word in ["zzz", "aaa", "zzz"]:
        report.record(word)
    assert list(report.to_details()) == ["zzz", "aaa", "error_count"]


def test_result_accessors():
    result = SpellcheckResult(html="<p></p>", details={"ttt": 2, "error_count": 1})
    assert result.error_count == 1
    assert result.misspellings == {"ttt": 2}
    assert SpellcheckResult(html="").details == {"error_count": 0}

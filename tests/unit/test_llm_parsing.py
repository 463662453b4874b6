from __future__ import annotations

import pytest

from llm_tasks.utils import (
    ResponseParseError,
    fallback_stats,
    fallback_summary,
    fallback_title,
    parse_json_array,
    parse_json_object,
    split_sentences,
)


def test_parse_json_array_direct():
    assert parse_json_array('  [{"title": "A"}]\n') == [{"title": "A"}]


def test_parse_json_array_embedded_in_prose():
    content = 'Here you go:\n[{"title":"X","description":"Y"}]\nThanks'
    assert parse_json_array(content) == [{"title": "X", "description": "Y"}]


def test_parse_json_array_from_code_fence():
    content = '```json\n[{"title": "Step"}]\n```'
    assert parse_json_array(content) == [{"title": "Step"}]


def test_parse_json_array_first_decodable_when_greedy_span_fails():
    content = 'first [1, 2] then some [words] here'
    assert parse_json_array(content) == [1, 2]


def test_parse_json_array_rejects_object():
    with pytest.raises(ResponseParseError):
        parse_json_array('{"title": "not a list"}')


def test_parse_json_array_no_json():
    with pytest.raises(ResponseParseError):
        parse_json_array("I could not do that. Sorry.")


def test_parse_json_array_too_deeply_nested():
    with pytest.raises(ResponseParseError):
        parse_json_array("[" * 5000)


def test_parse_json_object_embedded():
    content = 'Sure! {"summary": "Short."} Hope this helps.'
    assert parse_json_object(content) == {"summary": "Short."}


def test_parse_json_object_handles_braces_in_strings():
    content = 'noise {"title": "value { with } braces"} trailer'
    assert parse_json_object(content) == {"title": "value { with } braces"}


def test_split_sentences_on_periods_and_newlines():
    assert split_sentences("A. B.\nC.") == ["A", "B", "C"]
    assert split_sentences("one...two\n\n\nthree") == ["one", "two", "three"]
    assert split_sentences("") == []


def test_fallback_summary_uses_first_five_sentences():
    text = "One. Two. Three. Four. Five. Six. Seven."
    assert fallback_summary(text) == "One. Two. Three. Four. Five."
    assert fallback_summary("") == ""


def test_fallback_title_uses_first_five_words():
    assert fallback_title("  How to bake a very good loaf of bread") == "How to bake a very"


def test_fallback_stats_numbers_in_order():
    assert fallback_stats("Revenue grew 12.5% to $3,400 last year.") == ["12.5", "3,400"]


def test_fallback_stats_at_most_three():
    assert fallback_stats("1 2 3 4 5") == ["1", "2", "3"]
    assert fallback_stats("no numbers") == []

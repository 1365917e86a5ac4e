from __future__ import annotations

import pytest

from caseconv.dot_case import to_dot_case


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("HelloWorld", "hello.world"),
        ("some_text-toConvert", "some.text.to.convert"),
        (" already . dot.CASE ", "already.dot.case"),
        ("XMLHttpRequest", "xml.http.request"),
        ("v2Release", "v2.release"),
        ("a__b--c", "a.b.c"),
        ("user@example.com", "user.example.com"),
        ("ABC", "abc"),
    ],
)
def test_to_dot_case(text: str, expected: str) -> None:
    assert to_dot_case(text) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "...", "-_-", "?!"])
def test_to_dot_case_degenerate_input_is_empty(value) -> None:
    assert to_dot_case(value) == ""


def test_to_dot_case_coerces_non_strings() -> None:
    assert to_dot_case(42) == "42"
    assert to_dot_case(3.14) == "3.14"
    assert to_dot_case(False) == "false"


def test_to_dot_case_unicode_words() -> None:
    assert to_dot_case("Ünïcode Wörds", unicode_words=True) == "ünïcode.wörds"
    assert to_dot_case("Ünïcode Wörds") == "n.code.w.rds"


@pytest.mark.parametrize(
    "text",
    ["HelloWorld", "some_text-toConvert", " already . dot.CASE ", "XMLHttpRequest", "v2Release"],
)
def test_to_dot_case_is_idempotent(text: str) -> None:
    once = to_dot_case(text)
    assert to_dot_case(once) == once


@pytest.mark.parametrize("text", ["İstanbul", "Ünïcode Wörds", "crème brûlée", "été", "ǅemal"])
def test_to_dot_case_is_idempotent_with_unicode_words(text: str) -> None:
    once = to_dot_case(text, unicode_words=True)
    assert once
    assert to_dot_case(once, unicode_words=True) == once


def test_combining_marks_stay_in_their_word() -> None:
    assert to_dot_case("İstanbul", unicode_words=True) == "i\u0307stanbul"
    assert to_dot_case("\u0301 word", unicode_words=True) == "word"

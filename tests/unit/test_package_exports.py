from __future__ import annotations

import math

import caseconv


def test_javascript_style_aliases() -> None:
    assert caseconv.toCamelCase("hello world") == "helloWorld"
    assert caseconv.kebabCase("Hello, World! This is kebab_case.") == "hello-world-this-is-kebab-case"
    assert caseconv.toDotCase("XMLHttpRequest") == "xml.http.request"
    assert caseconv.toDotCase(None) == ""
    assert caseconv.addNumbers("4", "1.5") == 5.5
    assert math.isnan(caseconv.addNumbers("a", 1))


def test_all_names_are_exported() -> None:
    for name in caseconv.__all__:
        assert hasattr(caseconv, name), name

"""
Tests for toolbelt/string/case.py
"""

import pytest

from toolbelt.errors import InvalidArgumentError
from toolbelt.string import camel_case, capitalize, kebab_case


def test_camel_case():
    """Separators and case transitions become word boundaries."""
    assert camel_case("Foo Bar") == "fooBar"
    assert camel_case("--foo-bar--") == "fooBar"
    assert camel_case("__FOO_BAR__") == "fooBar"
    assert camel_case("fooBar") == "fooBar"
    assert camel_case("hello world!") == "helloWorld"


def test_camel_case_empty():
    """Strings without words give an empty string."""
    assert camel_case("") == ""
    assert camel_case("--__--") == ""


def test_kebab_case():
    """Words are lower-cased and joined with hyphens."""
    assert kebab_case("Foo Bar") == "foo-bar"
    assert kebab_case("fooBar") == "foo-bar"
    assert kebab_case("__FOO_BAR__") == "foo-bar"
    assert kebab_case("hello, world") == "hello-world"


def test_capitalize():
    """First character upper, the rest lower."""
    assert capitalize("HELLO") == "Hello"
    assert capitalize("fRED") == "Fred"
    assert capitalize("") == ""


def test_case_functions_require_strings():
    """Non-strings raise InvalidArgumentError."""
    for func in (camel_case, kebab_case, capitalize):
        with pytest.raises(InvalidArgumentError):
            func(None)
        with pytest.raises(InvalidArgumentError):
            func(42)

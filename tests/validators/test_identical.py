from collections import UserDict

import pytest

from inputguard.errors import InvalidArgumentError
from inputguard.validators import Identical, loose_equals, strict_equals


class Parameters:
    """Indexable object that is not a Mapping."""

    def __init__(self, data):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]


def test_token_initially_none():
    assert Identical().get_token() is None


def test_set_token():
    validator = Identical()
    validator.set_token("foo")
    assert validator.get_token() == "foo"
    assert Identical("foo").get_token() == "foo"


def test_missing_token():
    validator = Identical()
    assert not validator.is_valid("foo")
    assert list(validator.get_messages()) == [Identical.MISSING_TOKEN]


def test_non_matching_value_sets_not_same():
    validator = Identical("foo")
    assert not validator.is_valid("bar")
    assert list(validator.get_messages()) == [Identical.NOT_SAME]
    assert validator.is_valid("foo")
    assert validator.get_messages() == {}


def test_empty_token():
    assert Identical("").is_valid("")


def test_non_string_tokens():
    validator = Identical(True)
    assert validator.is_valid(True)
    assert not validator.is_valid(1)

    validator.set_token({"one": "two", 0: "three"})
    assert validator.is_valid({"one": "two", 0: "three"})
    assert not validator.is_valid([])


def test_token_from_options():
    validator = Identical.from_options({"token": 123})
    assert validator.is_valid(123)
    assert not validator.is_valid({"token": 123})


def test_non_strict_comparison():
    validator = Identical.from_options({"token": 123, "strict": False})
    assert validator.is_valid("123")
    assert validator.is_valid(123.0)

    validator.set_strict(True)
    assert not validator.is_valid("123")
    assert not validator.is_valid({"token": "123"})


@pytest.mark.parametrize("wrap", [dict, UserDict, Parameters])
def test_string_token_in_context(wrap):
    validator = Identical("email")
    assert validator.is_valid("john@doe.com", wrap({"email": "john@doe.com"}))
    assert not validator.is_valid("john@doe.com", wrap({"email": "harry@hoe.com"}))
    assert not validator.is_valid("harry@hoe.com", wrap({"email": "john@doe.com"}))


@pytest.mark.parametrize("token", [["user", "email"], ("user", "email"), {"user": "email"}])
@pytest.mark.parametrize("wrap", [dict, Parameters])
def test_path_token_in_context(token, wrap):
    validator = Identical(token)
    assert validator.is_valid("a", wrap({"user": {"email": "a"}}))
    assert not validator.is_valid("b", wrap({"user": {"email": "a"}}))
    assert list(validator.get_messages()) == [Identical.NOT_SAME]


def test_unresolvable_path_falls_back_to_literal_token():
    validator = Identical(["user", "email"])
    assert not validator.is_valid("a", {"user": {}})
    assert validator.is_valid(["user", "email"], {"account": {"email": "a"}})


def test_literal_through_constructor():
    validator = Identical.from_options({"token": "foo", "literal": True})
    assert validator.get_literal() is True
    validator.set_literal(False)
    assert validator.get_literal() is False


def test_literal_does_not_matter_without_context():
    validator = Identical({"foo": "bar"})
    validator.set_literal(False)
    assert validator.is_valid({"foo": "bar"})
    validator.set_literal(True)
    assert validator.is_valid({"foo": "bar"})


def test_literal_ignores_context():
    validator = Identical({"foo": "bar"}, literal=True)
    assert validator.is_valid({"foo": "bar"}, {"foo": "baz"})


@pytest.mark.parametrize("context", [False, object(), "dummy", 12])
def test_invalid_context_raises(context):
    with pytest.raises(InvalidArgumentError):
        Identical("email").is_valid("john@doe.com", context)


@pytest.mark.parametrize("context", [False, object(), "dummy", 12])
def test_literal_token_accepts_any_context(context):
    validator = Identical("x", literal=True)
    assert validator.is_valid("x", context)
    assert not validator.is_valid("y", context)
    assert list(validator.get_messages()) == [Identical.NOT_SAME]


def test_message_templates_and_variables_match_options():
    validator = Identical()
    assert validator.get_option("messageTemplates") == validator.get_message_templates()
    assert list(validator.get_option("messageVariables")) == validator.get_message_variables()
    assert validator.get_message_variables() == ["token"]


def test_token_interpolates_into_custom_message():
    validator = Identical("secret", messages={Identical.NOT_SAME: "Expected {token}, got {value}"})
    assert not validator.is_valid("guess")
    assert validator.get_messages() == {Identical.NOT_SAME: "Expected secret, got guess"}


def test_strict_equals_checks_types_recursively():
    assert strict_equals([1, {"a": 2}], [1, {"a": 2}])
    assert not strict_equals([1], [1.0])
    assert not strict_equals(True, 1)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ("1e3", 1000, True),
        (None, "", True),
        (None, "a", False),
        (True, "yes", True),
        ([1, "2"], ["1", 2], True),
        ({"a": "1"}, {"a": 1}, True),
        ("abc", "abd", False),
    ],
)
def test_loose_equals(left, right, expected):
    assert loose_equals(left, right) is expected

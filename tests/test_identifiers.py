import pytest

from scaletypes.identifiers import is_rust_identifier


@pytest.mark.parametrize(
    "text",
    ["hello", "Hello", "World", "_", "r#mod", "r#Struct", "Planet", "a_not_compact"],
)
def test_valid_identifiers(text):
    assert is_rust_identifier(text) is True


@pytest.mark.parametrize(
    "text",
    ["", "1", ", World!", "::world", "hello$!@$", "r#"],
)
def test_invalid_identifiers(text):
    assert is_rust_identifier(text) is False


def test_non_ascii_is_rejected():
    assert is_rust_identifier("h\u00e9llo") is False


def test_repeated_raw_prefixes_are_trimmed():
    assert is_rust_identifier("r#r#value") is True


def test_digits_allowed_after_first_character():
    assert is_rust_identifier("u128") is True
    assert is_rust_identifier("128u") is False
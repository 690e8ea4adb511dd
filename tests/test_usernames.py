import pytest

from taskdesk.app.config import get_settings
from taskdesk.app.core.usernames import is_valid_username


@pytest.mark.parametrize("name", ["ann@!", "bob_1", "carol.x", "d-e-f-g", "x@yz12345"])
def test_accepts_names_with_a_symbol(name):
    assert is_valid_username(name)


@pytest.mark.parametrize(
    "name",
    [
        "alice",  # alphanumeric only
        "abcdefgh9",
        "a@b",  # too short
        "a@bc",
        "abcdefgh@x",  # too long
        "",
        None,
        12345,
        ["ann@!"],
    ],
)
def test_rejects_bad_shapes(name):
    assert not is_valid_username(name)


def test_length_bounds_follow_settings(monkeypatch):
    monkeypatch.setenv("USERNAME_MIN_LENGTH", "3")
    monkeypatch.setenv("USERNAME_MAX_LENGTH", "12")
    get_settings.cache_clear()

    assert is_valid_username("a@b")
    assert is_valid_username("abcdefghij@x")
    assert not is_valid_username("abcdefghijk@x")


def test_explicit_bounds_override_settings():
    assert is_valid_username("a@b", min_length=3, max_length=3)
    assert not is_valid_username("ann@!", min_length=3, max_length=4)

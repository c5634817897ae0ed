from __future__ import annotations

import pytest

from snippetkit.core.errors import ProfileError
from snippetkit.profiles import Profile, update_profile


def _ann() -> Profile:
    return Profile(name="Ann", age=30, email="ann@example.com")


def test_update_overrides_only_given_fields() -> None:
    updated = update_profile(_ann(), {"age": 31})
    assert updated == Profile(name="Ann", age=31, email="ann@example.com")


def test_update_does_not_mutate_original() -> None:
    original = _ann()
    update_profile(original, {"name": "Bea", "email": "bea@example.com"})
    assert original == _ann()


def test_empty_update_returns_equal_profile() -> None:
    assert update_profile(_ann(), {}) == _ann()


def test_update_rejects_unknown_fields() -> None:
    with pytest.raises(ProfileError, match="nickname"):
        update_profile(_ann(), {"nickname": "annie"})


def test_mapping_roundtrip() -> None:
    data = {"name": "Ann", "age": 30, "email": "ann@example.com"}
    assert Profile.from_mapping(data).to_dict() == data


def test_from_mapping_missing_fields() -> None:
    with pytest.raises(ProfileError) as ei:
        Profile.from_mapping({"name": "Ann"})
    assert "age" in str(ei.value)
    assert "email" in str(ei.value)

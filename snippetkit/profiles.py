from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from snippetkit.core.errors import ProfileError


@dataclass(frozen=True, slots=True)
class Profile:
    name: str
    age: int
    email: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Profile":
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ProfileError(f"missing profile field(s): {', '.join(missing)}")
        _check_unknown(data)
        return cls(name=data["name"], age=data["age"], email=data["email"])

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_FIELD_NAMES = frozenset(f.name for f in fields(Profile))


def _check_unknown(data: Mapping[str, Any]) -> None:
    unknown = sorted(str(k) for k in data if k not in _FIELD_NAMES)
    if unknown:
        raise ProfileError(f"unknown profile field(s): {', '.join(unknown)}")


def update_profile(profile: Profile, updates: Mapping[str, Any]) -> Profile:
    """Return a copy of `profile` with the fields in `updates` overridden.

    Fields absent from `updates` keep their current value. `profile` itself is
    left untouched.

    Raises:
        ProfileError: If `updates` names a field `Profile` does not have.
    """

    _check_unknown(updates)
    return replace(profile, **dict(updates))

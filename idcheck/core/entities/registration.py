"""
Entity: Registration Fields

Raw user-registration and address payloads as received from onboarding
flows. Values are kept as given so validators can report on them.
"""

from dataclasses import dataclass, fields as dc_fields
from enum import Enum
from typing import Any, Mapping


class Role(str, Enum):
    USER = "User"
    ADMIN = "Admin"


@dataclass(frozen=True)
class UserRegistrationFields:
    username: str | None = None
    name: str | None = None
    surname: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None              # validated against Role

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "UserRegistrationFields":
        """Build from a dict, ignoring unknown keys."""
        known = {f.name for f in dc_fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass(frozen=True)
class AddressFields:
    user_id: Any = None
    street: Any = None
    number: Any = None
    complement: Any = None
    neighborhood: Any = None
    city: Any = None
    state: Any = None
    zip_code: Any = None
    country: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AddressFields":
        known = {f.name for f in dc_fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

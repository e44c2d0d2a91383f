"""User records fetched from the remote directory, and the loaded collection."""
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Company:
    name: str


@dataclass(frozen=True)
class UserRecord:
    """A single directory entry. Never mutated after loading."""

    id: int
    name: str
    email: str
    phone: str
    company: Company

    @classmethod
    def from_dict(cls, data: dict) -> "UserRecord":
        """Build a record from one element of the JSON response.

        Raises ValueError when a required field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        company = data.get("company")
        if not isinstance(company, dict):
            raise ValueError(f"record {data.get('id')!r} has no company object")

        user_id = data.get("id")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise ValueError(f"record id must be an integer, got {user_id!r}")

        fields = {}
        for key in ("name", "email", "phone"):
            value = data.get(key)
            if not isinstance(value, str):
                raise ValueError(f"record {user_id} field {key!r} must be a string")
            fields[key] = value
        company_name = company.get("name")
        if not isinstance(company_name, str):
            raise ValueError(f"record {user_id} company name must be a string")

        return cls(id=user_id, company=Company(name=company_name), **fields)


class LoadStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Collection:
    """Raw records plus their load status.

    READY and FAILED are terminal; a FAILED collection never carries items.
    """

    status: LoadStatus = LoadStatus.PENDING
    items: tuple[UserRecord, ...] = field(default_factory=tuple)
    reason: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.status is LoadStatus.READY

    @classmethod
    def ready(cls, items) -> "Collection":
        return cls(status=LoadStatus.READY, items=tuple(items))

    @classmethod
    def failed(cls, reason: str) -> "Collection":
        return cls(status=LoadStatus.FAILED, reason=reason)

"""Result type shared by mutating use cases."""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a mutation.

    Attributes:
        accepted: Whether the store was updated.
        message: Advisory message for the user.
        record_id: Identifier of the created or affected record.
    """

    accepted: bool
    message: str
    record_id: str | None = None

    @classmethod
    def ok(cls, message: str, record_id: str | None = None) -> "MutationResult":
        return cls(accepted=True, message=message, record_id=record_id)

    @classmethod
    def rejected(cls, message: str) -> "MutationResult":
        return cls(accepted=False, message=message)


def new_record_id() -> str:
    """Return a fresh unique record identifier."""
    return uuid4().hex


__all__ = ["MutationResult", "new_record_id"]

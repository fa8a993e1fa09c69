"""Domain models for persisted ledger records.

Each record maps to one JSON object in its collection. ``from_dict`` accepts
the camelCase payload written by ``to_dict`` as well as the legacy field names
(``category``, ``account``, ``fromAccount``, ``toAccount``) of older payloads.
Expenses and income written before accounts existed carry no account and
belong to the default account.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from honey_ledger.domain.constants import DEFAULT_ACCOUNT_ID
from honey_ledger.utils.amount_utils import coerce_amount


def parse_record_date(value: Any) -> date:
    """Parse an ISO date or datetime string into a calendar date.

    Args:
        value: ISO string such as ``2024-05-01`` or ``2024-05-01T10:00:00Z``.

    Returns:
        date: Calendar date, time and zone are discarded.

    Raises:
        ValueError: If the value is not an ISO formatted date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or len(value) < 10:
        raise ValueError(f"Invalid record date: {value!r}")
    return date.fromisoformat(value[:10])


def _first_present(payload: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if payload.get(key) is not None:
            return payload[key]
    raise KeyError(keys[0])


def _account_reference(payload: dict[str, Any]) -> str:
    """Return the account id, defaulting for records saved before accounts."""
    try:
        return str(_first_present(payload, "accountId", "account"))
    except KeyError:
        return DEFAULT_ACCOUNT_ID


@dataclass(frozen=True)
class Account:
    """Money container with a stored base balance."""

    id: str
    name: str
    balance: float
    account_type: str = "checking"
    color: str = ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Account":
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            balance=coerce_amount(payload.get("balance")),
            account_type=str(payload.get("type") or "checking"),
            color=str(payload.get("color") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "balance": self.balance,
            "type": self.account_type,
            "color": self.color,
        }


@dataclass(frozen=True)
class Category:
    """Expense category shown with an emoji and a colour."""

    id: str
    name: str
    emoji: str = ""
    color: str = ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Category":
        return cls(
            id=str(payload["id"]),
            name=str(payload["name"]),
            emoji=str(payload.get("emoji") or ""),
            color=str(payload.get("color") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "emoji": self.emoji,
            "color": self.color,
        }


@dataclass(frozen=True)
class Expense:
    """Money spent from an account in a category."""

    id: str
    amount: float
    category_id: str
    description: str
    date: date
    account_id: str
    recurring: bool = False

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Expense":
        return cls(
            id=str(payload["id"]),
            amount=coerce_amount(payload["amount"]),
            category_id=str(_first_present(payload, "categoryId", "category")),
            description=str(payload.get("description") or ""),
            date=parse_record_date(payload["date"]),
            account_id=_account_reference(payload),
            recurring=bool(payload.get("recurring", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "categoryId": self.category_id,
            "description": self.description,
            "date": self.date.isoformat(),
            "accountId": self.account_id,
            "recurring": self.recurring,
        }


@dataclass(frozen=True)
class Income:
    """Money received into an account."""

    id: str
    amount: float
    description: str
    date: date
    account_id: str
    recurring: bool = False

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Income":
        return cls(
            id=str(payload["id"]),
            amount=coerce_amount(payload["amount"]),
            description=str(payload.get("description") or ""),
            date=parse_record_date(payload["date"]),
            account_id=_account_reference(payload),
            recurring=bool(payload.get("recurring", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "description": self.description,
            "date": self.date.isoformat(),
            "accountId": self.account_id,
            "recurring": self.recurring,
        }


@dataclass(frozen=True)
class Transfer:
    """Balance move between two accounts."""

    id: str
    amount: float
    from_account_id: str
    to_account_id: str
    description: str
    date: date

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Transfer":
        return cls(
            id=str(payload["id"]),
            amount=coerce_amount(payload["amount"]),
            from_account_id=str(
                _first_present(payload, "fromAccountId", "fromAccount")
            ),
            to_account_id=str(
                _first_present(payload, "toAccountId", "toAccount")
            ),
            description=str(payload.get("description") or ""),
            date=parse_record_date(payload["date"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": self.amount,
            "fromAccountId": self.from_account_id,
            "toAccountId": self.to_account_id,
            "description": self.description,
            "date": self.date.isoformat(),
        }


@dataclass(frozen=True)
class CategoryGoal:
    """Monthly spending ceiling for one category."""

    id: str
    category_id: str
    monthly_target: float
    color: str = ""

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "CategoryGoal":
        return cls(
            id=str(payload["id"]),
            category_id=str(_first_present(payload, "categoryId", "category")),
            monthly_target=coerce_amount(payload["monthlyTarget"]),
            color=str(payload.get("color") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "categoryId": self.category_id,
            "monthlyTarget": self.monthly_target,
            "color": self.color,
        }


__all__ = [
    "Account",
    "Category",
    "Expense",
    "Income",
    "Transfer",
    "CategoryGoal",
    "parse_record_date",
]

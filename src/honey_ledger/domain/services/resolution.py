"""Resolve-or-default lookups for record references."""

from collections.abc import Iterable

from honey_ledger.domain.constants import DEFAULT_COLOR
from honey_ledger.domain.models import Account, Category


def find_category(
    category_id: str,
    categories: Iterable[Category],
) -> Category | None:
    return next((cat for cat in categories if cat.id == category_id), None)


def find_account(
    account_id: str,
    accounts: Iterable[Account],
) -> Account | None:
    return next((acc for acc in accounts if acc.id == account_id), None)


def resolve_category_label(
    category_id: str,
    categories: Iterable[Category],
) -> str:
    """Return ``"<emoji> <name>"`` for a category, or the raw id if unknown."""
    category = find_category(category_id, categories)
    if category is None:
        return category_id
    return f"{category.emoji} {category.name}".strip()


def resolve_category_color(
    category_id: str,
    categories: Iterable[Category],
) -> str:
    category = find_category(category_id, categories)
    if category is None or not category.color:
        return DEFAULT_COLOR
    return category.color


def resolve_account_name(
    account_id: str,
    accounts: Iterable[Account],
) -> str:
    """Return the account name, or the raw id if unknown."""
    account = find_account(account_id, accounts)
    return account.name if account is not None else account_id


__all__ = [
    "find_category",
    "find_account",
    "resolve_category_label",
    "resolve_category_color",
    "resolve_account_name",
]

"""Domain constants for the ledger."""

ACCOUNT_TYPES = ("checking", "savings", "credit", "cash")

DEFAULT_ACCOUNT_ID = "main"
DEFAULT_COLOR = "#f4a261"

GOAL_WARNING_PCT = 80.0
GOAL_EXCEEDED_PCT = 100.0

DEFAULT_ACCOUNTS = (
    {
        "id": DEFAULT_ACCOUNT_ID,
        "name": "Main Account",
        "balance": 0.0,
        "type": "checking",
        "color": DEFAULT_COLOR,
    },
)

DEFAULT_CATEGORIES = (
    {"id": "food", "name": "Food", "emoji": "🍕", "color": "#e76f51"},
    {"id": "transport", "name": "Transport", "emoji": "🚗", "color": "#457b9d"},
    {
        "id": "entertainment",
        "name": "Entertainment",
        "emoji": "🎬",
        "color": "#9b5de5",
    },
    {"id": "shopping", "name": "Shopping", "emoji": "🛍️", "color": "#f15bb5"},
    {"id": "health", "name": "Health", "emoji": "⚕️", "color": "#2e7d32"},
    {"id": "bills", "name": "Bills", "emoji": "📄", "color": "#f6c453"},
    {"id": "savings", "name": "Savings", "emoji": "💰", "color": "#1b9aaa"},
    {"id": "other", "name": "Other", "emoji": "📦", "color": "#6c8ead"},
)


__all__ = [
    "ACCOUNT_TYPES",
    "DEFAULT_ACCOUNT_ID",
    "DEFAULT_COLOR",
    "GOAL_WARNING_PCT",
    "GOAL_EXCEEDED_PCT",
    "DEFAULT_ACCOUNTS",
    "DEFAULT_CATEGORIES",
]

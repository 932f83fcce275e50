"""Domain constants for the personal finance ledger."""

ASSET_CATEGORIES = ("liquid", "non_liquid", "investment")

TRANSACTION_TYPES = ("income", "expense")
INCOME = "income"
EXPENSE = "expense"

CATEGORY_KINDS = ("income", "expense", "transfer")
TRANSFER = "transfer"

TAXONOMIES = ("account_type", "debt_type", "transaction_category")

TRANSFER_OUT_PREFIX = "Transfer out: "
TRANSFER_IN_PREFIX = "Transfer in: "

TOP_CATEGORIES_LIMIT = 5
UNCATEGORIZED_LABEL = "Other"

DEFAULT_ACCOUNT_TYPES = {
    "liquid": (
        ("Cash", "💵"),
        ("Checking Account", "🏦"),
        ("Savings Account", "💰"),
        ("Money Market", "📈"),
        ("Cash App", "📱"),
        ("PayPal", "💳"),
    ),
    "non_liquid": (
        ("Real Estate", "🏠"),
        ("Vehicle", "🚗"),
        ("Jewelry", "💎"),
        ("Electronics", "💻"),
        ("Collectibles", "🎨"),
        ("Business Equipment", "🏢"),
    ),
    "investment": (
        ("Stocks", "📊"),
        ("Bonds", "📜"),
        ("Mutual Funds", "🏛️"),
        ("ETFs", "📈"),
        ("Cryptocurrency", "₿"),
        ("Retirement Account", "🏖️"),
        ("Commodities", "🛢️"),
    ),
}

DEFAULT_DEBT_TYPES = (
    ("Mortgage", "🏠"),
    ("Auto Loan", "🚗"),
    ("Credit Card", "💳"),
    ("Personal Loan", "💸"),
    ("Student Loan", "🎓"),
    ("Business Loan", "💼"),
    ("Medical Debt", "🏥"),
    ("Other", "📄"),
)

DEFAULT_TRANSACTION_CATEGORIES = {
    "income": (
        "Salary",
        "Freelance",
        "Investment Income",
        "Business Income",
        "Rental Income",
        "Interest",
        "Dividends",
        "Gift",
        "Refund",
        "Other Income",
    ),
    "expense": (
        "Food & Dining",
        "Groceries",
        "Transportation",
        "Shopping",
        "Entertainment",
        "Bills & Utilities",
        "Healthcare",
        "Education",
        "Home",
        "Personal Care",
        "Gifts & Donations",
        "Insurance",
        "Taxes",
        "Other Expense",
    ),
    "transfer": (
        "Account Transfer",
        "Investment Transfer",
        "Loan Payment",
        "Credit Card Payment",
        "Family Transfer",
        "Savings Transfer",
    ),
}


__all__ = [
    "ASSET_CATEGORIES",
    "TRANSACTION_TYPES",
    "INCOME",
    "EXPENSE",
    "CATEGORY_KINDS",
    "TRANSFER",
    "TAXONOMIES",
    "TRANSFER_OUT_PREFIX",
    "TRANSFER_IN_PREFIX",
    "TOP_CATEGORIES_LIMIT",
    "UNCATEGORIZED_LABEL",
    "DEFAULT_ACCOUNT_TYPES",
    "DEFAULT_DEBT_TYPES",
    "DEFAULT_TRANSACTION_CATEGORIES",
]

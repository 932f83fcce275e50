"""Ledger schema DDL.

Money columns hold integer cents and instants hold normalized UTC
ISO-8601 text, so the same statements run on PostgreSQL and SQLite.
"""

from src.application.ports.database import DatabaseEnginePort

CREATE_ACCOUNT_TYPES_SQL = """
CREATE TABLE IF NOT EXISTS account_types (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category TEXT NOT NULL,
    label TEXT NOT NULL,
    icon TEXT,
    is_system BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_DEBT_TYPES_SQL = """
CREATE TABLE IF NOT EXISTS debt_types (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    label TEXT NOT NULL,
    icon TEXT,
    is_system BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_TRANSACTION_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS transaction_categories (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    kind TEXT NOT NULL,
    label TEXT NOT NULL,
    is_system BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category TEXT NOT NULL,
    account_type_id TEXT NOT NULL REFERENCES account_types (id),
    name TEXT NOT NULL,
    current_value_cents BIGINT NOT NULL,
    opening_value_cents BIGINT NOT NULL,
    purchase_value_cents BIGINT,
    purchase_date TEXT,
    description TEXT,
    bank_name TEXT,
    account_number TEXT,
    ticker TEXT,
    notes TEXT,
    version INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_DEBTS_SQL = """
CREATE TABLE IF NOT EXISTS debts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    debt_type_id TEXT NOT NULL REFERENCES debt_types (id),
    name TEXT NOT NULL,
    balance_cents BIGINT NOT NULL,
    original_amount_cents BIGINT,
    interest_rate TEXT,
    monthly_payment_cents BIGINT,
    start_date TEXT,
    due_date TEXT,
    notes TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    type TEXT NOT NULL CHECK (type IN ('income', 'expense')),
    category_id TEXT NOT NULL REFERENCES transaction_categories (id),
    description TEXT NOT NULL,
    amount_cents BIGINT NOT NULL CHECK (amount_cents > 0),
    account_id TEXT NOT NULL REFERENCES accounts (id),
    transaction_date TEXT NOT NULL,
    notes TEXT,
    version INTEGER NOT NULL DEFAULT 1,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

CREATE_INDEXES_SQL = (
    "CREATE INDEX IF NOT EXISTS idx_accounts_user_category "
    "ON accounts (user_id, category)",
    "CREATE INDEX IF NOT EXISTS idx_debts_user ON debts (user_id)",
    "CREATE INDEX IF NOT EXISTS idx_transactions_user_date "
    "ON transactions (user_id, transaction_date)",
    "CREATE INDEX IF NOT EXISTS idx_transactions_account "
    "ON transactions (account_id)",
)

SCHEMA_STATEMENTS = (
    CREATE_ACCOUNT_TYPES_SQL,
    CREATE_DEBT_TYPES_SQL,
    CREATE_TRANSACTION_CATEGORIES_SQL,
    CREATE_ACCOUNTS_SQL,
    CREATE_DEBTS_SQL,
    CREATE_TRANSACTIONS_SQL,
    *CREATE_INDEXES_SQL,
)


def ensure_schema(db_port: DatabaseEnginePort) -> None:
    """Create every ledger table and index if it does not exist.

    Args:
        db_port: Port providing access to the ledger engine.
    """
    engine = db_port.get_ledger_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = ["SCHEMA_STATEMENTS", "ensure_schema"]

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from typing import Optional

from ..db import StorageEngine, get_conn
from ..domain.models import Account, Role
from ..repository import account_repo

logger = logging.getLogger(__name__)

ADMIN_EMAIL_DOMAIN = "@mavmart.com"


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def is_admin_email(email: str | None) -> bool:
    return normalize_email(email).endswith(ADMIN_EMAIL_DOMAIN)


def _prepared(account: Account) -> Account:
    """Normalize email and reject blank required fields."""
    email = normalize_email(account.email)
    if not (account.first or "").strip():
        raise ValueError("first_name_required")
    if not (account.last or "").strip():
        raise ValueError("last_name_required")
    if not email:
        raise ValueError("email_required")
    if account.credential is None:
        raise ValueError("credential_required")
    return replace(account, email=email)


def insert_account(account: Account, engine: StorageEngine | None = None) -> Optional[int]:
    """
    Insert a new account and return its id.

    Email is normalized here, not by callers. Returns None when the email is
    already registered (case-insensitively); the store's unique index decides.
    """
    acc = _prepared(account)
    with get_conn(engine) as conn:
        try:
            return account_repo.insert(conn, acc)
        except sqlite3.IntegrityError as e:
            logger.warning("insert_account rejected for %s: %s", acc.email, e)
            return None


def register_account(
    first: str, last: str, email: str, credential: str, engine: StorageEngine | None = None
) -> Optional[int]:
    account = Account(
        first=(first or "").strip(),
        last=(last or "").strip(),
        email=email,
        credential=credential,
        role=Role.STANDARD,
    )
    return insert_account(account, engine)


def get_all_accounts(engine: StorageEngine | None = None) -> list[Account]:
    with get_conn(engine) as conn:
        return account_repo.list_all(conn)


def find_account_by_email(email: str, engine: StorageEngine | None = None) -> Optional[Account]:
    with get_conn(engine) as conn:
        return account_repo.find_by_email(conn, normalize_email(email))


def get_account_by_id(account_id: int, engine: StorageEngine | None = None) -> Optional[Account]:
    with get_conn(engine) as conn:
        return account_repo.get_by_id(conn, account_id)


def update_account(account: Account, engine: StorageEngine | None = None) -> int:
    """Overwrite every mutable field of row `account.id`; returns rows affected."""
    if account.id is None:
        return 0
    acc = _prepared(account)
    with get_conn(engine) as conn:
        try:
            return account_repo.update(conn, acc)
        except sqlite3.IntegrityError as e:
            logger.warning("update_account %s rejected: %s", acc.id, e)
            return 0


def delete_account(account_id: int, engine: StorageEngine | None = None) -> int:
    """Listings of the account are removed by the FK cascade."""
    with get_conn(engine) as conn:
        return account_repo.delete(conn, account_id)


def validate_login(
    email: str,
    credential: str,
    expected_role: Role | None = None,
    engine: StorageEngine | None = None,
) -> Optional[Account]:
    # plain-text comparison: credentials are not hashed in this app
    account = find_account_by_email(email, engine)
    if account is None:
        return None
    if account.credential != credential:
        return None
    if expected_role is not None and account.role != expected_role:
        return None
    return account

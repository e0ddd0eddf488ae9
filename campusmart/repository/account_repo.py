from __future__ import annotations

from sqlite3 import Connection, Row
from typing import Optional

from ..domain.models import Account, Role

_SELECT = "SELECT id, first, last, email, credential, role FROM users"


def row_to_account(r: Row) -> Account:
    return Account(
        id=int(r["id"]),
        first=r["first"],
        last=r["last"],
        email=r["email"],
        credential=r["credential"],
        role=Role.from_name(r["role"]),
    )


def insert(conn: Connection, account: Account) -> int:
    """Raises sqlite3.IntegrityError when the email is already taken."""
    cur = conn.execute(
        "INSERT INTO users(first, last, email, credential, role) VALUES(?,?,?,?,?)",
        (account.first, account.last, account.email, account.credential, account.role.name),
    )
    return int(cur.lastrowid)


def list_all(conn: Connection) -> list[Account]:
    rows = conn.execute(
        _SELECT + " ORDER BY first COLLATE NOCASE ASC, last COLLATE NOCASE ASC, id ASC"
    ).fetchall()
    return [row_to_account(r) for r in rows]


def find_by_email(conn: Connection, email: str) -> Optional[Account]:
    r = conn.execute(_SELECT + " WHERE email=?", (email,)).fetchone()
    return row_to_account(r) if r else None


def get_by_id(conn: Connection, account_id: int) -> Optional[Account]:
    r = conn.execute(_SELECT + " WHERE id=?", (int(account_id),)).fetchone()
    return row_to_account(r) if r else None


def update(conn: Connection, account: Account) -> int:
    cur = conn.execute(
        "UPDATE users SET first=?, last=?, email=?, credential=?, role=? WHERE id=?",
        (account.first, account.last, account.email, account.credential, account.role.name, account.id),
    )
    return int(cur.rowcount)


def delete(conn: Connection, account_id: int) -> int:
    cur = conn.execute("DELETE FROM users WHERE id=?", (int(account_id),))
    return int(cur.rowcount)

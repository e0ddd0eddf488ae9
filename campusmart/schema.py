"""
Schema registry: table names, column names and DDL for the local store.

Constants only. Column names and enum names stored in them are part of the
on-disk contract; renaming any of them requires bumping SCHEMA_VERSION.
"""
from __future__ import annotations

DB_NAME = "campusmart.db"
SCHEMA_VERSION = 6

USERS = "users"
USER_COLUMNS = ("id", "first", "last", "email", "credential", "role")

LISTINGS = "listings"
LISTING_COLUMNS = (
    "id",
    "seller_id",
    "title",
    "description",
    "category",
    "price_cents",
    "condition",
    "photos_json",
    "status",
    "created_at",
)

# credential is plain text (demo only)
CREATE_USERS = f"""
CREATE TABLE IF NOT EXISTS {USERS} (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  first TEXT NOT NULL,
  last TEXT NOT NULL,
  email TEXT NOT NULL UNIQUE COLLATE NOCASE,
  credential TEXT NOT NULL,
  role TEXT NOT NULL
)
"""

CREATE_INDEX_USERS_EMAIL = (
    f"CREATE UNIQUE INDEX IF NOT EXISTS idx_users_email ON {USERS}(email COLLATE NOCASE)"
)

CREATE_LISTINGS = f"""
CREATE TABLE IF NOT EXISTS {LISTINGS} (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  seller_id INTEGER NOT NULL,
  title TEXT NOT NULL,
  description TEXT,
  category TEXT NOT NULL,
  price_cents INTEGER NOT NULL,
  condition TEXT NOT NULL,
  photos_json TEXT NOT NULL,
  status TEXT NOT NULL,
  created_at INTEGER NOT NULL,
  FOREIGN KEY(seller_id) REFERENCES {USERS}(id) ON DELETE CASCADE
)
"""

CREATE_INDEX_LISTINGS_SELLER = (
    f"CREATE INDEX IF NOT EXISTS idx_listings_seller ON {LISTINGS}(seller_id)"
)

# Creation order matters: listings references users.
CREATE_STATEMENTS = (
    CREATE_USERS,
    CREATE_INDEX_USERS_EMAIL,
    CREATE_LISTINGS,
    CREATE_INDEX_LISTINGS_SELLER,
)

# Drop order is the reverse of the FK dependency.
DROP_STATEMENTS = (
    f"DROP TABLE IF EXISTS {LISTINGS}",
    f"DROP TABLE IF EXISTS {USERS}",
)

from __future__ import annotations

from typing import Any

from ..db import StorageEngine, get_conn
from ..domain.money import format_cents
from ..repository import account_repo, listing_repo


def admin_overview(engine: StorageEngine | None = None) -> dict[str, Any]:
    """Everything the admin dashboard shows, credentials excluded."""
    with get_conn(engine) as conn:
        accounts = account_repo.list_all(conn)
        listings = listing_repo.list_all(conn)
    items = []
    for lst in listings:
        it = lst.to_dict()
        it["price"] = format_cents(lst.price_cents)
        it["category_label"] = lst.category.label
        it["condition_label"] = lst.condition.label
        items.append(it)
    return {
        "accounts": [a.to_public_dict() for a in accounts],
        "listings": items,
        "account_count": len(accounts),
        "listing_count": len(listings),
    }

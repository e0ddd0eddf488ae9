from __future__ import annotations

from dataclasses import replace

from ..db import StorageEngine, get_conn
from ..domain.models import Listing
from ..repository import listing_repo


def _prepared(listing: Listing) -> Listing:
    title = (listing.title or "").strip()
    if not title:
        raise ValueError("title_required")
    if int(listing.price_cents) < 0:
        raise ValueError("price_must_be_non_negative")
    desc = listing.description
    if desc is not None and not desc.strip():
        desc = None
    return replace(listing, title=title, description=desc, photos=list(listing.photos or []))


def insert_listing(listing: Listing, engine: StorageEngine | None = None) -> int:
    """
    Insert a listing and return its id.

    No seller pre-check: an unknown seller_id fails the FK and the
    sqlite3.IntegrityError propagates to the caller.
    """
    lst = _prepared(listing)
    with get_conn(engine) as conn:
        return listing_repo.insert(conn, lst)


def get_all_listings(engine: StorageEngine | None = None) -> list[Listing]:
    with get_conn(engine) as conn:
        return listing_repo.list_all(conn)


def get_listings_for_seller(seller_id: int, engine: StorageEngine | None = None) -> list[Listing]:
    with get_conn(engine) as conn:
        return listing_repo.list_for_seller(conn, seller_id)

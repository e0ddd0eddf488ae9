from __future__ import annotations

from sqlite3 import Connection, Row

from ..domain.models import ItemCondition, Listing, ListingCategory, ListingStatus
from ..serialization import decode_photos, encode_photos

_SELECT = (
    "SELECT id, seller_id, title, description, category, price_cents, condition, "
    "photos_json, status, created_at FROM listings"
)
_ORDER = " ORDER BY created_at DESC, id DESC"


def row_to_listing(r: Row) -> Listing:
    return Listing(
        id=int(r["id"]),
        seller_id=int(r["seller_id"]),
        title=r["title"],
        description=r["description"],
        category=ListingCategory.from_name(r["category"]),
        price_cents=int(r["price_cents"]),
        condition=ItemCondition.from_name(r["condition"]),
        photos=decode_photos(r["photos_json"]),
        status=ListingStatus.from_name(r["status"]),
        created_at=int(r["created_at"]),
    )


def insert(conn: Connection, listing: Listing) -> int:
    """Raises sqlite3.IntegrityError when seller_id does not reference a user."""
    cur = conn.execute(
        "INSERT INTO listings(seller_id, title, description, category, price_cents, condition, "
        "photos_json, status, created_at) VALUES(?,?,?,?,?,?,?,?,?)",
        (
            int(listing.seller_id),
            listing.title,
            listing.description,
            listing.category.name,
            int(listing.price_cents),
            listing.condition.name,
            encode_photos(listing.photos),
            listing.status.name,
            int(listing.created_at),
        ),
    )
    return int(cur.lastrowid)


def list_all(conn: Connection) -> list[Listing]:
    return [row_to_listing(r) for r in conn.execute(_SELECT + _ORDER).fetchall()]


def list_for_seller(conn: Connection, seller_id: int) -> list[Listing]:
    rows = conn.execute(_SELECT + " WHERE seller_id=?" + _ORDER, (int(seller_id),)).fetchall()
    return [row_to_listing(r) for r in rows]

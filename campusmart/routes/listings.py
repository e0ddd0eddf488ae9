from __future__ import annotations

import sqlite3
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..domain.models import ItemCondition, Listing, ListingCategory, ListingStatus
from ..domain.money import dollars_to_cents
from ..services import listing_svc

router = APIRouter()


class ListingCreate(BaseModel):
    seller_id: int
    title: str
    description: Optional[str] = None
    category: str = ListingCategory.GENERAL.name
    price_cents: Optional[int] = None
    price: Optional[str] = None  # dollars as typed, used when price_cents is absent
    condition: str = ItemCondition.GOOD.name
    photos: List[str] = []
    status: str = ListingStatus.ACTIVE.name
    created_at: Optional[int] = None


def _enum_or_400(enum_cls, name: str):
    try:
        return enum_cls.from_name(name.upper())
    except KeyError:
        raise HTTPException(status_code=400, detail=f"unknown_{enum_cls.__name__}: {name}")


@router.get("/api/listings")
def api_listings():
    return {"items": [lst.to_dict() for lst in listing_svc.get_all_listings()]}


@router.get("/api/listings/seller/{seller_id}")
def api_listings_for_seller(seller_id: int):
    return {"items": [lst.to_dict() for lst in listing_svc.get_listings_for_seller(seller_id)]}


@router.post("/api/listings", status_code=201)
def api_listing_create(body: ListingCreate):
    cents = body.price_cents if body.price_cents is not None else dollars_to_cents(body.price)
    listing = Listing(
        seller_id=body.seller_id,
        title=body.title,
        description=body.description,
        category=_enum_or_400(ListingCategory, body.category),
        price_cents=cents,
        condition=_enum_or_400(ItemCondition, body.condition),
        photos=body.photos,
        status=_enum_or_400(ListingStatus, body.status),
    )
    if body.created_at is not None:
        listing.created_at = body.created_at
    try:
        new_id = listing_svc.insert_listing(listing)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except sqlite3.IntegrityError:
        raise HTTPException(status_code=409, detail="seller_not_found")
    return {"id": new_id}

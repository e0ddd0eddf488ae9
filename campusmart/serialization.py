"""
Photo list <-> text column codec.

Photos are stored as a compact JSON array of strings in listings.photos_json.
Decoding never raises: a corrupt column reads back as an empty list so one bad
row cannot fail a whole listing query.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable, List

logger = logging.getLogger(__name__)


def encode_photos(photos: Iterable[str]) -> str:
    return json.dumps([str(p) for p in photos], ensure_ascii=False, separators=(",", ":"))


def decode_photos(text: str | None) -> List[str]:
    if text is None:
        return []
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning("unparseable photos column, reading as empty: %s", e)
        return []
    if not isinstance(data, list):
        logger.warning("photos column is not a JSON array, reading as empty")
        return []
    out: List[str] = []
    for item in data:
        if item is None:
            continue
        # non-string scalars keep their JSON spelling (true, 1.0)
        s = item if isinstance(item, str) else json.dumps(item, ensure_ascii=False)
        if s.strip():
            out.append(s)
    return out

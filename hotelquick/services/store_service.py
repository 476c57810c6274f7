"""Whole-value JSON persistence over the kv_entries table.

Every call re-reads or rewrites the complete value for a key. There is no
compare-and-swap: two writers doing read-modify-write on the same collection
race and the last commit wins. This is only correct for a single client.
"""
import json
import logging
from sqlalchemy.orm import Session

from hotelquick.core.config import settings
from hotelquick.models.kv_entry import KVEntry

logger = logging.getLogger(__name__)

HOTELS = "hotels"
BOOKINGS = "bookings"
USER = "user"


def storage_key(name: str) -> str:
    return f"{settings.STORAGE_KEY_PREFIX}{name}"


def _load(db: Session, name: str):
    entry = db.get(KVEntry, storage_key(name))
    if entry is None:
        return None
    return json.loads(entry.value)


def _store(db: Session, name: str, value) -> None:
    key = storage_key(name)
    raw = json.dumps(value, ensure_ascii=False)
    entry = db.get(KVEntry, key)
    if entry is None:
        db.add(KVEntry(key=key, value=raw))
    else:
        entry.value = raw
    db.commit()


def read_collection(db: Session, name: str, seed: list[dict] | None = None) -> list[dict]:
    """Return the stored array for `name`.

    An absent key yields [] unless a seed is given, in which case the seed is
    persisted right away so later reads see the same records.
    """
    records = _load(db, name)
    if records is not None:
        return records
    if seed is None:
        return []
    logger.info("seeding collection %s with %d records", storage_key(name), len(seed))
    write_collection(db, name, seed)
    return json.loads(json.dumps(seed))


def write_collection(db: Session, name: str, records: list[dict]) -> None:
    _store(db, name, list(records))
    logger.debug("wrote %d records to %s", len(records), storage_key(name))


def read_object(db: Session, name: str) -> dict | None:
    return _load(db, name)


def write_object(db: Session, name: str, obj: dict) -> None:
    _store(db, name, obj)


def delete_key(db: Session, name: str) -> None:
    entry = db.get(KVEntry, storage_key(name))
    if entry is not None:
        db.delete(entry)
        db.commit()


def has_key(db: Session, name: str) -> bool:
    return db.get(KVEntry, storage_key(name)) is not None

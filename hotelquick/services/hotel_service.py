import uuid
import logging
from sqlalchemy.orm import Session

from hotelquick.core.errors import NotFoundError
from hotelquick.core.latency import simulate_latency, LIST_HOTELS_MS, GET_HOTEL_MS, WRITE_HOTEL_MS
from hotelquick.seed_data import SEED_HOTELS
from hotelquick.services.store_service import HOTELS, read_collection, write_collection

logger = logging.getLogger(__name__)


def _read_hotels(db: Session) -> list[dict]:
    return read_collection(db, HOTELS, seed=SEED_HOTELS)


def _coerce_int(value) -> int:
    """int() that falls back to 0 for anything unparseable, like a blank form field."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0


def list_hotels(db: Session) -> list[dict]:
    simulate_latency(LIST_HOTELS_MS)
    return _read_hotels(db)


def get_hotel(db: Session, hotel_id: str) -> dict:
    simulate_latency(GET_HOTEL_MS)
    for h in _read_hotels(db):
        if h.get("id") == hotel_id:
            return h
    raise NotFoundError("Hotel not found")


def create_hotel(db: Session, data: dict) -> dict:
    simulate_latency(WRITE_HOTEL_MS)
    hotels = _read_hotels(db)
    hotel = {
        **data,
        "id": str(uuid.uuid4()),
        "rating": 0,
        "rooms": _coerce_int(data.get("rooms")),
    }
    hotels.append(hotel)
    write_collection(db, HOTELS, hotels)
    logger.info("hotel %s created for provider %s", hotel["id"], hotel.get("providerId"))
    return hotel


def update_hotel(db: Session, hotel_id: str, partial: dict) -> dict:
    """Shallow-merge `partial` over the stored hotel. Keys absent from `partial` are kept."""
    simulate_latency(WRITE_HOTEL_MS)
    hotels = _read_hotels(db)
    for i, h in enumerate(hotels):
        if h.get("id") == hotel_id:
            break
    else:
        raise NotFoundError("Hotel not found")

    updated = {**hotels[i], **partial}
    hotels[i] = updated
    write_collection(db, HOTELS, hotels)
    logger.info("hotel %s updated (%s)", hotel_id, ", ".join(sorted(partial)) or "no fields")
    return updated


def delete_hotel(db: Session, hotel_id: str) -> None:
    # Filter-based removal: a missing id is not an error.
    simulate_latency(WRITE_HOTEL_MS)
    hotels = _read_hotels(db)
    remaining = [h for h in hotels if h.get("id") != hotel_id]
    write_collection(db, HOTELS, remaining)
    if len(remaining) != len(hotels):
        logger.info("hotel %s deleted", hotel_id)


def hotel_ids_for_provider(db: Session, provider_id: str) -> set[str]:
    return {h["id"] for h in _read_hotels(db) if h.get("providerId") == provider_id}


def filter_hotels(hotels: list[dict], search: str = "", min_price: float | None = None,
                  max_price: float | None = None) -> list[dict]:
    """Case-insensitive match on name or address, inclusive price range."""
    needle = (search or "").strip().lower()
    out = []
    for h in hotels:
        if needle and needle not in str(h.get("name", "")).lower() and needle not in str(h.get("address", "")).lower():
            continue
        price = h.get("price") or 0
        if min_price is not None and price < min_price:
            continue
        if max_price is not None and price > max_price:
            continue
        out.append(h)
    return out

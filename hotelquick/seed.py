from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError

from hotelquick.db.session import SessionLocal
from hotelquick.seed_data import SEED_HOTELS, SEED_BOOKINGS
from hotelquick.services.store_service import HOTELS, BOOKINGS, has_key, read_collection, storage_key


def run(db=None):
    """Write the seed collections for any collection key that is still absent."""
    if db is None:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM kv_entries LIMIT 1"))
        except (OperationalError, ProgrammingError):
            db.rollback()
            print("[seed] kv_entries table not found yet. Skipping seeding (run alembic upgrade head).")
            return

        for name, seed in ((HOTELS, SEED_HOTELS), (BOOKINGS, SEED_BOOKINGS)):
            if has_key(db, name):
                print(f"[seed] {storage_key(name)} already present")
                continue
            read_collection(db, name, seed=seed)
            print(f"[seed] {storage_key(name)} seeded with {len(seed)} records")
    finally:
        db.close()


if __name__ == "__main__":
    run()

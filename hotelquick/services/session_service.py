import logging
from sqlalchemy.orm import Session

from hotelquick.core.errors import InvalidCredentialsError
from hotelquick.core.latency import simulate_latency, LOGIN_MS
from hotelquick.core.security import verify_password
from hotelquick.seed_data import SEED_ACCOUNTS
from hotelquick.services.store_service import USER, read_object, write_object, delete_key

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("id", "name", "email", "role")


class AuthSession:
    """The active identity, persisted under the `user` key of the store.

    Anonymous --login--> Authenticated(role) --logout--> Anonymous. A failed
    login leaves whatever state was there before.
    """

    def __init__(self, db: Session):
        self.db = db
        self._identity: dict | None = None

    def restore(self) -> "AuthSession":
        self._identity = read_object(self.db, USER)
        return self

    @property
    def current(self) -> dict | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    @property
    def is_consumer(self) -> bool:
        return bool(self._identity) and self._identity.get("role") == "consumer"

    @property
    def is_provider(self) -> bool:
        return bool(self._identity) and self._identity.get("role") == "provider"

    def login(self, email: str, password: str, role: str) -> dict:
        simulate_latency(LOGIN_MS)
        account = SEED_ACCOUNTS.get(role)
        if not account or account["email"] != email or not verify_password(password, account["password_hash"]):
            logger.warning("login failed for %s as %s", email, role)
            raise InvalidCredentialsError("Invalid credentials")

        identity = {k: account[k] for k in IDENTITY_FIELDS}
        write_object(self.db, USER, identity)
        self._identity = identity
        logger.info("%s logged in as %s", identity["email"], identity["role"])
        return identity

    def logout(self) -> None:
        delete_key(self.db, USER)
        if self._identity:
            logger.info("%s logged out", self._identity.get("email"))
        self._identity = None

import pytest

from hotelquick.core.errors import InvalidCredentialsError
from hotelquick.services import store_service
from hotelquick.services.session_service import AuthSession


@pytest.fixture
def session(db):
    return AuthSession(db).restore()


class TestLogin:
    def test_starts_anonymous(self, session):
        assert session.current is None
        assert not session.is_authenticated
        assert not session.is_consumer and not session.is_provider

    def test_consumer_login(self, session):
        me = session.login("consumer@example.com", "password123", "consumer")
        assert me == {"id": "consumer-1", "name": "John Doe", "email": "consumer@example.com", "role": "consumer"}
        assert "password" not in me and "password_hash" not in me
        assert session.is_consumer and not session.is_provider

    def test_provider_login(self, session):
        me = session.login("provider@example.com", "password123", "provider")
        assert me["id"] == "provider-1"
        assert session.is_provider

    @pytest.mark.parametrize("email,password,role", [
        ("consumer@example.com", "wrong", "consumer"),
        ("provider@example.com", "password123", "consumer"),
        ("consumer@example.com", "password123", "provider"),
        ("consumer@example.com", "password123", "admin"),
    ])
    def test_mismatch_raises(self, session, email, password, role):
        with pytest.raises(InvalidCredentialsError):
            session.login(email, password, role)
        assert session.current is None
        assert store_service.read_object(session.db, "user") is None

    def test_failure_keeps_prior_session(self, db, session):
        session.login("consumer@example.com", "password123", "consumer")
        with pytest.raises(InvalidCredentialsError):
            session.login("consumer@example.com", "wrong", "consumer")
        assert session.current["role"] == "consumer"
        assert AuthSession(db).restore().current["id"] == "consumer-1"


class TestLifecycle:
    def test_identity_is_restored_from_store(self, db, session):
        session.login("provider@example.com", "password123", "provider")
        restored = AuthSession(db).restore()
        assert restored.current == session.current
        assert restored.is_provider

    def test_logout_clears_persisted_identity(self, db, session):
        session.login("consumer@example.com", "password123", "consumer")
        session.logout()
        assert session.current is None
        assert AuthSession(db).restore().current is None

    def test_logout_when_anonymous(self, session):
        session.logout()
        assert not session.is_authenticated

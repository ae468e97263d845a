"""Tests for app.services.sessions.SessionManager against an in-memory database."""

import unittest
from datetime import UTC, datetime, timedelta

from app.core.config import Settings
from app.core.security import hash_password
from app.models import Hotel, Session, User
from app.services.sessions import SessionManager
from app.services.store import CredentialStore
from tests.helpers import DatabaseTestCase


def _settings(**overrides: object) -> Settings:
    return Settings(DATABASE_URL="sqlite://", **overrides)


class SessionManagerTestCase(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.store = CredentialStore(self.db)
        self.hotel = Hotel(id="11111111-1111-4111-8111-111111111111", name="Grand Palace")
        self.user = User(
            id="22222222-2222-4222-8222-222222222222",
            email="owner@example.com",
            fullname="Ada Obi",
            password_hash=hash_password("supersecret1"),
            role="owner",
            hotel_id=self.hotel.id,
            is_approved=True,
        )
        self.store.add(self.hotel, self.user)
        self.store.commit()
        self.sessions = SessionManager(self.store, _settings())


class TestCreateAndValidate(SessionManagerTestCase):
    def test_created_session_validates_to_its_user(self) -> None:
        session = self.sessions.create_session(self.user.id)
        self.assertIsNone(session.expires_at)
        found, user = self.sessions.validate_session(session.id)
        self.assertEqual(found.id, session.id)
        self.assertEqual(user.id, self.user.id)

    def test_unknown_or_empty_token_returns_empty_pair(self) -> None:
        self.assertEqual(self.sessions.validate_session("no-such-token"), (None, None))
        self.assertEqual(self.sessions.validate_session(None), (None, None))
        self.assertEqual(self.sessions.validate_session(""), (None, None))

    def test_user_attributes_are_read_fresh(self) -> None:
        session = self.sessions.create_session(self.user.id)
        self.user.is_approved = False
        self.user.role = "cleaner"
        self.store.commit()
        _, user = self.sessions.validate_session(session.id)
        self.assertFalse(user.is_approved)
        self.assertEqual(user.role, "cleaner")


class TestInvalidate(SessionManagerTestCase):
    def test_invalidate_removes_session(self) -> None:
        token = self.sessions.create_session(self.user.id).id
        self.sessions.invalidate_session(token)
        self.assertEqual(self.sessions.validate_session(token), (None, None))
        self.assertIsNone(self.store.get_session(token))

    def test_invalidate_is_idempotent(self) -> None:
        token = self.sessions.create_session(self.user.id).id
        self.sessions.invalidate_session(token)
        self.sessions.invalidate_session(token)
        self.sessions.invalidate_session("never-existed")
        self.sessions.invalidate_session(None)

    def test_invalidate_user_sessions(self) -> None:
        self.sessions.create_session(self.user.id)
        self.sessions.create_session(self.user.id)
        self.assertEqual(self.sessions.invalidate_user_sessions(self.user.id), 2)
        self.assertEqual(self.db.query(Session).count(), 0)


class TestExpiry(SessionManagerTestCase):
    def test_max_age_sets_expiry(self) -> None:
        sessions = SessionManager(self.store, _settings(SESSION_MAX_AGE_HOURS=2))
        session = sessions.create_session(self.user.id)
        self.assertIsNotNone(session.expires_at)

    def test_expired_session_is_rejected_and_deleted(self) -> None:
        expired = Session(
            id="expired-token",
            user_id=self.user.id,
            expires_at=datetime.now(UTC) - timedelta(minutes=1),
        )
        self.store.add(expired)
        self.store.commit()
        self.assertEqual(self.sessions.validate_session("expired-token"), (None, None))
        self.assertIsNone(self.store.get_session("expired-token"))

    def test_delete_expired_sessions_keeps_live_ones(self) -> None:
        now = datetime.now(UTC)
        self.store.add(
            Session(id="old", user_id=self.user.id, expires_at=now - timedelta(hours=1)),
            Session(id="live", user_id=self.user.id, expires_at=now + timedelta(hours=1)),
            Session(id="forever", user_id=self.user.id, expires_at=None),
        )
        self.store.commit()
        self.assertEqual(self.sessions.delete_expired_sessions(now), 1)
        remaining = {s.id for s in self.db.query(Session).all()}
        self.assertEqual(remaining, {"live", "forever"})


class TestCookies(unittest.TestCase):
    """Cookie descriptors do not touch the store."""

    def test_session_cookie_attributes_dev(self) -> None:
        sessions = SessionManager(store=None, settings=_settings(APP_ENV="dev"))
        cookie = sessions.create_session_cookie("tok")
        self.assertEqual(cookie.name, "auth_session")
        self.assertEqual(cookie.value, "tok")
        self.assertTrue(cookie.attributes["httponly"])
        self.assertFalse(cookie.attributes["secure"])
        self.assertEqual(cookie.attributes["samesite"], "lax")
        self.assertNotIn("max_age", cookie.attributes)
        self.assertNotIn("expires", cookie.attributes)

    def test_session_cookie_secure_in_prod(self) -> None:
        sessions = SessionManager(store=None, settings=_settings(APP_ENV="prod"))
        self.assertTrue(sessions.create_session_cookie("tok").attributes["secure"])

    def test_session_cookie_follows_max_age(self) -> None:
        sessions = SessionManager(store=None, settings=_settings(SESSION_MAX_AGE_HOURS=2))
        self.assertEqual(sessions.create_session_cookie("tok").attributes["max_age"], 7200)

    def test_blank_cookie_expires_immediately(self) -> None:
        sessions = SessionManager(
            store=None, settings=_settings(SESSION_COOKIE_NAME="innkeep_session")
        )
        cookie = sessions.create_blank_session_cookie()
        self.assertEqual(cookie.name, "innkeep_session")
        self.assertEqual(cookie.value, "")
        self.assertEqual(cookie.attributes["max_age"], 0)


if __name__ == "__main__":
    unittest.main()

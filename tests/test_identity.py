import unittest
from datetime import datetime, timedelta, timezone
from unittest import mock

import jwt
from sqlalchemy.exc import OperationalError

from helpers import IDENTITY_SECRET, add_user, make_session_factory, make_settings

from ranchbook.core.errors import Forbidden, Unauthenticated, ValidationFailed
from ranchbook.core.security import IdentityAssertion, get_bearer_token, verify_identity_assertion
from ranchbook.models.session import UserSession
from ranchbook.models.user import User
from ranchbook.services.identity_service import (
    create_session,
    resolve_session,
    revoke_session,
    touch_last_active,
    upsert_from_identity_assertion,
)

NOW = datetime(2026, 10, 19, 12, 0)
TTL = 3600


def _assertion(subject_id="sub-1", email="rider@ranch.test", **extra):
    return IdentityAssertion(
        subject_id=subject_id,
        email=email,
        given_name=extra.get("given_name", "Rider"),
        family_name=extra.get("family_name", "One"),
        avatar_url=extra.get("avatar_url"),
    )


class IdentityTestCase(unittest.TestCase):
    def setUp(self):
        self.db = make_session_factory()()

    def tearDown(self):
        self.db.close()


class UpsertTest(IdentityTestCase):
    def test_new_user_is_partner(self):
        user = upsert_from_identity_assertion(self.db, _assertion())
        self.assertEqual(user.role, "partner")
        self.assertTrue(user.is_active)
        self.assertEqual(user.first_name, "Rider")

    def test_default_admin_email_is_case_insensitive(self):
        user = upsert_from_identity_assertion(
            self.db,
            _assertion(email="Boss@Ranch.Test"),
            ["boss@ranch.test"],
        )
        self.assertEqual(user.role, "admin")

    def test_existing_role_is_kept_and_profile_refreshed(self):
        add_user(self.db, "sub-1", role="owner", email="old@ranch.test")

        user = upsert_from_identity_assertion(
            self.db,
            _assertion(email="new@ranch.test", given_name="Renamed"),
            ["new@ranch.test"],
        )
        self.assertEqual(user.role, "owner")
        self.assertEqual(user.email, "new@ranch.test")
        self.assertEqual(user.first_name, "Renamed")


class SessionLifecycleTest(IdentityTestCase):
    def setUp(self):
        super().setUp()
        self.user = add_user(self.db, "user-1")

    def test_resolve_rolls_expiry_forward(self):
        session = create_session(self.db, self.user, TTL, now=NOW)
        self.assertEqual(session.expires_at, NOW + timedelta(seconds=TTL))

        later = NOW + timedelta(minutes=30)
        user = resolve_session(self.db, session.sid, TTL, now=later)
        self.assertEqual(user.id, "user-1")
        self.assertEqual(self.db.get(UserSession, session.sid).expires_at, later + timedelta(seconds=TTL))

    def test_expired_session_is_deleted(self):
        session = create_session(self.db, self.user, TTL, now=NOW)
        sid = session.sid

        with self.assertRaises(Unauthenticated) as ctx:
            resolve_session(self.db, sid, TTL, now=NOW + timedelta(hours=2))
        self.assertEqual(ctx.exception.message, "Session expired")
        self.assertIsNone(self.db.get(UserSession, sid))

    def test_missing_or_unknown_token(self):
        for token in (None, "", "no-such-session"):
            with self.subTest(token=token):
                with self.assertRaises(Unauthenticated):
                    resolve_session(self.db, token, TTL, now=NOW)

    def test_deactivated_user_cannot_resolve(self):
        session = create_session(self.db, self.user, TTL, now=NOW)
        self.user.is_active = False
        self.db.commit()

        with self.assertRaises(Unauthenticated):
            resolve_session(self.db, session.sid, TTL, now=NOW + timedelta(minutes=1))

    def test_deactivated_user_cannot_log_in(self):
        inactive = add_user(self.db, "user-2", is_active=False)
        with self.assertRaises(Forbidden):
            create_session(self.db, inactive, TTL, now=NOW)

    def test_revoke(self):
        session = create_session(self.db, self.user, TTL, now=NOW)
        sid = session.sid
        revoke_session(self.db, sid)
        with self.assertRaises(Unauthenticated):
            resolve_session(self.db, sid, TTL, now=NOW)


class TouchLastActiveTest(IdentityTestCase):
    def test_updates_last_active(self):
        add_user(self.db, "user-1")
        touch_last_active(self.db, "user-1", now=NOW)
        self.db.expire_all()
        self.assertEqual(self.db.get(User, "user-1").last_active_at, NOW)

    def test_storage_failure_is_logged_not_raised(self):
        db = mock.Mock()
        db.execute.side_effect = OperationalError("UPDATE users", {}, Exception("database is locked"))

        with self.assertLogs("ranchbook.services.identity_service", level="WARNING"):
            touch_last_active(db, "user-1", now=NOW)
        db.rollback.assert_called_once_with()


class IdentityAssertionTest(unittest.TestCase):
    def setUp(self):
        self.settings = make_settings()

    def _token(self, claims, secret=IDENTITY_SECRET):
        base = {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}
        base.update(claims)
        return jwt.encode(base, secret, algorithm="HS256")

    def test_valid_assertion(self):
        token = self._token(
            {
                "sub": "sub-42",
                "email": "rider@ranch.test",
                "given_name": "Rider",
                "family_name": "Two",
                "picture": "https://img.test/r.png",
            }
        )
        assertion = verify_identity_assertion(token, self.settings)
        self.assertEqual(assertion.subject_id, "sub-42")
        self.assertEqual(assertion.email, "rider@ranch.test")
        self.assertEqual(assertion.avatar_url, "https://img.test/r.png")

    def test_missing_email(self):
        token = self._token({"sub": "sub-42"})
        with self.assertRaises(ValidationFailed):
            verify_identity_assertion(token, self.settings)

    def test_bad_signature(self):
        token = self._token({"sub": "sub-42", "email": "x@ranch.test"}, secret="some-other-secret-0123456789abcdef")
        with self.assertRaises(Unauthenticated):
            verify_identity_assertion(token, self.settings)

    def test_bearer_parsing(self):
        self.assertEqual(get_bearer_token("Bearer abc"), "abc")
        self.assertIsNone(get_bearer_token("Basic abc"))
        self.assertIsNone(get_bearer_token(None))


if __name__ == "__main__":
    unittest.main()

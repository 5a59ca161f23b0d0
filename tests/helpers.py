from datetime import timedelta

from ranchbook.config import Settings
from ranchbook.core.dates import utc_now
from ranchbook.database import build_engine, build_session_factory, create_schema
from ranchbook.models.session import UserSession
from ranchbook.models.user import User

IDENTITY_SECRET = "identity-test-secret-0123456789abcdef"


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "ENVIRONMENT": "local",
        "SESSION_SECRET": "session-test-secret",
        "IDENTITY_JWT_SECRET": IDENTITY_SECRET,
        "DEFAULT_ADMIN_EMAILS": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_session_factory():
    engine = build_engine("sqlite://")
    create_schema(engine)
    return build_session_factory(engine)


def add_user(db, user_id, role="partner", email=None, is_active=True) -> User:
    user = User(
        id=user_id,
        email=email or "{}@ranch.test".format(user_id),
        first_name=user_id.title(),
        last_name="Tester",
        role=role,
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    return user


def add_session(db, user_id, ttl_seconds=3600) -> str:
    now = utc_now()
    session = UserSession(
        sid="sid-{}".format(user_id),
        user_id=user_id,
        created_at=now,
        expires_at=now + timedelta(seconds=ttl_seconds),
    )
    db.add(session)
    db.commit()
    return session.sid

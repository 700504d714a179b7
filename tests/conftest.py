"""Pytest configuration and fixtures for subject-rights.

DB-dependent fixtures run against an in-memory SQLite database (aiosqlite)
created fresh for every test from Base.metadata. HTTP tests use
subject_rights.main:app with get_db / get_db_transactional overridden to
that database.
"""

import os

# Settings are validated on import of subject_rights.main; point them at SQLite.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SESSION_HANDLER", "database")

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from subject_rights.core.config import get_settings
from subject_rights.infrastructure.persistence.database import (
    Base,
    get_db,
    get_db_transactional,
)
from subject_rights.infrastructure.persistence.models import (
    Contact,
    Content,
    Field,
    FieldValue,
    Message,
    Permission,
    PrivacyRequest,
    Role,
    RolePermission,
    Session,
    User,
    UserNote,
    UserProfile,
    UserRole,
)
from subject_rights.main import app

# Privacy request ids seeded by the fixtures below
EXPORT_REQUEST_ID = 1
REMOVE_REQUEST_ID = 2
ADMIN_REQUEST_ID = 3
NO_ACCOUNT_REQUEST_ID = 4
NO_ACCOUNT_EXPORT_REQUEST_ID = 5
CONTACT_EXPORT_REQUEST_ID = 6


@pytest.fixture(autouse=True)
def _settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to a fresh in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Database session for repository/integration tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), backed by the test database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _user(user_id: int, name: str, username: str, **extra) -> User:
    return User(
        id=user_id,
        name=name,
        username=username,
        email=f"{username}@example.com",
        password="$2y$10$hashedpasswordvalue",
        otp_key="otp-secret",
        otep="otep-secret",
        register_date=datetime(2020, 1, 1, 9, 0, 0),
        **extra,
    )


async def seed_export_subject(session: AsyncSession) -> None:
    """Subject 42: 2 notes, 1 profile row, 3 custom fields, 0 contacts,
    1 content row with 2 custom fields, 5 messages (3 sent, 2 received).

    Rows belonging to subject 43 are added so filters are exercised.
    """
    session.add_all([_user(42, "Alice Example", "alice"), _user(43, "Bob Other", "bob")])
    session.add_all(
        [
            UserNote(id=1, user_id=42, subject="First note", body="Called in", created_user_id=1),
            UserNote(id=2, user_id=43, subject="Other note", body="Not Alice", created_user_id=1),
            UserNote(
                id=3,
                user_id=42,
                subject="Second note",
                body="Follow up",
                created_user_id=1,
                modified_user_id=5,
            ),
            UserProfile(user_id=42, profile_key="profile.city", profile_value="Leeds", ordering=1),
            UserProfile(user_id=43, profile_key="profile.city", profile_value="York", ordering=1),
        ]
    )
    # Messages inserted out of time order
    session.add_all(
        [
            Message(message_id=1, user_id_from=42, user_id_to=43, date_time=datetime(2024, 3, 5), subject="m3"),
            Message(message_id=2, user_id_from=43, user_id_to=42, date_time=datetime(2024, 3, 1), subject="m1"),
            Message(message_id=3, user_id_from=42, user_id_to=43, date_time=datetime(2024, 3, 9), subject="m5"),
            Message(message_id=4, user_id_from=43, user_id_to=44, date_time=datetime(2024, 3, 2), subject="other"),
            Message(message_id=5, user_id_from=42, user_id_to=43, date_time=datetime(2024, 3, 3), subject="m2"),
            Message(message_id=6, user_id_from=43, user_id_to=42, date_time=datetime(2024, 3, 7), subject="m4"),
        ]
    )
    session.add(Contact(id=10, name="Bob's card", user_id=43, ordering=1))
    session.add(Content(id=20, title="Alice's article", created_by=42, ordering=1, created=datetime(2024, 1, 1)))
    session.add(Content(id=21, title="Bob's article", created_by=43, ordering=1))
    session.add_all(
        [
            Field(id=1, context="com_users.user", name="nickname", title="Nickname", state=1, ordering=1),
            Field(id=2, context="com_users.user", name="hobbies", title="Hobbies", state=1, ordering=2),
            Field(
                id=3,
                context="com_users.user",
                name="newsletter",
                title="Newsletter",
                state=1,
                ordering=3,
                default_value="no",
            ),
            Field(id=4, context="com_users.user", name="retired", title="Retired", state=0, ordering=4),
            Field(id=5, context="com_content.article", name="source", title="Source", state=1, ordering=1),
            Field(id=6, context="com_content.article", name="rating", title="Rating", state=1, ordering=2),
            Field(id=7, context="com_contact.contact", name="fax", title="Fax", state=1, ordering=1),
        ]
    )
    session.add_all(
        [
            FieldValue(id=1, field_id=1, item_id="42", value="Ally"),
            FieldValue(id=2, field_id=2, item_id="42", value="chess"),
            FieldValue(id=3, field_id=2, item_id="42", value="climbing"),
            FieldValue(id=4, field_id=1, item_id="43", value="Bobby"),
            FieldValue(id=5, field_id=5, item_id="20", value="Original"),
            FieldValue(id=6, field_id=6, item_id="20", value="5"),
            FieldValue(id=7, field_id=7, item_id="10", value="0113 000"),
        ]
    )
    session.add(
        PrivacyRequest(id=EXPORT_REQUEST_ID, email="alice@example.com", request_type="export", status="confirmed", user_id=42)
    )
    await session.commit()


async def seed_erasure_subject(session: AsyncSession) -> None:
    """Subject 7 with 3 live sessions; subject 8 keeps its own session."""
    session.add_all([_user(7, "Grace Seven", "grace"), _user(8, "Henry Eight", "henry")])
    session.add_all(
        [
            Session(session_id="sess-7-a", userid=7, guest=False, username="grace"),
            Session(session_id="sess-7-b", userid=7, guest=False, username="grace"),
            Session(session_id="sess-7-c", userid=7, guest=False, username="grace"),
            Session(session_id="sess-8-a", userid=8, guest=False, username="henry"),
        ]
    )
    session.add_all(
        [
            PrivacyRequest(id=REMOVE_REQUEST_ID, email="grace@example.com", request_type="remove", status="confirmed", user_id=7),
            PrivacyRequest(id=NO_ACCOUNT_REQUEST_ID, email="guest@example.com", request_type="remove", status="confirmed", user_id=None),
            PrivacyRequest(id=NO_ACCOUNT_EXPORT_REQUEST_ID, email="guest@example.com", request_type="export", status="confirmed", user_id=None),
        ]
    )
    await session.commit()


async def seed_contact_subject(session: AsyncSession) -> None:
    """Subject 50 owns two contacts with their own field values; contact 13 is not theirs.

    Seeded on its own: the contact fields here are the only ones in the database.
    """
    session.add(_user(50, "Carol Contacts", "carol"))
    session.add_all(
        [
            Contact(id=12, name="Carol at home", user_id=50, ordering=2),
            Contact(id=11, name="Carol at work", user_id=50, ordering=1),
            Contact(id=13, name="Someone else", user_id=51, ordering=1),
        ]
    )
    session.add_all(
        [
            Field(id=8, context="com_contact.contact", name="fax", title="Fax", state=1, ordering=1),
            Field(
                id=9,
                context="com_contact.contact",
                name="department",
                title="Department",
                state=1,
                ordering=2,
                default_value="Unassigned",
            ),
        ]
    )
    session.add_all(
        [
            FieldValue(id=8, field_id=8, item_id="11", value="0113 111"),
            FieldValue(id=9, field_id=9, item_id="11", value="Sales"),
            FieldValue(id=10, field_id=8, item_id="12", value="0113 222"),
            FieldValue(id=11, field_id=8, item_id="13", value="0113 333"),
        ]
    )
    session.add(
        PrivacyRequest(id=CONTACT_EXPORT_REQUEST_ID, email="carol@example.com", request_type="export", status="confirmed", user_id=50)
    )
    await session.commit()


async def seed_admin_subject(session: AsyncSession) -> None:
    """Subject 1 holds core.admin through the super users role."""
    session.add(_user(1, "Super User", "admin"))
    session.add(Role(id="role-super", code="super_users", name="Super Users"))
    session.add(Permission(id="perm-admin", code="core.admin"))
    await session.flush()
    session.add(RolePermission(id="rp-1", role_id="role-super", permission_id="perm-admin"))
    session.add(UserRole(id="ur-1", user_id=1, role_id="role-super"))
    session.add(
        PrivacyRequest(id=ADMIN_REQUEST_ID, email="admin@example.com", request_type="remove", status="confirmed", user_id=1)
    )
    await session.commit()


@pytest.fixture
async def export_subject(db_session) -> int:
    await seed_export_subject(db_session)
    return 42


@pytest.fixture
async def erasure_subject(db_session) -> int:
    await seed_erasure_subject(db_session)
    return 7


@pytest.fixture
async def admin_subject(db_session) -> int:
    await seed_admin_subject(db_session)
    return 1


@pytest.fixture
async def contact_subject(db_session) -> int:
    await seed_contact_subject(db_session)
    return 50


@pytest.fixture
async def seeded_db(session_factory) -> async_sessionmaker[AsyncSession]:
    """All three scenarios seeded into the database behind the client fixture."""
    async with session_factory() as session:
        await seed_export_subject(session)
        await seed_erasure_subject(session)
        await seed_admin_subject(session)
    return session_factory

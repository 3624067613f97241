import os
from typing import Dict, List

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from clinicbook import models  # noqa: E402
from clinicbook.database import Base, get_db  # noqa: E402
from clinicbook.main import app  # noqa: E402
from clinicbook.notifications import get_booking_notifier  # noqa: E402
from clinicbook.security_utils import create_access_token  # noqa: E402


@pytest.fixture()
def engine():
    """
    Isolated in-memory SQLite engine shared by the test and the app.
    StaticPool keeps a single connection so every session sees the same data.
    """
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db(session_factory):
    with session_factory() as session:
        yield session


class RecordingNotifier:
    """Stands in for the email notifier and keeps every booking it was given"""

    def __init__(self):
        self.sent: List[dict] = []

    async def notify_booking(self, booking: dict) -> bool:
        self.sent.append(booking)
        return True


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def client(session_factory, notifier):
    """
    TestClient wired to the isolated engine and the recording notifier.
    """

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_booking_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(email: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(email)}"}


def add_user(session_factory, email: str, role=None, name=None) -> None:
    with session_factory() as session:
        session.add(models.User(email=email, role=role, name=name))
        session.commit()


def add_service(session_factory, name: str, slots: list) -> None:
    with session_factory() as session:
        session.add(models.Service(name=name, slots=slots))
        session.commit()


def add_booking(session_factory, **fields) -> int:
    with session_factory() as session:
        booking = models.Booking(**fields)
        session.add(booking)
        session.commit()
        return booking.id


@pytest.fixture()
def admin_email(session_factory) -> str:
    email = "admin@clinic.com"
    add_user(session_factory, email, role="admin", name="Admin")
    return email


def count_rows(session: Session, model) -> int:
    session.expire_all()
    return session.query(model).count()

import os

# Point the app at SQLite before any app module builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token, get_password_hash
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.hall import Hall
from app.models.movie import Movie
from app.models.movie_session import MovieSession
from app.models.user import User

SESSION_START = datetime(2030, 1, 1, 18, 0)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    """TestClient sharing the test's ORM session, so fixtures and requests see the same data."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def make_user(db, email="viewer@example.com", role="user", password="secret123"):
    user = User(
        email=email,
        full_name=email.split("@")[0].title(),
        password_hash=get_password_hash(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def make_hall(db, rows_count=5, seats_per_row=10, is_active=True, name="Hall 1"):
    hall = Hall(
        name=name,
        capacity=rows_count * seats_per_row,
        rows_count=rows_count,
        seats_per_row=seats_per_row,
        is_active=is_active,
    )
    db.add(hall)
    db.commit()
    db.refresh(hall)
    return hall


def make_movie(db, title="Interstellar", duration_minutes=120):
    movie = Movie(title=title, description="Space and time", duration_minutes=duration_minutes)
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie


def make_session(db, movie, hall, start_time=SESSION_START, price=Decimal("9.50")):
    from app.services.scheduling import compute_end_time

    session = MovieSession(
        movie_id=movie.id,
        hall_id=hall.id,
        start_time=start_time,
        end_time=compute_end_time(start_time, movie.duration_minutes),
        price=price,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def user(db):
    return make_user(db)


@pytest.fixture
def other_user(db):
    return make_user(db, email="other@example.com")


@pytest.fixture
def admin(db):
    return make_user(db, email="admin@example.com", role="admin")


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {create_access_token(admin.id)}"}


@pytest.fixture
def hall(db):
    """5 rows x 10 seats."""
    return make_hall(db)


@pytest.fixture
def movie(db):
    return make_movie(db)


@pytest.fixture
def movie_session(db, movie, hall):
    return make_session(db, movie, hall)

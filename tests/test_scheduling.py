from datetime import timedelta
from decimal import Decimal

import pytest

from app.core.exceptions import HallNotFound, HallUnavailable, MovieNotFound, SessionNotFound
from app.services.scheduling import SessionScheduler, compute_end_time
from tests.conftest import SESSION_START, make_hall, make_movie


@pytest.fixture
def scheduler(db):
    return SessionScheduler(db)


def test_compute_end_time_adds_duration():
    assert compute_end_time(SESSION_START, 95) == SESSION_START + timedelta(minutes=95)


def test_create_session_derives_end_time(scheduler, movie, hall):
    session = scheduler.create_session(movie.id, hall.id, SESSION_START, Decimal("12.00"))

    assert session.id is not None
    assert session.end_time == SESSION_START + timedelta(minutes=movie.duration_minutes)
    assert session.price == Decimal("12.00")


def test_overlapping_session_is_rejected(scheduler, movie, hall, movie_session):
    with pytest.raises(HallUnavailable):
        scheduler.create_session(movie.id, hall.id, SESSION_START + timedelta(hours=1), Decimal("9.00"))


def test_back_to_back_sessions_are_allowed(scheduler, movie, hall, movie_session):
    session = scheduler.create_session(movie.id, hall.id, movie_session.end_time, Decimal("9.00"))
    assert session.start_time == movie_session.end_time


def test_same_time_in_another_hall_is_allowed(db, scheduler, movie, movie_session):
    other_hall = make_hall(db, name="Hall 2")
    session = scheduler.create_session(movie.id, other_hall.id, SESSION_START, Decimal("9.00"))
    assert session.hall_id == other_hall.id


def test_inactive_hall_cannot_host_sessions(db, scheduler, movie):
    closed = make_hall(db, is_active=False, name="Closed")
    with pytest.raises(HallUnavailable):
        scheduler.create_session(movie.id, closed.id, SESSION_START, Decimal("9.00"))


def test_create_session_for_missing_movie_or_hall(scheduler, movie, hall):
    with pytest.raises(MovieNotFound):
        scheduler.create_session(999, hall.id, SESSION_START, Decimal("9.00"))
    with pytest.raises(HallNotFound):
        scheduler.create_session(movie.id, 999, SESSION_START, Decimal("9.00"))


def test_update_session_does_not_collide_with_itself(scheduler, movie_session):
    new_start = SESSION_START + timedelta(minutes=30)
    session = scheduler.update_session(movie_session.id, start_time=new_start)

    assert session.start_time == new_start
    assert session.end_time == new_start + timedelta(minutes=120)


def test_update_session_recomputes_end_time_for_new_movie(db, scheduler, movie_session):
    short = make_movie(db, title="Short", duration_minutes=30)
    session = scheduler.update_session(movie_session.id, movie_id=short.id)
    assert session.end_time == SESSION_START + timedelta(minutes=30)


def test_update_session_into_busy_slot(scheduler, movie, hall, movie_session):
    later = scheduler.create_session(movie.id, hall.id, movie_session.end_time, Decimal("9.00"))
    with pytest.raises(HallUnavailable):
        scheduler.update_session(later.id, start_time=SESSION_START)


def test_delete_session(scheduler, movie_session):
    scheduler.delete_session(movie_session.id)
    with pytest.raises(SessionNotFound):
        scheduler.delete_session(movie_session.id)

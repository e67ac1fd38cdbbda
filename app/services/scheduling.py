import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from app.core.exceptions import HallNotFound, HallUnavailable, MovieNotFound, SessionNotFound
from app.models.hall import Hall
from app.models.movie import Movie
from app.models.movie_session import MovieSession
from app.repositories.session_repository import SessionRepository

logger = logging.getLogger(__name__)


def compute_end_time(start_time: datetime, duration_minutes: int) -> datetime:
    return start_time + timedelta(minutes=duration_minutes)


class SessionScheduler:
    """Creates and reschedules sessions, keeping halls free of overlaps."""

    def __init__(self, db: Session):
        self.db = db
        self.sessions = SessionRepository(db)

    def _load_movie(self, movie_id: int) -> Movie:
        movie = self.db.query(Movie).filter(Movie.id == movie_id).first()
        if not movie:
            raise MovieNotFound(f"Movie not found with id: {movie_id}")
        return movie

    def _load_active_hall(self, hall_id: int) -> Hall:
        hall = self.sessions.get_hall(hall_id)
        if not hall:
            raise HallNotFound(f"Hall not found with id: {hall_id}")
        if not hall.is_active:
            raise HallUnavailable(f"Hall '{hall.name}' is inactive and cannot host sessions")
        return hall

    def _ensure_hall_free(
        self,
        hall: Hall,
        start_time: datetime,
        end_time: datetime,
        exclude_session_id: Optional[int] = None,
    ) -> None:
        if not self.sessions.is_hall_available(hall.id, start_time, end_time, exclude_session_id):
            logger.warning(
                "Hall %s is busy between %s and %s", hall.id, start_time, end_time
            )
            raise HallUnavailable("Hall is not available at the selected time")

    def create_session(
        self,
        movie_id: int,
        hall_id: int,
        start_time: datetime,
        price: Decimal,
    ) -> MovieSession:
        logger.info("Adding new session for movie %s in hall %s", movie_id, hall_id)
        movie = self._load_movie(movie_id)
        hall = self._load_active_hall(hall_id)

        end_time = compute_end_time(start_time, movie.duration_minutes)
        self._ensure_hall_free(hall, start_time, end_time)

        session = MovieSession(
            movie_id=movie.id,
            hall_id=hall.id,
            start_time=start_time,
            end_time=end_time,
            price=price,
        )
        self.db.add(session)
        self.db.commit()
        self.db.refresh(session)
        return session

    def update_session(self, session_id: int, **updates) -> MovieSession:
        """Apply partial updates. End time is recomputed from the (possibly new) movie."""
        session = self.sessions.get_session(session_id)
        if not session:
            raise SessionNotFound(f"Session not found, ID: {session_id}")

        logger.info("Updating session %s", session_id)
        movie = self._load_movie(updates.get("movie_id", session.movie_id))
        hall_id = updates.get("hall_id", session.hall_id)
        hall = self._load_active_hall(hall_id) if hall_id != session.hall_id else session.hall
        if hall is None:
            raise HallNotFound(f"Hall not found with id: {hall_id}")

        start_time = updates.get("start_time", session.start_time)
        end_time = compute_end_time(start_time, movie.duration_minutes)
        self._ensure_hall_free(hall, start_time, end_time, exclude_session_id=session.id)

        session.movie_id = movie.id
        session.hall_id = hall.id
        session.start_time = start_time
        session.end_time = end_time
        if updates.get("price") is not None:
            session.price = updates["price"]

        self.db.commit()
        self.db.refresh(session)
        return session

    def delete_session(self, session_id: int) -> None:
        session = self.sessions.get_session(session_id)
        if not session:
            raise SessionNotFound(f"Session not found, ID: {session_id}")

        logger.info("Deleting session %s", session_id)
        self.db.delete(session)
        self.db.commit()

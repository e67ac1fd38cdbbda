from datetime import date, datetime, time
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.models.hall import Hall
from app.models.movie import Movie, Genre
from app.models.movie_session import MovieSession


class SessionRepository:
    """Session and hall store backed by the ORM session."""

    def __init__(self, db: Session):
        self.db = db

    def get_session(self, session_id: int) -> Optional[MovieSession]:
        return (
            self.db.query(MovieSession)
            .options(joinedload(MovieSession.movie), joinedload(MovieSession.hall))
            .filter(MovieSession.id == session_id)
            .first()
        )

    def get_hall(self, hall_id: int) -> Optional[Hall]:
        return self.db.query(Hall).filter(Hall.id == hall_id).first()

    def get_hall_for_session(self, session_id: int) -> Optional[Hall]:
        return (
            self.db.query(Hall)
            .join(MovieSession, MovieSession.hall_id == Hall.id)
            .filter(MovieSession.id == session_id)
            .first()
        )

    def is_hall_available(
        self,
        hall_id: int,
        start_time: datetime,
        end_time: datetime,
        exclude_session_id: Optional[int] = None,
    ) -> bool:
        """True when no session in the hall overlaps ``[start_time, end_time)``."""
        filters = [
            MovieSession.hall_id == hall_id,
            MovieSession.start_time < end_time,
            MovieSession.end_time > start_time,
        ]
        if exclude_session_id is not None:
            filters.append(MovieSession.id != exclude_session_id)

        return self.db.query(MovieSession.id).filter(*filters).first() is None

    def filter_sessions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        genre_id: Optional[int] = None,
    ) -> List[MovieSession]:
        query = self.db.query(MovieSession).options(
            joinedload(MovieSession.movie),
            joinedload(MovieSession.hall),
        )
        if start_date:
            query = query.filter(MovieSession.start_time >= datetime.combine(start_date, time.min))
        if end_date:
            query = query.filter(MovieSession.end_time <= datetime.combine(end_date, time.max))
        if genre_id:
            query = query.filter(MovieSession.movie.has(Movie.genres.any(Genre.id == genre_id)))

        return query.order_by(MovieSession.start_time).all()

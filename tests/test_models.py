from sqlalchemy.orm import configure_mappers

from app.db.base import Base
from app.models.ticket import Ticket


def test_orm_mappings_are_valid():
    configure_mappers()


def test_expected_tables_are_registered():
    assert {"users", "halls", "movies", "genres", "movie_genres", "actors", "movie_actors", "sessions", "tickets"} <= set(
        Base.metadata.tables
    )


def test_booked_seat_index_is_partial_and_unique():
    index = next(ix for ix in Ticket.__table__.indexes if ix.name == "uq_tickets_session_seat_booked")
    assert index.unique
    assert [c.name for c in index.columns] == ["session_id", "row_number", "seat_number"]
    assert index.dialect_options["postgresql"]["where"] is not None
    assert index.dialect_options["sqlite"]["where"] is not None

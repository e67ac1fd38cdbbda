from sqlalchemy import Column, String, Integer, Date, Text, DECIMAL, ForeignKey, Table
from sqlalchemy.orm import relationship
from app.db.session import Base

movie_genres = Table(
    "movie_genres",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)

movie_actors = Table(
    "movie_actors",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("actor_id", Integer, ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True),
)

class Genre(Base):
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)

    movies = relationship("Movie", secondary=movie_genres, back_populates="genres")

class Actor(Base):
    __tablename__ = "actors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    bio = Column(Text, nullable=True)
    photo_url = Column(Text, nullable=True)

    movies = relationship("Movie", secondary=movie_actors, back_populates="actors")

class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=True)
    duration_minutes = Column(Integer, nullable=False)
    release_date = Column(Date, nullable=True)
    trailer_url = Column(Text, nullable=True)
    poster_url = Column(Text, nullable=True)
    rating = Column(DECIMAL(3, 1), default=0.0)

    # Relationships
    genres = relationship("Genre", secondary=movie_genres, back_populates="movies")
    actors = relationship("Actor", secondary=movie_actors, back_populates="movies")
    sessions = relationship("MovieSession", back_populates="movie", cascade="all, delete-orphan")

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.movie import Movie, Genre, Actor
from app.schemas.movie import (
    MovieCreate,
    MovieUpdate,
    Movie as MovieSchema,
    GenreCreate,
    Genre as GenreSchema,
)

router = APIRouter(prefix="/admin/movies", tags=["Admin - Movies"])
genre_router = APIRouter(prefix="/admin/genres", tags=["Admin - Movies"])

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_genres(db: Session, genre_ids: List[int]) -> List[Genre]:
    if not genre_ids:
        return []
    genres = db.query(Genre).filter(Genre.id.in_(genre_ids)).all()
    if len(genres) != len(set(genre_ids)):
        raise HTTPException(status_code=404, detail="One or more genres not found")
    return genres


def _load_actors(db: Session, actor_ids: List[int]) -> List[Actor]:
    if not actor_ids:
        return []
    actors = db.query(Actor).filter(Actor.id.in_(actor_ids)).all()
    if len(actors) != len(set(actor_ids)):
        raise HTTPException(status_code=404, detail="One or more actors not found")
    return actors


# ---------------------------------------------------------------------------
# Movie CRUD
# ---------------------------------------------------------------------------


@router.post("/", response_model=MovieSchema, status_code=status.HTTP_201_CREATED)
def create_movie(
    data: MovieCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = Movie(**data.model_dump(exclude={"genre_ids", "actor_ids"}))
    movie.genres = _load_genres(db, data.genre_ids)
    movie.actors = _load_actors(db, data.actor_ids)
    db.add(movie)
    db.commit()
    db.refresh(movie)
    logger.info("Movie %s created: %s", movie.id, movie.title)
    return movie


@router.patch("/{id}", response_model=MovieSchema)
def update_movie(
    id: int,
    data: MovieUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = db.query(Movie).filter(Movie.id == id).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")

    updates = data.model_dump(exclude_unset=True)
    genre_ids = updates.pop("genre_ids", None)
    actor_ids = updates.pop("actor_ids", None)
    for field, value in updates.items():
        setattr(movie, field, value)
    if genre_ids is not None:
        movie.genres = _load_genres(db, genre_ids)
    if actor_ids is not None:
        movie.actors = _load_actors(db, actor_ids)

    # Existing sessions keep their end time until they are rescheduled
    db.commit()
    db.refresh(movie)
    return movie


@router.delete("/{id}", status_code=status.HTTP_200_OK)
def delete_movie(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    movie = db.query(Movie).filter(Movie.id == id).first()
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")

    # Sessions and their tickets cascade-delete via the ORM relationship
    db.delete(movie)
    db.commit()
    logger.info("Movie %s deleted", id)
    return {"id": id, "deleted": True}


# ---------------------------------------------------------------------------
# Genres
# ---------------------------------------------------------------------------


@genre_router.post("/", response_model=GenreSchema, status_code=status.HTTP_201_CREATED)
def create_genre(
    data: GenreCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    if db.query(Genre).filter(Genre.name == data.name).first():
        raise HTTPException(status_code=400, detail="Genre already exists")
    genre = Genre(name=data.name)
    db.add(genre)
    db.commit()
    db.refresh(genre)
    return genre


@genre_router.delete("/{id}", status_code=status.HTTP_200_OK)
def delete_genre(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    genre = db.query(Genre).filter(Genre.id == id).first()
    if not genre:
        raise HTTPException(status_code=404, detail="Genre not found")
    db.delete(genre)
    db.commit()
    return {"id": id, "deleted": True}

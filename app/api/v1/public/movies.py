from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session, selectinload

from app.db.session import get_db
from app.models.movie import Movie, Genre, Actor
from app.schemas.movie import Movie as MovieSchema, Genre as GenreSchema
from app.schemas.common import PaginatedResponse, total_pages

router = APIRouter(prefix="/movies", tags=["Movies"])
genres_router = APIRouter(prefix="/genres", tags=["Movies"])


@router.get("/", response_model=PaginatedResponse[MovieSchema])
def list_movies(
    q: Optional[str] = Query(None, description="Search by title"),
    genre_id: Optional[int] = Query(None),
    actor_id: Optional[int] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    query = db.query(Movie).options(selectinload(Movie.genres), selectinload(Movie.actors))
    if q:
        query = query.filter(Movie.title.ilike(f"%{q}%"))
    if genre_id:
        query = query.filter(Movie.genres.any(Genre.id == genre_id))
    if actor_id:
        query = query.filter(Movie.actors.any(Actor.id == actor_id))

    total = query.count()
    movies = query.order_by(Movie.title).offset((page - 1) * limit).limit(limit).all()

    return PaginatedResponse(
        data=[MovieSchema.model_validate(m) for m in movies],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
    )


@router.get("/{movie_id}", response_model=MovieSchema)
def get_movie(movie_id: int, db: Session = Depends(get_db)):
    movie = (
        db.query(Movie)
        .options(selectinload(Movie.genres), selectinload(Movie.actors))
        .filter(Movie.id == movie_id)
        .first()
    )
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie


@genres_router.get("/", response_model=List[GenreSchema])
def list_genres(db: Session = Depends(get_db)):
    return db.query(Genre).order_by(Genre.name).all()

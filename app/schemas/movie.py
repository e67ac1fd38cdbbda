from typing import Optional, List
from pydantic import BaseModel, Field
from decimal import Decimal
from datetime import date


# Genre Schemas
class GenreCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)


class Genre(GenreCreate):
    id: int

    class Config:
        from_attributes = True


# Actor Schemas
class ActorBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=2000)
    photo_url: Optional[str] = None


class ActorCreate(ActorBase):
    pass


class ActorUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=2000)
    photo_url: Optional[str] = None


class Actor(ActorBase):
    id: int

    class Config:
        from_attributes = True


# Movie Schemas
class MovieBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    duration_minutes: int = Field(gt=0)
    release_date: Optional[date] = None
    trailer_url: Optional[str] = None
    poster_url: Optional[str] = None
    rating: Decimal = Field(default=Decimal("0.0"), ge=0, le=10)


class MovieCreate(MovieBase):
    genre_ids: List[int] = []
    actor_ids: List[int] = []


class MovieUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)
    release_date: Optional[date] = None
    trailer_url: Optional[str] = None
    poster_url: Optional[str] = None
    rating: Optional[Decimal] = Field(default=None, ge=0, le=10)
    genre_ids: Optional[List[int]] = None
    actor_ids: Optional[List[int]] = None


class Movie(MovieBase):
    id: int
    genres: List[Genre] = []
    actors: List[Actor] = []

    class Config:
        from_attributes = True


# Compact movie for nested responses (session, ticket, actor)
class MovieSummary(BaseModel):
    id: int
    title: str
    duration_minutes: int
    poster_url: Optional[str] = None

    class Config:
        from_attributes = True


# Actor with filmography (GET /actors/{id})
class ActorDetail(Actor):
    movies: List[MovieSummary] = []

    class Config:
        from_attributes = True

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session, selectinload

from app.db.session import get_db
from app.models.movie import Actor
from app.schemas.movie import Actor as ActorSchema, ActorDetail
from app.schemas.common import PaginatedResponse, total_pages

router = APIRouter(prefix="/actors", tags=["Actors"])


@router.get("/", response_model=PaginatedResponse[ActorSchema])
def list_actors(
    q: Optional[str] = Query(None, description="Search by name"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
):
    query = db.query(Actor)
    if q:
        query = query.filter(Actor.name.ilike(f"%{q}%"))

    total = query.count()
    actors = query.order_by(Actor.name).offset((page - 1) * limit).limit(limit).all()

    return PaginatedResponse(
        data=[ActorSchema.model_validate(a) for a in actors],
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages(total, limit),
    )


@router.get("/{actor_id}", response_model=ActorDetail)
def get_actor(actor_id: int, db: Session = Depends(get_db)):
    """Actor details with the movies they appear in."""
    actor = (
        db.query(Actor)
        .options(selectinload(Actor.movies))
        .filter(Actor.id == actor_id)
        .first()
    )
    if not actor:
        raise HTTPException(status_code=404, detail="Actor not found")
    return actor

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.movie import Actor
from app.schemas.movie import ActorCreate, ActorUpdate, Actor as ActorSchema

router = APIRouter(prefix="/admin/actors", tags=["Admin - Actors"])

logger = logging.getLogger(__name__)


@router.post("/", response_model=ActorSchema, status_code=status.HTTP_201_CREATED)
def create_actor(
    data: ActorCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    actor = Actor(**data.model_dump())
    db.add(actor)
    db.commit()
    db.refresh(actor)
    logger.info("Actor %s created: %s", actor.id, actor.name)
    return actor


@router.patch("/{id}", response_model=ActorSchema)
def update_actor(
    id: int,
    data: ActorUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    actor = db.query(Actor).filter(Actor.id == id).first()
    if not actor:
        raise HTTPException(status_code=404, detail="Actor not found")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(actor, field, value)

    db.commit()
    db.refresh(actor)
    return actor


@router.delete("/{id}", status_code=status.HTTP_200_OK)
def delete_actor(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    actor = db.query(Actor).filter(Actor.id == id).first()
    if not actor:
        raise HTTPException(status_code=404, detail="Actor not found")

    # Cast links are removed with the actor; the movies stay
    db.delete(actor)
    db.commit()
    logger.info("Actor %s deleted", id)
    return {"id": id, "deleted": True}

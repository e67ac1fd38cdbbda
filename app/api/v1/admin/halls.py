import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_current_admin_user
from app.models.user import User
from app.models.hall import Hall
from app.models.movie_session import MovieSession
from app.schemas.hall import HallCreate, HallUpdate, Hall as HallSchema

router = APIRouter(prefix="/admin/halls", tags=["Admin - Halls"])

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Hall CRUD
# ---------------------------------------------------------------------------


@router.post("/", response_model=HallSchema, status_code=status.HTTP_201_CREATED)
def create_hall(
    data: HallCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    hall = Hall(**data.model_dump())
    db.add(hall)
    db.commit()
    db.refresh(hall)
    logger.info("Hall %s created (%d x %d)", hall.id, hall.rows_count, hall.seats_per_row)
    return hall


@router.get("/", response_model=List[HallSchema])
def list_halls(
    active_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    query = db.query(Hall)
    if active_only:
        query = query.filter(Hall.is_active == True)
    return query.order_by(Hall.name).all()


@router.get("/{id}", response_model=HallSchema)
def get_hall(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    hall = db.query(Hall).filter(Hall.id == id).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")
    return hall


@router.patch("/{id}", response_model=HallSchema)
def update_hall(
    id: int,
    data: HallUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    hall = db.query(Hall).filter(Hall.id == id).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")

    updates = data.model_dump(exclude_unset=True)
    for field, value in updates.items():
        setattr(hall, field, value)

    # Keep capacity in step with the grid unless it was set explicitly
    if ("rows_count" in updates or "seats_per_row" in updates) and "capacity" not in updates:
        hall.capacity = hall.rows_count * hall.seats_per_row

    db.commit()
    db.refresh(hall)
    logger.info("Hall %s updated", id)
    return hall


@router.delete("/{id}", status_code=status.HTTP_200_OK)
def delete_hall(
    id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    hall = db.query(Hall).filter(Hall.id == id).first()
    if not hall:
        raise HTTPException(status_code=404, detail="Hall not found")

    has_sessions = db.query(MovieSession.id).filter(MovieSession.hall_id == id).first()
    if has_sessions:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Hall has scheduled sessions; deactivate it instead",
        )

    db.delete(hall)
    db.commit()
    logger.info("Hall %s deleted", id)
    return {"id": id, "deleted": True}

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_admin_user, get_session_scheduler
from app.models.user import User
from app.services.scheduling import SessionScheduler
from app.schemas.movie_session import (
    MovieSessionCreate,
    MovieSessionUpdate,
    MovieSession as MovieSessionSchema,
)

router = APIRouter(prefix="/admin/sessions", tags=["Admin - Sessions"])


@router.post("/", response_model=MovieSessionSchema, status_code=status.HTTP_201_CREATED)
def create_session(
    data: MovieSessionCreate,
    scheduler: SessionScheduler = Depends(get_session_scheduler),
    current_user: User = Depends(get_current_admin_user),
):
    """
    Schedule a movie in a hall.
    - `end_time` is computed from the movie duration.
    - Rejected with 409 if the hall is inactive or already busy in that window.
    """
    return scheduler.create_session(
        movie_id=data.movie_id,
        hall_id=data.hall_id,
        start_time=data.start_time,
        price=data.price,
    )


@router.patch("/{id}", response_model=MovieSessionSchema)
def update_session(
    id: int,
    data: MovieSessionUpdate,
    scheduler: SessionScheduler = Depends(get_session_scheduler),
    current_user: User = Depends(get_current_admin_user),
):
    return scheduler.update_session(id, **data.model_dump(exclude_unset=True))


@router.delete("/{id}", status_code=status.HTTP_200_OK)
def delete_session(
    id: int,
    scheduler: SessionScheduler = Depends(get_session_scheduler),
    current_user: User = Depends(get_current_admin_user),
):
    scheduler.delete_session(id)
    return {"id": id, "deleted": True}

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User
from app.repositories.session_repository import SessionRepository
from app.repositories.ticket_repository import TicketRepository
from app.services.availability import BookingAvailabilityChecker
from app.services.booking import TicketBookingWorkflow
from app.services.scheduling import SessionScheduler

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    user_id = decode_access_token(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is inactive")
    return user


def get_current_admin_user(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return current_user


# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_availability_checker(db: Session = Depends(get_db)) -> BookingAvailabilityChecker:
    return BookingAvailabilityChecker(TicketRepository(db))


def get_booking_workflow(db: Session = Depends(get_db)) -> TicketBookingWorkflow:
    return TicketBookingWorkflow(SessionRepository(db), TicketRepository(db))


def get_session_scheduler(db: Session = Depends(get_db)) -> SessionScheduler:
    return SessionScheduler(db)

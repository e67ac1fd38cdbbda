import enum
from sqlalchemy import Column, Integer, DateTime, Enum, ForeignKey, Index, text
from sqlalchemy.orm import relationship
from app.db.session import Base

class TicketStatus(str, enum.Enum):
    booked = "Booked"
    pending = "Pending"
    cancelled = "Cancelled"

class Ticket(Base):
    __tablename__ = "tickets"
    __table_args__ = (
        # One active booking per seat and session
        Index(
            "uq_tickets_session_seat_booked",
            "session_id",
            "row_number",
            "seat_number",
            unique=True,
            postgresql_where=text("status = 'Booked'"),
            sqlite_where=text("status = 'Booked'"),
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(Integer, ForeignKey("sessions.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    row_number = Column(Integer, nullable=False)
    seat_number = Column(Integer, nullable=False)
    booking_time = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        Enum(
            TicketStatus,
            name="ticket_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=TicketStatus.pending,
        index=True,
    )

    session = relationship("MovieSession", back_populates="tickets")
    user = relationship("User", back_populates="tickets")

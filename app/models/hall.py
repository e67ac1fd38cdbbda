from sqlalchemy import Column, String, Boolean, Integer, Text, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.session import Base

class Hall(Base):
    __tablename__ = "halls"
    __table_args__ = (
        CheckConstraint("rows_count >= 1", name="ck_halls_rows_count_positive"),
        CheckConstraint("seats_per_row >= 1", name="ck_halls_seats_per_row_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    capacity = Column(Integer, nullable=False)
    rows_count = Column(Integer, nullable=False)
    seats_per_row = Column(Integer, nullable=False)
    is_active = Column(Boolean, default=True)

    # Hall is referenced by sessions, never owned by them
    sessions = relationship("MovieSession", back_populates="hall")

    @property
    def can_book_seats(self) -> bool:
        return bool(self.is_active)

from typing import Optional
from pydantic import BaseModel, Field, model_validator


# Hall Schemas
class HallBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    rows_count: int = Field(gt=0)
    seats_per_row: int = Field(gt=0)


class HallCreate(HallBase):
    capacity: Optional[int] = Field(default=None, gt=0)  # defaults to rows_count * seats_per_row
    is_active: bool = True

    @model_validator(mode="after")
    def default_capacity(self):
        if self.capacity is None:
            self.capacity = self.rows_count * self.seats_per_row
        return self


class HallUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    rows_count: Optional[int] = Field(default=None, gt=0)
    seats_per_row: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None


class Hall(HallBase):
    id: int
    capacity: int
    is_active: bool

    class Config:
        from_attributes = True


# Compact hall for nested responses (session, seat map)
class HallSummary(BaseModel):
    id: int
    name: str
    rows_count: int
    seats_per_row: int

    class Config:
        from_attributes = True

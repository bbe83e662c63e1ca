"""School class schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ClassCreate(BaseModel):
    """Create a class."""

    name: str = Field(..., min_length=1, max_length=255)
    day: str | None = Field(None, max_length=20)
    time: str | None = Field(None, max_length=20)
    students: int = Field(0, ge=0)
    room: str | None = Field(None, max_length=50)
    teacher: str | None = Field(None, max_length=255)


class ClassUpdate(BaseModel):
    """Update a class."""

    name: str | None = Field(None, min_length=1, max_length=255)
    day: str | None = Field(None, max_length=20)
    time: str | None = Field(None, max_length=20)
    students: int | None = Field(None, ge=0)
    room: str | None = Field(None, max_length=50)
    teacher: str | None = Field(None, max_length=255)


class ClassResponse(BaseModel):
    """Class response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    day: str | None
    time: str | None
    students: int
    room: str | None
    teacher: str | None
    created_at: datetime

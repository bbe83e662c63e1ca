"""Class API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodtech.api.dependencies import get_current_teacher, get_current_user
from foodtech.database import get_db
from foodtech.models.school_class import SchoolClass
from foodtech.models.user import User
from foodtech.schemas.school_class import ClassCreate, ClassResponse, ClassUpdate

router = APIRouter(prefix="/api/v1/classes", tags=["classes"])


def get_class_or_404(db: Session, class_id: int) -> SchoolClass:
    school_class = db.query(SchoolClass).filter(SchoolClass.id == class_id).first()
    if not school_class:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    return school_class


@router.get("", response_model=list[ClassResponse])
def list_classes(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List all classes."""
    return db.query(SchoolClass).order_by(SchoolClass.name).all()


@router.post("", response_model=ClassResponse, status_code=status.HTTP_201_CREATED)
def create_class(
    class_data: ClassCreate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a class."""
    school_class = SchoolClass(**class_data.model_dump())
    db.add(school_class)
    db.commit()
    db.refresh(school_class)
    return school_class


@router.get("/{class_id}", response_model=ClassResponse)
def get_class(
    class_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific class."""
    return get_class_or_404(db, class_id)


@router.put("/{class_id}", response_model=ClassResponse)
def update_class(
    class_id: int,
    class_data: ClassUpdate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a class."""
    school_class = get_class_or_404(db, class_id)
    for field, value in class_data.model_dump(exclude_unset=True).items():
        setattr(school_class, field, value)
    db.commit()
    db.refresh(school_class)
    return school_class


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_class(
    class_id: int,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a class that has no orders."""
    school_class = get_class_or_404(db, class_id)
    if school_class.orders:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Class has orders and cannot be deleted",
        )
    for member in school_class.members:
        member.class_id = None
    db.delete(school_class)
    db.commit()

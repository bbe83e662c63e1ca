"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodtech.api.dependencies import get_current_teacher, get_current_user
from foodtech.database import get_db
from foodtech.models.enums import UserRole
from foodtech.models.school_class import SchoolClass
from foodtech.models.user import User
from foodtech.schemas.auth import (
    AuthResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserRoleUpdate,
)
from foodtech.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_user_by_email,
)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new student account.

    Teachers are promoted by an existing teacher via the role endpoint.
    """
    # Check if user already exists
    existing_user = get_user_by_email(db, user_data.email)
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    if user_data.class_id is not None:
        if not db.query(SchoolClass).filter(SchoolClass.id == user_data.class_id).first():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Class not found",
            )

    user = create_user(
        db,
        user_data.email,
        user_data.password,
        user_data.name,
        class_id=user_data.class_id,
    )

    return AuthResponse(
        access_token=create_access_token(user),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AuthResponse(
        access_token=create_access_token(user),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.put("/users/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: int,
    role_data: UserRoleUpdate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Promote a user to teacher or move them back to student."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    user.role = role_data.role
    if role_data.role == UserRole.TEACHER:
        user.class_id = None
    db.commit()
    db.refresh(user)
    return user

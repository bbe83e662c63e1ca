"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from foodtech.database import get_db
from foodtech.models.user import User
from foodtech.services.auth import decode_access_token
from foodtech.services.notification_service import NotificationService
from foodtech.services.order_service import OrderService
from foodtech.services.shopping_service import ShoppingService

security = HTTPBearer()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    token = credentials.credentials
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


def get_current_teacher(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Require the current user to be a teacher."""
    if not current_user.is_teacher:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only teachers can perform this action",
        )
    return current_user


def get_shopping_service(
    db: Annotated[Session, Depends(get_db)],
) -> ShoppingService:
    """Get shopping service with dependencies."""
    return ShoppingService(db)


def get_order_service(
    db: Annotated[Session, Depends(get_db)],
) -> OrderService:
    """Get order service with dependencies."""
    return OrderService(db)


def get_notification_service(
    db: Annotated[Session, Depends(get_db)],
) -> NotificationService:
    """Get notification service with dependencies."""
    return NotificationService(db)

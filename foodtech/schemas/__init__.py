"""Pydantic schemas for API requests and responses."""

from foodtech.schemas.auth import (
    AuthResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserRoleUpdate,
)
from foodtech.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)
from foodtech.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate
from foodtech.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate
from foodtech.schemas.school_class import ClassCreate, ClassResponse, ClassUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "UserRoleUpdate",
    "AuthResponse",
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryItemResponse",
    "ClassCreate",
    "ClassUpdate",
    "ClassResponse",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderResponse",
]

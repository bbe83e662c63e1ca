"""SQLAlchemy models."""

from foodtech.models.inventory import InventoryItem
from foodtech.models.notification import Notification
from foodtech.models.order import Order
from foodtech.models.recipe import Recipe, RecipeIngredient
from foodtech.models.school_class import SchoolClass
from foodtech.models.shopping_list_snapshot import ShoppingListSnapshot
from foodtech.models.user import User

__all__ = [
    "User",
    "SchoolClass",
    "Recipe",
    "RecipeIngredient",
    "InventoryItem",
    "Order",
    "ShoppingListSnapshot",
    "Notification",
]

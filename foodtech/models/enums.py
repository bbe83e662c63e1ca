"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Roles a user can hold."""

    TEACHER = "teacher"
    STUDENT = "student"


class OrderStatus(str, Enum):
    """Lifecycle states of a student order."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PREPARED = "prepared"
    COLLECTED = "collected"

    def can_transition_to(self, target: "OrderStatus") -> bool:
        """Check if a teacher may move an order from this status to ``target``."""
        return target in ORDER_TRANSITIONS[self]


ORDER_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.APPROVED, OrderStatus.REJECTED}),
    OrderStatus.APPROVED: frozenset({OrderStatus.PREPARED, OrderStatus.REJECTED}),
    OrderStatus.PREPARED: frozenset({OrderStatus.COLLECTED}),
    OrderStatus.REJECTED: frozenset(),
    OrderStatus.COLLECTED: frozenset(),
}

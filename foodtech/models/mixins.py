"""Column mixins shared by the models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """created_at / updated_at, filled in by the database."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Rows that stay in place after deletion because other rows point at them.

    Orders keep ``recipe_id`` after a recipe is withdrawn, so recipes are
    hidden instead of removed.
    """

    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @classmethod
    def not_deleted(cls):
        """Filter clause for rows that have not been deleted."""
        return cls.deleted_at.is_(None)

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(UTC)

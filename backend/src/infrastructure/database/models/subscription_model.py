"""Subscription SQLAlchemy model."""

from datetime import datetime
from uuid import uuid4
from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class SubscriptionModel(Base):
    """SQLAlchemy model for subscriptions."""
    
    __tablename__ = "subscriptions"
    
    # Primary key
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4())
    )
    
    # References
    application_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    plan_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    api_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    
    # Subscription data
    status: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    subscribed_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    request: Mapped[str | None] = mapped_column(Text, nullable=True)
    
    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )
    processed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    closed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    
    def __repr__(self) -> str:
        return f"<SubscriptionModel(id={self.id}, status={self.status})>"

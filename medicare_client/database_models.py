"""SQLAlchemy models for durable client storage."""
from datetime import datetime, UTC

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utc_now():
    """Get current UTC timestamp."""
    return datetime.now(UTC)


class StorageItem(Base):
    """Key/value row surviving process restarts (token, role, user)."""
    __tablename__ = "storage_items"

    key = Column(String(100), primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self):
        return f"<StorageItem(key={self.key})>"

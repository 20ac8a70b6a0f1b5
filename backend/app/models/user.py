"""
User table
"""
from datetime import datetime
from typing import List, TYPE_CHECKING
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base

if TYPE_CHECKING:
    from app.models.wishlist import WishlistRecord


class UserRecord(Base):
    """Wishlist owner"""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    email: Mapped[str] = mapped_column(String(255), index=True)
    name: Mapped[str] = mapped_column(String(100))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    # Relationships
    wishlists: Mapped[List["WishlistRecord"]] = relationship(
        "WishlistRecord",
        back_populates="user",
        cascade="all, delete-orphan"
    )

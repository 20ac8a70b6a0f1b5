"""
Wishlist and wishlist item tables
"""
from datetime import datetime
from decimal import Decimal
from typing import List, TYPE_CHECKING
from sqlalchemy import String, Text, Boolean, DateTime, Numeric, Integer, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base

if TYPE_CHECKING:
    from app.models.user import UserRecord


class WishlistRecord(Base):
    """A user's named wishlist"""
    __tablename__ = "wishlists"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # Foreign key
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)

    name: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text, default="")
    is_default: Mapped[bool] = mapped_column(Boolean, default=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    # Relationships
    user: Mapped["UserRecord"] = relationship("UserRecord", back_populates="wishlists")
    items: Mapped[List["WishlistItemRecord"]] = relationship(
        "WishlistItemRecord",
        back_populates="wishlist",
        cascade="all, delete-orphan",
        order_by="WishlistItemRecord.position",
    )

    __table_args__ = (
        Index("ix_wishlists_user_name", "user_id", "name"),
    )


class WishlistItemRecord(Base):
    """A product entry inside a wishlist"""
    __tablename__ = "wishlist_items"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    wishlist_id: Mapped[str] = mapped_column(
        ForeignKey("wishlists.id", ondelete="CASCADE"), index=True
    )

    # Insertion order within the wishlist
    position: Mapped[int] = mapped_column(Integer, default=0)

    # Product
    product_id: Mapped[str] = mapped_column(String(100))
    product_name: Mapped[str] = mapped_column(String(500))
    product_url: Mapped[str] = mapped_column(Text, default="")

    # Pricing
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2, asdecimal=True))
    currency: Mapped[str] = mapped_column(String(3), default="EUR")

    priority: Mapped[str] = mapped_column(String(10), default="MEDIUM")
    notes: Mapped[str] = mapped_column(Text, default="")

    # Base64-encoded image, empty when absent
    thumbnail: Mapped[str] = mapped_column(Text, default="")

    added_at: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    wishlist: Mapped["WishlistRecord"] = relationship("WishlistRecord", back_populates="items")

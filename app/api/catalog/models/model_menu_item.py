from sqlalchemy import Column, String, Integer, Numeric, Boolean, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class MenuItemModel(Base):
    """Product sold by a restaurant. ``category`` holds the category name, not an id."""
    __tablename__ = "menu_items"

    id = Column(String(36), primary_key=True, default=new_uuid)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    category = Column(String(100), nullable=False, default="", index=True)

    is_available = Column(Boolean, nullable=False, default=True)
    is_vegetarian = Column(Boolean, nullable=False, default=False)
    is_vegan = Column(Boolean, nullable=False, default=False)
    is_spicy = Column(Boolean, nullable=False, default=False)
    calories = Column(Integer, nullable=False, default=0)
    order_index = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    restaurant = relationship("RestaurantModel", back_populates="menu_items", lazy="joined")
    addons = relationship(
        "AddonModel",
        back_populates="menu_item",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def restaurant_name(self):
        return self.restaurant.name if self.restaurant else None

    def __repr__(self):
        return f"<MenuItem(id={self.id}, name='{self.name}')>"

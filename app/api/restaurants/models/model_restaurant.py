from sqlalchemy import Column, String, Integer, Numeric, Boolean, Float, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class RestaurantModel(Base):
    __tablename__ = "restaurants"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(150), nullable=False)
    slug = Column(String(160), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    image_url = Column(String(500), nullable=True)
    cover_image_url = Column(String(500), nullable=True)

    rating = Column(Numeric(3, 2), nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    delivery_time_min = Column(Integer, nullable=False, default=30)
    delivery_fee = Column(Numeric(10, 2), nullable=False, default=0)
    minimum_order = Column(Numeric(10, 2), nullable=False, default=0)

    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)

    address = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    phone = Column(String(40), nullable=True)

    is_featured = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    category = relationship("CategoryModel", lazy="joined")
    menu_items = relationship(
        "MenuItemModel",
        back_populates="restaurant",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Restaurant(id={self.id}, name='{self.name}')>"

    @property
    def category_name(self):
        return self.category.name if self.category else None

from sqlalchemy import Column, String, Integer, Numeric, Boolean, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class SpecialOfferModel(Base):
    """Discount campaign. A null ``restaurant_id`` applies to every restaurant."""
    __tablename__ = "special_offers"

    id = Column(String(36), primary_key=True, default=new_uuid)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=True, index=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    discount_type = Column(String(20), nullable=False, default="percentage")
    discount_value = Column(Numeric(10, 2), nullable=False, default=0)
    minimum_order = Column(Numeric(10, 2), nullable=False, default=0)
    max_discount = Column(Numeric(10, 2), nullable=True)
    code = Column(String(50), nullable=True, unique=True)
    image_url = Column(String(500), nullable=True)

    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    usage_limit = Column(Integer, nullable=True)
    usage_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    restaurant = relationship("RestaurantModel", lazy="joined")

    @property
    def restaurant_name(self):
        return self.restaurant.name if self.restaurant else None

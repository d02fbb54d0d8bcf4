from sqlalchemy import Column, String, Numeric, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.currency import format_price
from app.utils.database_utils import new_uuid

ORDER_STATUSES = (
    "pending",
    "confirmed",
    "preparing",
    "out_for_delivery",
    "delivered",
    "cancelled",
)


class OrderModel(Base):
    """Customer order. Orders are placed by the customer app; the admin only manages them."""
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=False, index=True)
    order_number = Column(String(40), nullable=False, unique=True)
    status = Column(String(30), nullable=False, default="pending", index=True)

    subtotal = Column(Numeric(10, 2), nullable=False, default=0)
    delivery_fee = Column(Numeric(10, 2), nullable=False, default=0)
    tax = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False, default=0)

    delivery_address = Column(Text, nullable=True)
    payment_method = Column(String(30), nullable=True)
    payment_status = Column(String(30), nullable=True)
    rider_id = Column(String(36), ForeignKey("riders.id", ondelete="SET NULL"), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    restaurant = relationship("RestaurantModel", lazy="joined")
    rider = relationship("RiderModel", lazy="joined")

    @property
    def restaurant_name(self):
        return self.restaurant.name if self.restaurant else None

    @property
    def rider_name(self):
        return self.rider.name if self.rider else None

    @property
    def total_display(self):
        return format_price(self.total)

    def __repr__(self):
        return f"<Order(id={self.id}, number='{self.order_number}', status='{self.status}')>"

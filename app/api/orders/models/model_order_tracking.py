from sqlalchemy import Column, String, Text, DateTime, ForeignKey, func

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class OrderTrackingModel(Base):
    """One row per status change of an order."""
    __tablename__ = "order_tracking"

    id = Column(String(36), primary_key=True, default=new_uuid)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    status = Column(String(30), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

from sqlalchemy import Column, String, Integer, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=new_uuid)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    menu_item_id = Column(String(36), ForeignKey("menu_items.id", ondelete="SET NULL"), nullable=True)
    # Snapshot taken when the order was placed.
    menu_item_name = Column(String(150), nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    unit_price = Column(Numeric(10, 2), nullable=False, default=0)
    subtotal = Column(Numeric(10, 2), nullable=False, default=0)
    special_instructions = Column(Text, nullable=True)

    menu_item = relationship("MenuItemModel", lazy="joined")

    @property
    def name(self):
        if self.menu_item is not None:
            return self.menu_item.name
        return self.menu_item_name

    @property
    def image_url(self):
        return self.menu_item.image_url if self.menu_item is not None else None

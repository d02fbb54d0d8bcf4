from sqlalchemy import Column, String, Integer, Numeric, Boolean, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class AddonModel(Base):
    """Group of extras offered on a menu item (e.g. sauces, sizes)."""
    __tablename__ = "addons"

    id = Column(String(36), primary_key=True, default=new_uuid)
    menu_item_id = Column(String(36), ForeignKey("menu_items.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    is_required = Column(Boolean, nullable=False, default=False)
    max_selections = Column(Integer, nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    menu_item = relationship("MenuItemModel", back_populates="addons", lazy="joined")
    options = relationship(
        "AddonOptionModel",
        back_populates="addon",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="AddonOptionModel.order_index",
    )

    @property
    def menu_item_name(self):
        return self.menu_item.name if self.menu_item else None

    @property
    def restaurant_name(self):
        return self.menu_item.restaurant_name if self.menu_item else None

    def __repr__(self):
        return f"<Addon(id={self.id}, name='{self.name}')>"


class AddonOptionModel(Base):
    __tablename__ = "addon_options"

    id = Column(String(36), primary_key=True, default=new_uuid)
    addon_id = Column(String(36), ForeignKey("addons.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    order_index = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    addon = relationship("AddonModel", back_populates="options")

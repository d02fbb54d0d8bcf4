from sqlalchemy import Column, String, Integer, Boolean, DateTime, func

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(100), nullable=False)
    slug = Column(String(120), nullable=True, unique=True)
    image_url = Column(String(500), nullable=True)
    icon = Column(String(50), nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"

from sqlalchemy import Column, String, Integer, Boolean, Text, DateTime, func

from app.api.content.models.model_app_config import JSONType
from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class ContentModel(Base):
    """Editable block of a customer app page."""
    __tablename__ = "content"

    id = Column(String(36), primary_key=True, default=new_uuid)
    page = Column(String(100), nullable=False, default="home", index=True)
    section = Column(String(100), nullable=False, default="default")
    title = Column(String(200), nullable=True)
    description = Column(Text, nullable=True)
    content = Column(JSONType, nullable=False, default=dict)
    image_url = Column(String(500), nullable=True)
    order_index = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

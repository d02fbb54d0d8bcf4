from sqlalchemy import Column, String, Text, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import JSONB

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid

JSONType = JSON().with_variant(JSONB, "postgresql")


class AppConfigModel(Base):
    """Key/value settings read by the customer app."""
    __tablename__ = "app_config"

    id = Column(String(36), primary_key=True, default=new_uuid)
    key = Column(String(100), nullable=False, unique=True, index=True)
    value = Column(JSONType, nullable=True)
    description = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

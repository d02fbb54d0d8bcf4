from sqlalchemy import Column, String, BigInteger, Boolean, DateTime, func

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class FileModel(Base):
    """Metadata of an object stored in the files bucket."""
    __tablename__ = "files"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)  # image | document
    url = Column(String(1000), nullable=False)
    path = Column(String(500), nullable=False)
    size = Column(BigInteger, nullable=False, default=0)
    mime_type = Column(String(150), nullable=True)
    is_public = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

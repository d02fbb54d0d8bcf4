from sqlalchemy import Column, String, Boolean, DateTime, func

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class AdminUserModel(Base):
    """Dashboard operator allowed to sign in to the admin API."""
    __tablename__ = "admin_users"

    id = Column(String(36), primary_key=True, default=new_uuid)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    full_name = Column(String(120), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<AdminUser(id={self.id}, email='{self.email}')>"

from sqlalchemy import Column, String, DateTime, func

from app.database.db_connection import Base


class UserProfileModel(Base):
    """Public profile of a customer account, read to show who sent a party request."""
    __tablename__ = "user_profiles"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), nullable=True, index=True)
    full_name = Column(String(150), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

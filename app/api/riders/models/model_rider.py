from sqlalchemy import Column, String, Boolean, Float, DateTime, func

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class RiderModel(Base):
    __tablename__ = "riders"

    id = Column(String(36), primary_key=True, default=new_uuid)
    # Account of the rider app; set once the rider signs up.
    user_id = Column(String(36), nullable=True, index=True)

    name = Column(String(150), nullable=False)
    phone = Column(String(40), nullable=False)
    vehicle_type = Column(String(20), nullable=False, default="bike")
    vehicle_number = Column(String(40), nullable=True)
    license_number = Column(String(60), nullable=True)
    current_latitude = Column(Float, nullable=True)
    current_longitude = Column(Float, nullable=True)

    is_available = Column(Boolean, nullable=False, default=True)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Rider(id={self.id}, name='{self.name}')>"

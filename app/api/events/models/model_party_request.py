from sqlalchemy import Column, String, Integer, Boolean, Text, Date, Time, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class PartyRequestModel(Base):
    __tablename__ = "party_requests"

    id = Column(String(36), primary_key=True, default=new_uuid)
    # Customer account id; customers live outside this database.
    user_id = Column(String(36), nullable=False, index=True)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=False, index=True)

    event_name = Column(String(200), nullable=False)
    event_date = Column(Date, nullable=False)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)
    expected_attendees = Column(Integer, nullable=True)
    requires_dj = Column(Boolean, nullable=False, default=False)
    special_requirements = Column(Text, nullable=True)
    contact_phone = Column(String(40), nullable=True)
    contact_email = Column(String(255), nullable=True)

    status = Column(String(20), nullable=False, default="pending", index=True)
    admin_notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    restaurant = relationship("RestaurantModel", lazy="joined")

    @property
    def restaurant_name(self):
        return self.restaurant.name if self.restaurant else None

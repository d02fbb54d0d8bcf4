from sqlalchemy import Column, String, Integer, Numeric, Boolean, Text, Time, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database.db_connection import Base
from app.utils.database_utils import new_uuid


class EventModel(Base):
    """Event hosted by a restaurant. ``event_date`` is the start instant (date + start_time)."""
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=new_uuid)
    restaurant_id = Column(String(36), ForeignKey("restaurants.id"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    event_date = Column(DateTime(timezone=True), nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    image_url = Column(String(500), nullable=True)
    cover_image_url = Column(String(500), nullable=True)

    has_dj = Column(Boolean, nullable=False, default=False)
    dj_name = Column(String(150), nullable=True)
    dj_contact = Column(String(150), nullable=True)
    max_attendees = Column(Integer, nullable=True)
    ticket_price = Column(Numeric(10, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    restaurant = relationship("RestaurantModel", lazy="joined")

    @property
    def restaurant_name(self):
        return self.restaurant.name if self.restaurant else None

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}')>"

from datetime import date, datetime, time, timezone
from typing import List, Optional
from zoneinfo import ZoneInfo

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.events.models.model_event import EventModel
from app.api.events.repositories.repo_event import EventRepository
from app.api.events.schemas.schema_event import EventCreate, EventUpdate
from app.api.restaurants.repositories.repo_restaurant import RestaurantRepository
from app.config.settings import APP_TIMEZONE
from app.utils.logger import logger
from app.utils.payload import clean_str, compact_update, to_number

REQUIRED_FIELDS_MESSAGE = (
    "Please fill in all required fields (Title, Restaurant, Date, Start Time, End Time)"
)

# Written on every update even when blank or false.
ALWAYS_WRITTEN = (
    "restaurant_id",
    "title",
    "event_date",
    "start_time",
    "end_time",
    "has_dj",
    "is_active",
    "ticket_price",
)


def parse_time(value: str) -> time:
    return datetime.strptime(value.strip()[:5], "%H:%M").time()


def combine_event_date(day: str, start: time, tz_name: str = APP_TIMEZONE) -> datetime:
    """Event day + start time read in the app timezone, stored as UTC."""
    local = datetime.combine(date.fromisoformat(day.strip()[:10]), start, tzinfo=ZoneInfo(tz_name))
    return local.astimezone(timezone.utc)


class EventService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = EventRepository(db)
        self.repo_restaurant = RestaurantRepository(db)

    def _event_or_404(self, event_id: str) -> EventModel:
        event = self.repo.get_by_id(event_id)
        if not event:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Event not found")
        return event

    @staticmethod
    def build_payload(req: EventCreate) -> dict:
        title = clean_str(req.title)
        restaurant_id = clean_str(req.restaurant_id)
        day = clean_str(req.event_date)
        start = clean_str(req.start_time)
        end = clean_str(req.end_time)
        if not (title and restaurant_id and day and start and end):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

        try:
            start_time = parse_time(start)
            end_time = parse_time(end)
            event_date = combine_event_date(day, start_time)
        except ValueError:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Invalid date or time format")

        max_attendees = to_number(req.max_attendees, int)
        return {
            "restaurant_id": restaurant_id,
            "title": title,
            "description": clean_str(req.description),
            "event_date": event_date,
            "start_time": start_time,
            "end_time": end_time,
            "image_url": clean_str(req.image_url),
            "cover_image_url": clean_str(req.cover_image_url),
            "has_dj": bool(req.has_dj),
            "dj_name": clean_str(req.dj_name),
            "dj_contact": clean_str(req.dj_contact),
            "max_attendees": max_attendees if max_attendees > 0 else None,
            "ticket_price": to_number(req.ticket_price),
            "is_active": req.is_active is not False,
        }

    def _check_restaurant(self, restaurant_id: str):
        if not self.repo_restaurant.get_by_id(restaurant_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Restaurant {restaurant_id} does not exist")

    def list(self, restaurant_id: Optional[str] = None) -> List[EventModel]:
        return self.repo.list(restaurant_id)

    def get(self, event_id: str) -> EventModel:
        return self._event_or_404(event_id)

    def create(self, req: EventCreate) -> EventModel:
        payload = self.build_payload(req)
        self._check_restaurant(payload["restaurant_id"])
        event = self.repo.create(**payload)
        self.db.commit()
        self.db.refresh(event)
        logger.info(f"[EventService] Created id={event.id} event_date={event.event_date}")
        return event

    def update(self, event_id: str, req: EventUpdate) -> EventModel:
        event = self._event_or_404(event_id)
        changes = compact_update(self.build_payload(req), always=ALWAYS_WRITTEN)
        self._check_restaurant(changes["restaurant_id"])
        self.repo.update(event, **changes)
        self.db.commit()
        self.db.refresh(event)
        return event

    def delete(self, event_id: str):
        event = self._event_or_404(event_id)
        self.repo.delete(event)
        self.db.commit()
        logger.info(f"[EventService] Deleted id={event_id}")

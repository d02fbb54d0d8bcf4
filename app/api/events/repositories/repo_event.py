from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.events.models.model_event import EventModel


class EventRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, event_id: str) -> Optional[EventModel]:
        return self.db.query(EventModel).filter_by(id=event_id).first()

    def list(self, restaurant_id: Optional[str] = None) -> List[EventModel]:
        query = self.db.query(EventModel)
        if restaurant_id:
            query = query.filter(EventModel.restaurant_id == restaurant_id)
        return query.order_by(EventModel.event_date.desc()).all()

    def create(self, **data) -> EventModel:
        obj = EventModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: EventModel, **data) -> EventModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: EventModel):
        self.db.delete(obj)
        self.db.flush()

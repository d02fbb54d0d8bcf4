from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.events.schemas.schema_event import EventCreate, EventUpdate, EventResponse
from app.api.events.services.service_event import EventService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/events/admin/events",
    tags=["Admin - Events"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[EventResponse])
def list_events(
    restaurant_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return EventService(db).list(restaurant_id)


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str = Path(...), db: Session = Depends(get_db)):
    return EventService(db).get(event_id)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(req: EventCreate, db: Session = Depends(get_db)):
    logger.info(f"[Events] Create - title={req.title} restaurant_id={req.restaurant_id}")
    return EventService(db).create(req)


@router.put("/{event_id}", response_model=EventResponse)
def update_event(
    req: EventUpdate,
    event_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Events] Update - id={event_id}")
    return EventService(db).update(event_id, req)


@router.delete("/{event_id}")
def delete_event(event_id: str = Path(...), db: Session = Depends(get_db)):
    EventService(db).delete(event_id)
    return {"message": "Event deleted"}

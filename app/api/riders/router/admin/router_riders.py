from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.riders.schemas.schema_rider import (
    RiderCreate,
    RiderUpdate,
    RiderResponse,
    LinkedUser,
)
from app.api.riders.services.service_rider import RiderService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/riders/admin/riders",
    tags=["Admin - Riders"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[RiderResponse])
def list_riders(db: Session = Depends(get_db)):
    return RiderService(db).list()


@router.get("/linked-users", response_model=List[LinkedUser])
def list_linked_users(db: Session = Depends(get_db)):
    """Rider accounts already bound to a user, for the user picker."""
    return RiderService(db).list_linked_users()


@router.get("/{rider_id}", response_model=RiderResponse)
def get_rider(rider_id: str = Path(...), db: Session = Depends(get_db)):
    return RiderService(db).get(rider_id)


@router.post("", response_model=RiderResponse, status_code=status.HTTP_201_CREATED)
def create_rider(req: RiderCreate, db: Session = Depends(get_db)):
    logger.info(f"[Riders] Create - name={req.name}")
    return RiderService(db).create(req)


@router.put("/{rider_id}", response_model=RiderResponse)
def update_rider(
    req: RiderUpdate,
    rider_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Riders] Update - id={rider_id}")
    return RiderService(db).update(rider_id, req)


@router.delete("/{rider_id}")
def delete_rider(rider_id: str = Path(...), db: Session = Depends(get_db)):
    RiderService(db).delete(rider_id)
    return {"message": "Rider deleted"}

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from app.api.events.schemas.schema_party_request import (
    PartyRequestReview,
    PartyRequestResponse,
    PartyRequestStatus,
)
from app.api.events.services.service_party_request import PartyRequestService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/events/admin/party-requests",
    tags=["Admin - Party requests"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[PartyRequestResponse])
def list_party_requests(
    status: Optional[PartyRequestStatus] = Query(None),
    db: Session = Depends(get_db),
):
    return PartyRequestService(db).list(status)


@router.get("/{request_id}", response_model=PartyRequestResponse)
def get_party_request(request_id: str = Path(...), db: Session = Depends(get_db)):
    return PartyRequestService(db).get(request_id)


@router.patch("/{request_id}/status", response_model=PartyRequestResponse)
def review_party_request(
    req: PartyRequestReview,
    request_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[PartyRequests] Review - id={request_id} status={req.status}")
    return PartyRequestService(db).review(request_id, req)

from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.offers.schemas.schema_special_offer import (
    SpecialOfferCreate,
    SpecialOfferUpdate,
    SpecialOfferResponse,
)
from app.api.offers.services.service_special_offer import SpecialOfferService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/offers/admin/offers",
    tags=["Admin - Special offers"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[SpecialOfferResponse])
def list_offers(
    active_only: bool = Query(False),
    db: Session = Depends(get_db),
):
    return SpecialOfferService(db).list(active_only)


@router.get("/{offer_id}", response_model=SpecialOfferResponse)
def get_offer(offer_id: str = Path(...), db: Session = Depends(get_db)):
    return SpecialOfferService(db).get(offer_id)


@router.post("", response_model=SpecialOfferResponse, status_code=status.HTTP_201_CREATED)
def create_offer(req: SpecialOfferCreate, db: Session = Depends(get_db)):
    logger.info(f"[Offers] Create - title={req.title}")
    return SpecialOfferService(db).create(req)


@router.put("/{offer_id}", response_model=SpecialOfferResponse)
def update_offer(
    req: SpecialOfferUpdate,
    offer_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Offers] Update - id={offer_id}")
    return SpecialOfferService(db).update(offer_id, req)


@router.delete("/{offer_id}")
def delete_offer(offer_id: str = Path(...), db: Session = Depends(get_db)):
    SpecialOfferService(db).delete(offer_id)
    return {"message": "Offer deleted"}

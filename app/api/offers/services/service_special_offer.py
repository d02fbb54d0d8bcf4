from datetime import datetime, timezone
from typing import List
from zoneinfo import ZoneInfo

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.offers.models.model_special_offer import SpecialOfferModel
from app.api.offers.repositories.repo_special_offer import SpecialOfferRepository
from app.api.offers.schemas.schema_special_offer import SpecialOfferCreate, SpecialOfferUpdate
from app.api.restaurants.repositories.repo_restaurant import RestaurantRepository
from app.config.settings import APP_TIMEZONE
from app.utils.logger import logger
from app.utils.payload import clean_str

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields (Title, Start Date, End Date)"


def parse_instant(value: str, label: str) -> datetime:
    """ISO date/datetime; naive values are read in the app timezone. Returns UTC."""
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        # JavaScript toISOString() output
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Invalid {label}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=ZoneInfo(APP_TIMEZONE))
    return parsed.astimezone(timezone.utc)


class SpecialOfferService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = SpecialOfferRepository(db)
        self.repo_restaurant = RestaurantRepository(db)

    def _offer_or_404(self, offer_id: str) -> SpecialOfferModel:
        offer = self.repo.get_by_id(offer_id)
        if not offer:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Offer not found")
        return offer

    @staticmethod
    def build_payload(req: SpecialOfferCreate) -> dict:
        title = clean_str(req.title)
        start_raw = clean_str(req.start_date)
        end_raw = clean_str(req.end_date)
        if not (title and start_raw and end_raw):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

        start_date = parse_instant(start_raw, "start date")
        end_date = parse_instant(end_raw, "end date")
        if end_date <= start_date:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "End date must be after start date")

        return {
            "restaurant_id": clean_str(req.restaurant_id),
            "title": title,
            "description": clean_str(req.description),
            "discount_type": req.discount_type or "percentage",
            "discount_value": req.discount_value or 0,
            "minimum_order": req.minimum_order or 0,
            "max_discount": req.max_discount,
            "code": clean_str(req.code),
            "image_url": clean_str(req.image_url),
            "start_date": start_date,
            "end_date": end_date,
            "is_active": req.is_active is not False,
            "usage_limit": req.usage_limit,
        }

    def _check_restaurant(self, restaurant_id):
        if restaurant_id and not self.repo_restaurant.get_by_id(restaurant_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Restaurant {restaurant_id} does not exist")

    def _save(self, write, *args, **kwargs):
        try:
            result = write(*args, **kwargs)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"[SpecialOfferService] Integrity error: {e.orig}")
            raise HTTPException(status.HTTP_409_CONFLICT, "Offer code is already in use")
        return result

    def list(self, active_only: bool = False) -> List[SpecialOfferModel]:
        return self.repo.list(active_only)

    def get(self, offer_id: str) -> SpecialOfferModel:
        return self._offer_or_404(offer_id)

    def create(self, req: SpecialOfferCreate) -> SpecialOfferModel:
        payload = self.build_payload(req)
        self._check_restaurant(payload["restaurant_id"])
        offer = self._save(self.repo.create, **payload)
        self.db.refresh(offer)
        logger.info(f"[SpecialOfferService] Created id={offer.id} code={offer.code}")
        return offer

    def update(self, offer_id: str, req: SpecialOfferUpdate) -> SpecialOfferModel:
        """Full replace: a null restaurant_id turns the offer into a global one."""
        offer = self._offer_or_404(offer_id)
        payload = self.build_payload(req)
        self._check_restaurant(payload["restaurant_id"])
        self._save(self.repo.update, offer, **payload)
        self.db.refresh(offer)
        return offer

    def delete(self, offer_id: str):
        offer = self._offer_or_404(offer_id)
        self.repo.delete(offer)
        self.db.commit()
        logger.info(f"[SpecialOfferService] Deleted id={offer_id}")

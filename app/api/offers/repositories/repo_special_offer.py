from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.offers.models.model_special_offer import SpecialOfferModel


class SpecialOfferRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, offer_id: str) -> Optional[SpecialOfferModel]:
        return self.db.query(SpecialOfferModel).filter_by(id=offer_id).first()

    def list(self, active_only: bool = False) -> List[SpecialOfferModel]:
        query = self.db.query(SpecialOfferModel)
        if active_only:
            query = query.filter(SpecialOfferModel.is_active.is_(True))
        return query.order_by(SpecialOfferModel.created_at.desc()).all()

    def create(self, **data) -> SpecialOfferModel:
        obj = SpecialOfferModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: SpecialOfferModel, **data) -> SpecialOfferModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: SpecialOfferModel):
        self.db.delete(obj)
        self.db.flush()

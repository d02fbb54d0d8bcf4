from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.riders.models.model_rider import RiderModel


class RiderRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, rider_id: str) -> Optional[RiderModel]:
        return self.db.query(RiderModel).filter_by(id=rider_id).first()

    def list(self) -> List[RiderModel]:
        return self.db.query(RiderModel).order_by(RiderModel.created_at.desc()).all()

    def list_assignable(self) -> List[RiderModel]:
        """Riders that can take an order right now."""
        return (
            self.db.query(RiderModel)
            .filter(RiderModel.is_active.is_(True), RiderModel.is_available.is_(True))
            .order_by(RiderModel.name)
            .all()
        )

    def list_linked(self) -> List[RiderModel]:
        return (
            self.db.query(RiderModel)
            .filter(RiderModel.user_id.isnot(None))
            .order_by(RiderModel.name)
            .all()
        )

    def create(self, **data) -> RiderModel:
        obj = RiderModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: RiderModel, **data) -> RiderModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: RiderModel):
        self.db.delete(obj)
        self.db.flush()

from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.riders.models.model_rider import RiderModel
from app.api.riders.repositories.repo_rider import RiderRepository
from app.api.riders.schemas.schema_rider import RiderCreate, RiderUpdate
from app.utils.logger import logger
from app.utils.payload import clean_str, drop_nulls

_TEXT_FIELDS = ("user_id", "vehicle_number", "license_number")
_NULLABLE_FIELDS = _TEXT_FIELDS + ("current_latitude", "current_longitude")


class RiderService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = RiderRepository(db)

    def _rider_or_404(self, rider_id: str) -> RiderModel:
        rider = self.repo.get_by_id(rider_id)
        if not rider:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Rider not found")
        return rider

    @staticmethod
    def _shape(data: dict) -> dict:
        for field in _TEXT_FIELDS:
            if field in data:
                data[field] = clean_str(data[field])
        for field in ("name", "phone"):
            if data.get(field) is not None:
                data[field] = data[field].strip()
        return data

    def list(self) -> List[RiderModel]:
        return self.repo.list()

    def list_assignable(self) -> List[RiderModel]:
        return self.repo.list_assignable()

    def list_linked_users(self) -> List[RiderModel]:
        return self.repo.list_linked()

    def get(self, rider_id: str) -> RiderModel:
        return self._rider_or_404(rider_id)

    def create(self, req: RiderCreate) -> RiderModel:
        rider = self.repo.create(**self._shape(req.model_dump()))
        self.db.commit()
        self.db.refresh(rider)
        logger.info(f"[RiderService] Created id={rider.id} user_id={rider.user_id}")
        return rider

    def update(self, rider_id: str, req: RiderUpdate) -> RiderModel:
        rider = self._rider_or_404(rider_id)
        data = drop_nulls(req.model_dump(exclude_unset=True), _NULLABLE_FIELDS)
        self.repo.update(rider, **self._shape(data))
        self.db.commit()
        self.db.refresh(rider)
        return rider

    def delete(self, rider_id: str):
        rider = self._rider_or_404(rider_id)
        self.repo.delete(rider)
        self.db.commit()
        logger.info(f"[RiderService] Deleted id={rider_id}")

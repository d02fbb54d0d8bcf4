from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.restaurants.models.model_restaurant import RestaurantModel


class RestaurantRepository:
    """CRUD access to the restaurants table."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, restaurant_id: str) -> Optional[RestaurantModel]:
        return self.db.query(RestaurantModel).filter_by(id=restaurant_id).first()

    def get_by_slug(self, slug: str) -> Optional[RestaurantModel]:
        return self.db.query(RestaurantModel).filter_by(slug=slug).first()

    def list(self, active_only: bool = False, search: Optional[str] = None) -> List[RestaurantModel]:
        query = self.db.query(RestaurantModel)
        if active_only:
            query = query.filter(RestaurantModel.is_active.is_(True))
        if search:
            query = query.filter(RestaurantModel.name.ilike(f"%{search}%"))
        return query.order_by(RestaurantModel.created_at.desc()).all()

    def list_lookup(self) -> List[RestaurantModel]:
        return self.db.query(RestaurantModel).order_by(RestaurantModel.name).all()

    def count(self) -> int:
        return self.db.query(RestaurantModel).count()

    def create(self, **data) -> RestaurantModel:
        obj = RestaurantModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: RestaurantModel, **data) -> RestaurantModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: RestaurantModel):
        self.db.delete(obj)
        self.db.flush()

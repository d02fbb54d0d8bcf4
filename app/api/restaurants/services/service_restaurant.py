from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.catalog.repositories.repo_category import CategoryRepository
from app.api.restaurants.models.model_restaurant import RestaurantModel
from app.api.restaurants.repositories.repo_restaurant import RestaurantRepository
from app.api.restaurants.schemas.schema_restaurant import (
    RestaurantCreate,
    RestaurantUpdate,
)
from app.utils.logger import logger
from app.utils.payload import clean_str, compact_update
from app.utils.slug_utils import make_slug

_TEXT_FIELDS = ("description", "image_url", "cover_image_url", "category_id", "address", "phone")


class RestaurantService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = RestaurantRepository(db)
        self.repo_category = CategoryRepository(db)

    def _restaurant_or_404(self, restaurant_id: str) -> RestaurantModel:
        restaurant = self.repo.get_by_id(restaurant_id)
        if not restaurant:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Restaurant not found")
        return restaurant

    def _check_category(self, category_id: Optional[str]):
        if category_id and not self.repo_category.get_by_id(category_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Category {category_id} does not exist")

    def _check_slug_free(self, slug: str, current_id: Optional[str] = None):
        existing = self.repo.get_by_slug(slug)
        if existing and existing.id != current_id:
            raise HTTPException(status.HTTP_409_CONFLICT, f"Slug '{slug}' is already in use")

    @staticmethod
    def build_insert_payload(req: RestaurantCreate) -> dict:
        """Normalizes a create form: trims text, blanks become null, numeric defaults."""
        name = (req.name or "").strip()
        slug = (req.slug or "").strip() or make_slug(name)
        payload = {
            "name": name,
            "slug": slug,
            "rating": req.rating or 0,
            "review_count": req.review_count or 0,
            "delivery_time_min": req.delivery_time_min or 30,
            "delivery_fee": req.delivery_fee or 0,
            "minimum_order": req.minimum_order or 0,
            "latitude": req.latitude,
            "longitude": req.longitude,
            "is_featured": bool(req.is_featured),
            "is_active": True if req.is_active is None else req.is_active,
        }
        for field in _TEXT_FIELDS:
            payload[field] = clean_str(getattr(req, field))
        return payload

    @staticmethod
    def build_update_payload(req: RestaurantUpdate) -> dict:
        """Only non-blank submitted fields are written, so stored values are never nulled."""
        data = req.model_dump(exclude_unset=True)
        for key, value in data.items():
            if isinstance(value, str):
                data[key] = value.strip()
        return compact_update(data)

    def list(self, active_only: bool = False, search: Optional[str] = None) -> List[RestaurantModel]:
        return self.repo.list(active_only=active_only, search=search)

    def lookup(self) -> List[RestaurantModel]:
        return self.repo.list_lookup()

    def get(self, restaurant_id: str) -> RestaurantModel:
        return self._restaurant_or_404(restaurant_id)

    def create(self, req: RestaurantCreate) -> RestaurantModel:
        payload = self.build_insert_payload(req)
        if not payload["name"] or not payload["slug"]:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Name and slug are required")

        self._check_slug_free(payload["slug"])
        self._check_category(payload["category_id"])

        try:
            restaurant = self.repo.create(**payload)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"[RestaurantService] Integrity error on create: {e.orig}")
            raise HTTPException(status.HTTP_409_CONFLICT, "Could not save restaurant: conflicting data")

        self.db.refresh(restaurant)
        logger.info(f"[RestaurantService] Created id={restaurant.id} slug={restaurant.slug}")
        return restaurant

    def update(self, restaurant_id: str, req: RestaurantUpdate) -> RestaurantModel:
        restaurant = self._restaurant_or_404(restaurant_id)
        changes = self.build_update_payload(req)

        if "slug" in changes:
            self._check_slug_free(changes["slug"], current_id=restaurant.id)
        if "category_id" in changes:
            self._check_category(changes["category_id"])

        try:
            self.repo.update(restaurant, **changes)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"[RestaurantService] Integrity error on update id={restaurant_id}: {e.orig}")
            raise HTTPException(status.HTTP_409_CONFLICT, "Could not save restaurant: conflicting data")

        self.db.refresh(restaurant)
        return restaurant

    def delete(self, restaurant_id: str):
        restaurant = self._restaurant_or_404(restaurant_id)
        try:
            self.repo.delete(restaurant)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"[RestaurantService] Delete blocked id={restaurant_id}: {e.orig}")
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                "Restaurant is still referenced by orders, events or requests",
            )
        logger.info(f"[RestaurantService] Deleted id={restaurant_id}")

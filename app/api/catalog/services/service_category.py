from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.catalog.models.model_category import CategoryModel
from app.api.catalog.repositories.repo_category import CategoryRepository
from app.api.catalog.schemas.schema_category import CategoryCreate, CategoryUpdate
from app.utils.logger import logger
from app.utils.payload import clean_str, drop_nulls
from app.utils.slug_utils import make_slug


class CategoryService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CategoryRepository(db)

    def _category_or_404(self, category_id: str) -> CategoryModel:
        category = self.repo.get_by_id(category_id)
        if not category:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Category not found")
        return category

    def _save(self, write, *args, **kwargs):
        """Runs a repository write and commits; a unique slug clash becomes 409."""
        try:
            result = write(*args, **kwargs)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"[CategoryService] Integrity error: {e.orig}")
            raise HTTPException(status.HTTP_409_CONFLICT, "Category slug is already in use")
        return result

    def list(self, active_only: bool = False) -> List[CategoryModel]:
        return self.repo.list(active_only)

    def lookup(self) -> List[CategoryModel]:
        return self.repo.list_lookup()

    def get(self, category_id: str) -> CategoryModel:
        return self._category_or_404(category_id)

    def create(self, req: CategoryCreate) -> CategoryModel:
        name = req.name.strip()
        category = self._save(
            self.repo.create,
            name=name,
            slug=clean_str(req.slug) or make_slug(name) or None,
            image_url=clean_str(req.image_url),
            icon=clean_str(req.icon),
            order_index=req.order_index,
            is_active=req.is_active,
        )
        self.db.refresh(category)
        return category

    def update(self, category_id: str, req: CategoryUpdate) -> CategoryModel:
        category = self._category_or_404(category_id)
        data = drop_nulls(req.model_dump(exclude_unset=True), nullable=("slug", "image_url", "icon"))
        for key in ("name", "slug", "image_url", "icon"):
            if key in data:
                data[key] = clean_str(data[key])
        if "name" in data and data["name"] is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Name is required")
        self._save(self.repo.update, category, **data)
        self.db.refresh(category)
        return category

    def delete(self, category_id: str):
        category = self._category_or_404(category_id)
        self._save(self.repo.delete, category)
        logger.info(f"[CategoryService] Deleted id={category_id}")

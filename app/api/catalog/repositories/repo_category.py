from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.catalog.models.model_category import CategoryModel


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, category_id: str) -> Optional[CategoryModel]:
        return self.db.query(CategoryModel).filter_by(id=category_id).first()

    def get_by_slug(self, slug: str) -> Optional[CategoryModel]:
        return self.db.query(CategoryModel).filter_by(slug=slug).first()

    def list(self, active_only: bool = False) -> List[CategoryModel]:
        query = self.db.query(CategoryModel)
        if active_only:
            query = query.filter(CategoryModel.is_active.is_(True))
        return query.order_by(CategoryModel.order_index, CategoryModel.name).all()

    def list_lookup(self) -> List[CategoryModel]:
        return self.db.query(CategoryModel).order_by(CategoryModel.name).all()

    def create(self, **data) -> CategoryModel:
        obj = CategoryModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: CategoryModel, **data) -> CategoryModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: CategoryModel):
        self.db.delete(obj)
        self.db.flush()

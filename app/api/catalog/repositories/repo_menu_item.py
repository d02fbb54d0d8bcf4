from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.catalog.models.model_menu_item import MenuItemModel


class MenuItemRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, menu_item_id: str) -> Optional[MenuItemModel]:
        return self.db.query(MenuItemModel).filter_by(id=menu_item_id).first()

    def list(
        self,
        restaurant_id: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[MenuItemModel]:
        query = self.db.query(MenuItemModel)
        if restaurant_id:
            query = query.filter(MenuItemModel.restaurant_id == restaurant_id)
        if category:
            query = query.filter(MenuItemModel.category == category)
        return query.order_by(MenuItemModel.created_at.desc()).all()

    def count(self) -> int:
        return self.db.query(MenuItemModel).count()

    def create(self, **data) -> MenuItemModel:
        obj = MenuItemModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: MenuItemModel, **data) -> MenuItemModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: MenuItemModel):
        self.db.delete(obj)
        self.db.flush()

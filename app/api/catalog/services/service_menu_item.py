from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.catalog.models.model_menu_item import MenuItemModel
from app.api.catalog.repositories.repo_menu_item import MenuItemRepository
from app.api.catalog.schemas.schema_menu_item import MenuItemCreate, MenuItemUpdate
from app.api.restaurants.repositories.repo_restaurant import RestaurantRepository
from app.utils.logger import logger
from app.utils.payload import clean_str, drop_nulls, to_number

_NUMERIC_FIELDS = {"price": float, "calories": int, "order_index": int}
# Updates may clear these with null; other nulls are ignored
_NULLABLE_FIELDS = ("description", "image_url", "category")


class MenuItemService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = MenuItemRepository(db)
        self.repo_restaurant = RestaurantRepository(db)

    def _item_or_404(self, menu_item_id: str) -> MenuItemModel:
        item = self.repo.get_by_id(menu_item_id)
        if not item:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Menu item not found")
        return item

    def _restaurant_or_400(self, restaurant_id: str):
        if not self.repo_restaurant.get_by_id(restaurant_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Restaurant {restaurant_id} does not exist")

    @staticmethod
    def shape(data: dict) -> dict:
        """Trims the category and coerces the numeric fields of a form payload."""
        if "category" in data:
            data["category"] = (data["category"] or "").strip()
        for field, cast in _NUMERIC_FIELDS.items():
            if field in data:
                data[field] = to_number(data[field], cast)
        for field in ("description", "image_url"):
            if field in data:
                data[field] = clean_str(data[field])
        if "name" in data and data["name"] is not None:
            data["name"] = data["name"].strip()
        return data

    def list(self, restaurant_id: Optional[str] = None, category: Optional[str] = None) -> List[MenuItemModel]:
        return self.repo.list(restaurant_id=restaurant_id, category=category)

    def get(self, menu_item_id: str) -> MenuItemModel:
        return self._item_or_404(menu_item_id)

    def create(self, req: MenuItemCreate) -> MenuItemModel:
        self._restaurant_or_400(req.restaurant_id)
        data = self.shape(req.model_dump())
        item = self.repo.create(**data)
        self.db.commit()
        self.db.refresh(item)
        logger.info(f"[MenuItemService] Created id={item.id} category='{item.category}'")
        return item

    def update(self, menu_item_id: str, req: MenuItemUpdate) -> MenuItemModel:
        item = self._item_or_404(menu_item_id)
        data = self.shape(drop_nulls(req.model_dump(exclude_unset=True), _NULLABLE_FIELDS))
        if data.get("restaurant_id"):
            self._restaurant_or_400(data["restaurant_id"])
        else:
            data.pop("restaurant_id", None)
        if "name" in data and not data["name"]:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Name is required")

        logger.info(f"[MenuItemService] Update id={menu_item_id} category: '{item.category}' -> '{data.get('category', item.category)}'")
        self.repo.update(item, **data)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, menu_item_id: str):
        item = self._item_or_404(menu_item_id)
        self.repo.delete(item)
        self.db.commit()
        logger.info(f"[MenuItemService] Deleted id={menu_item_id}")

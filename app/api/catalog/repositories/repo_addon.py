from typing import List, Optional

from sqlalchemy.orm import Session

from app.api.catalog.models.model_addon import AddonModel, AddonOptionModel
from app.api.catalog.models.model_menu_item import MenuItemModel


class AddonRepository:
    """CRUD for addons and their options."""

    def __init__(self, db: Session):
        self.db = db

    # ------ Addons ------
    def get_by_id(self, addon_id: str) -> Optional[AddonModel]:
        return self.db.query(AddonModel).filter_by(id=addon_id).first()

    def list(
        self,
        menu_item_id: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[AddonModel]:
        query = self.db.query(AddonModel)
        if menu_item_id:
            query = query.filter(AddonModel.menu_item_id == menu_item_id)
        if category:
            query = query.join(MenuItemModel, MenuItemModel.id == AddonModel.menu_item_id).filter(
                MenuItemModel.category == category
            )
        return query.order_by(AddonModel.order_index.asc()).all()

    def create(self, **data) -> AddonModel:
        obj = AddonModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def update(self, obj: AddonModel, **data) -> AddonModel:
        for key, value in data.items():
            setattr(obj, key, value)
        self.db.flush()
        return obj

    def delete(self, obj: AddonModel):
        self.db.delete(obj)
        self.db.flush()

    # ------ Options ------
    def get_option(self, option_id: str) -> Optional[AddonOptionModel]:
        return self.db.query(AddonOptionModel).filter_by(id=option_id).first()

    def list_options(self, addon_id: str) -> List[AddonOptionModel]:
        return (
            self.db.query(AddonOptionModel)
            .filter(AddonOptionModel.addon_id == addon_id)
            .order_by(AddonOptionModel.order_index)
            .all()
        )

    def create_option(self, **data) -> AddonOptionModel:
        obj = AddonOptionModel(**data)
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete_option(self, obj: AddonOptionModel):
        self.db.delete(obj)
        self.db.flush()

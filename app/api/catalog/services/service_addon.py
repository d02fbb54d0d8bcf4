from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.catalog.models.model_addon import AddonModel, AddonOptionModel
from app.api.catalog.repositories.repo_addon import AddonRepository
from app.api.catalog.repositories.repo_menu_item import MenuItemRepository
from app.api.catalog.schemas.schema_addon import (
    AddonCreate,
    AddonUpdate,
    AddonOptionCreate,
    AddonOptionUpdate,
)
from app.utils.logger import logger
from app.utils.payload import apply_changes, clean_str, drop_nulls


class AddonService:
    """Addons of menu items and the options inside each addon."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = AddonRepository(db)
        self.repo_menu_item = MenuItemRepository(db)

    def _addon_or_404(self, addon_id: str) -> AddonModel:
        addon = self.repo.get_by_id(addon_id)
        if not addon:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Addon not found")
        return addon

    def _option_or_404(self, option_id: str) -> AddonOptionModel:
        option = self.repo.get_option(option_id)
        if not option:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Addon option not found")
        return option

    def _menu_item_or_400(self, menu_item_id: str):
        if not self.repo_menu_item.get_by_id(menu_item_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Menu item {menu_item_id} does not exist")

    # ------ Addons ------
    def list(self, menu_item_id: Optional[str] = None, category: Optional[str] = None) -> List[AddonModel]:
        return self.repo.list(menu_item_id=menu_item_id, category=category)

    def get(self, addon_id: str) -> AddonModel:
        return self._addon_or_404(addon_id)

    def create(self, req: AddonCreate) -> AddonModel:
        self._menu_item_or_400(req.menu_item_id)
        data = req.model_dump()
        data["name"] = data["name"].strip()
        data["description"] = clean_str(data["description"])
        addon = self.repo.create(**data)
        self.db.commit()
        self.db.refresh(addon)
        logger.info(f"[AddonService] Created id={addon.id} menu_item={addon.menu_item_id}")
        return addon

    def update(self, addon_id: str, req: AddonUpdate) -> AddonModel:
        addon = self._addon_or_404(addon_id)
        data = drop_nulls(req.model_dump(exclude_unset=True), nullable=("description", "max_selections"))
        if "menu_item_id" in data:
            if not data["menu_item_id"]:
                data.pop("menu_item_id")
            else:
                self._menu_item_or_400(data["menu_item_id"])
        if "description" in data:
            data["description"] = clean_str(data["description"])
        self.repo.update(addon, **data)
        self.db.commit()
        self.db.refresh(addon)
        return addon

    def delete(self, addon_id: str):
        addon = self._addon_or_404(addon_id)
        self.repo.delete(addon)
        self.db.commit()
        logger.info(f"[AddonService] Deleted id={addon_id}")

    # ------ Options ------
    def list_options(self, addon_id: str) -> List[AddonOptionModel]:
        self._addon_or_404(addon_id)
        return self.repo.list_options(addon_id)

    def create_option(self, addon_id: str, req: AddonOptionCreate) -> AddonOptionModel:
        self._addon_or_404(addon_id)
        option = self.repo.create_option(addon_id=addon_id, **req.model_dump())
        self.db.commit()
        self.db.refresh(option)
        return option

    def update_option(self, option_id: str, req: AddonOptionUpdate) -> AddonOptionModel:
        option = self._option_or_404(option_id)
        apply_changes(option, drop_nulls(req.model_dump(exclude_unset=True)))
        self.db.commit()
        self.db.refresh(option)
        return option

    def delete_option(self, option_id: str):
        option = self._option_or_404(option_id)
        self.repo.delete_option(option)
        self.db.commit()

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.catalog.schemas.schema_menu_item import (
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
)
from app.api.catalog.services.service_menu_item import MenuItemService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/catalog/admin/menu-items",
    tags=["Admin - Catalog - Menu items"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[MenuItemResponse])
def list_menu_items(
    restaurant_id: Optional[str] = Query(None, description="Filter by restaurant"),
    category: Optional[str] = Query(None, description="Filter by category name"),
    db: Session = Depends(get_db),
):
    logger.info(f"[MenuItems] List - restaurant_id={restaurant_id} category={category}")
    return MenuItemService(db).list(restaurant_id=restaurant_id, category=category)


@router.get("/{menu_item_id}", response_model=MenuItemResponse)
def get_menu_item(menu_item_id: str = Path(...), db: Session = Depends(get_db)):
    return MenuItemService(db).get(menu_item_id)


@router.post("", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
def create_menu_item(req: MenuItemCreate, db: Session = Depends(get_db)):
    logger.info(f"[MenuItems] Create - restaurant_id={req.restaurant_id} name={req.name}")
    return MenuItemService(db).create(req)


@router.put("/{menu_item_id}", response_model=MenuItemResponse)
def update_menu_item(
    req: MenuItemUpdate,
    menu_item_id: str = Path(...),
    db: Session = Depends(get_db),
):
    return MenuItemService(db).update(menu_item_id, req)


@router.delete("/{menu_item_id}")
def delete_menu_item(menu_item_id: str = Path(...), db: Session = Depends(get_db)):
    MenuItemService(db).delete(menu_item_id)
    return {"message": "Menu item deleted"}

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.catalog.schemas.schema_addon import (
    AddonCreate,
    AddonUpdate,
    AddonResponse,
    AddonOptionCreate,
    AddonOptionUpdate,
    AddonOptionResponse,
)
from app.api.catalog.services.service_addon import AddonService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/catalog/admin/addons",
    tags=["Admin - Catalog - Addons"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[AddonResponse])
def list_addons(
    menu_item_id: Optional[str] = Query(None),
    category: Optional[str] = Query(None, description="Category name of the menu item"),
    db: Session = Depends(get_db),
):
    return AddonService(db).list(menu_item_id=menu_item_id, category=category)


# ------ Options ------
@router.put("/options/{option_id}", response_model=AddonOptionResponse)
def update_addon_option(
    req: AddonOptionUpdate,
    option_id: str = Path(...),
    db: Session = Depends(get_db),
):
    return AddonService(db).update_option(option_id, req)


@router.delete("/options/{option_id}")
def delete_addon_option(option_id: str = Path(...), db: Session = Depends(get_db)):
    AddonService(db).delete_option(option_id)
    return {"message": "Addon option deleted"}


@router.get("/{addon_id}", response_model=AddonResponse)
def get_addon(addon_id: str = Path(...), db: Session = Depends(get_db)):
    return AddonService(db).get(addon_id)


@router.post("", response_model=AddonResponse, status_code=status.HTTP_201_CREATED)
def create_addon(req: AddonCreate, db: Session = Depends(get_db)):
    logger.info(f"[Addons] Create - menu_item_id={req.menu_item_id} name={req.name}")
    return AddonService(db).create(req)


@router.put("/{addon_id}", response_model=AddonResponse)
def update_addon(
    req: AddonUpdate,
    addon_id: str = Path(...),
    db: Session = Depends(get_db),
):
    return AddonService(db).update(addon_id, req)


@router.delete("/{addon_id}")
def delete_addon(addon_id: str = Path(...), db: Session = Depends(get_db)):
    logger.info(f"[Addons] Delete - id={addon_id}")
    AddonService(db).delete(addon_id)
    return {"message": "Addon deleted"}


@router.get("/{addon_id}/options", response_model=List[AddonOptionResponse])
def list_addon_options(addon_id: str = Path(...), db: Session = Depends(get_db)):
    return AddonService(db).list_options(addon_id)


@router.post("/{addon_id}/options", response_model=AddonOptionResponse, status_code=status.HTTP_201_CREATED)
def create_addon_option(
    req: AddonOptionCreate,
    addon_id: str = Path(...),
    db: Session = Depends(get_db),
):
    return AddonService(db).create_option(addon_id, req)

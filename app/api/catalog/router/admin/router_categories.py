from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.catalog.schemas.schema_category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryLookup,
)
from app.api.catalog.services.service_category import CategoryService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/catalog/admin/categories",
    tags=["Admin - Catalog - Categories"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    active_only: bool = Query(False),
    db: Session = Depends(get_db),
):
    return CategoryService(db).list(active_only)


@router.get("/lookup", response_model=List[CategoryLookup])
def lookup_categories(db: Session = Depends(get_db)):
    return CategoryService(db).lookup()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str = Path(...), db: Session = Depends(get_db)):
    return CategoryService(db).get(category_id)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(req: CategoryCreate, db: Session = Depends(get_db)):
    logger.info(f"[Categories] Create - name={req.name}")
    return CategoryService(db).create(req)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    req: CategoryUpdate,
    category_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Categories] Update - id={category_id}")
    return CategoryService(db).update(category_id, req)


@router.delete("/{category_id}")
def delete_category(category_id: str = Path(...), db: Session = Depends(get_db)):
    logger.info(f"[Categories] Delete - id={category_id}")
    CategoryService(db).delete(category_id)
    return {"message": "Category deleted"}

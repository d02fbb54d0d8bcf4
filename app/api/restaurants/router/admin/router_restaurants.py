from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from app.api.restaurants.schemas.schema_restaurant import (
    RestaurantCreate,
    RestaurantUpdate,
    RestaurantResponse,
    RestaurantLookup,
)
from app.api.restaurants.services.service_restaurant import RestaurantService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/restaurants/admin/restaurants",
    tags=["Admin - Restaurants"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[RestaurantResponse])
def list_restaurants(
    active_only: bool = Query(False, description="Only active restaurants"),
    search: Optional[str] = Query(None, description="Name contains"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Restaurants] List - active_only={active_only} search={search}")
    return RestaurantService(db).list(active_only=active_only, search=search)


@router.get("/lookup", response_model=List[RestaurantLookup])
def lookup_restaurants(db: Session = Depends(get_db)):
    """Id and name of every restaurant, ordered by name."""
    return RestaurantService(db).lookup()


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
def get_restaurant(
    restaurant_id: str = Path(..., description="Restaurant id"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Restaurants] Get - id={restaurant_id}")
    return RestaurantService(db).get(restaurant_id)


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
def create_restaurant(
    req: RestaurantCreate,
    db: Session = Depends(get_db),
):
    logger.info(f"[Restaurants] Create - name={req.name}")
    return RestaurantService(db).create(req)


@router.put("/{restaurant_id}", response_model=RestaurantResponse)
def update_restaurant(
    req: RestaurantUpdate,
    restaurant_id: str = Path(..., description="Restaurant id"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Restaurants] Update - id={restaurant_id}")
    return RestaurantService(db).update(restaurant_id, req)


@router.delete("/{restaurant_id}", status_code=status.HTTP_200_OK)
def delete_restaurant(
    restaurant_id: str = Path(..., description="Restaurant id"),
    db: Session = Depends(get_db),
):
    logger.info(f"[Restaurants] Delete - id={restaurant_id}")
    RestaurantService(db).delete(restaurant_id)
    return {"message": "Restaurant deleted"}

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from app.api.orders.schemas.schema_order import (
    OrderStatus,
    OrderStatusUpdate,
    RiderAssignment,
    OrderResponse,
    OrderItemResponse,
    OrderTrackingResponse,
)
from app.api.orders.services.service_order import OrderService
from app.api.riders.schemas.schema_rider import RiderLookup
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.utils.logger import logger

router = APIRouter(
    prefix="/api/orders/admin/orders",
    tags=["Admin - Orders"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=List[OrderResponse])
def list_orders(
    status: Optional[OrderStatus] = Query(None),
    db: Session = Depends(get_db),
):
    return OrderService(db).list(status)


@router.get("/assignable-riders", response_model=List[RiderLookup])
def list_assignable_riders(db: Session = Depends(get_db)):
    """Active and available riders."""
    return OrderService(db).assignable_riders()


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(order_id: str = Path(...), db: Session = Depends(get_db)):
    return OrderService(db).get(order_id)


@router.get("/{order_id}/items", response_model=List[OrderItemResponse])
def list_order_items(order_id: str = Path(...), db: Session = Depends(get_db)):
    return OrderService(db).items(order_id)


@router.get("/{order_id}/tracking", response_model=List[OrderTrackingResponse])
def list_order_tracking(order_id: str = Path(...), db: Session = Depends(get_db)):
    return OrderService(db).tracking(order_id)


@router.patch("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    req: OrderStatusUpdate,
    order_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Orders] Status - id={order_id} status={req.status}")
    return OrderService(db).update_status(order_id, req)


@router.patch("/{order_id}/rider", response_model=OrderResponse)
def assign_order_rider(
    req: RiderAssignment,
    order_id: str = Path(...),
    db: Session = Depends(get_db),
):
    logger.info(f"[Orders] Rider - id={order_id} rider_id={req.rider_id}")
    return OrderService(db).assign_rider(order_id, req)


@router.delete("/{order_id}")
def delete_order(order_id: str = Path(...), db: Session = Depends(get_db)):
    logger.info(f"[Orders] Delete - id={order_id}")
    OrderService(db).delete(order_id)
    return {"message": "Order deleted"}

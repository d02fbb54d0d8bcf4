from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.api.orders.models.model_order import OrderModel
from app.api.orders.models.model_order_item import OrderItemModel
from app.api.orders.models.model_order_tracking import OrderTrackingModel
from app.api.orders.repositories.repo_order import OrderRepository
from app.api.orders.schemas.schema_order import OrderStatusUpdate, RiderAssignment
from app.api.riders.models.model_rider import RiderModel
from app.api.riders.repositories.repo_rider import RiderRepository
from app.utils.logger import logger
from app.utils.payload import clean_str


class OrderService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepository(db)
        self.repo_rider = RiderRepository(db)

    def _order_or_404(self, order_id: str) -> OrderModel:
        order = self.repo.get_by_id(order_id)
        if not order:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Order not found")
        return order

    def list(self, status_filter: Optional[str] = None) -> List[OrderModel]:
        return self.repo.list(status_filter)

    def get(self, order_id: str) -> OrderModel:
        return self._order_or_404(order_id)

    def items(self, order_id: str) -> List[OrderItemModel]:
        self._order_or_404(order_id)
        return self.repo.list_items(order_id)

    def tracking(self, order_id: str) -> List[OrderTrackingModel]:
        self._order_or_404(order_id)
        return self.repo.list_tracking(order_id)

    def assignable_riders(self) -> List[RiderModel]:
        return self.repo_rider.list_assignable()

    def update_status(self, order_id: str, req: OrderStatusUpdate) -> OrderModel:
        order = self._order_or_404(order_id)
        previous = order.status
        order.status = req.status
        self.repo.add_tracking(order.id, req.status, clean_str(req.notes))
        self.db.commit()
        self.db.refresh(order)
        logger.info(f"[OrderService] Order {order.order_number} status {previous} -> {order.status}")
        return order

    def assign_rider(self, order_id: str, req: RiderAssignment) -> OrderModel:
        order = self._order_or_404(order_id)
        rider_id = clean_str(req.rider_id)
        if rider_id and not self.repo_rider.get_by_id(rider_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Rider {rider_id} does not exist")

        order.rider_id = rider_id
        self.db.commit()
        self.db.refresh(order)
        logger.info(f"[OrderService] Order {order.order_number} rider={rider_id}")
        return order

    def delete(self, order_id: str):
        order = self._order_or_404(order_id)
        self.repo.delete_with_children(order)
        self.db.commit()
        logger.info(f"[OrderService] Deleted id={order_id} with items and tracking")

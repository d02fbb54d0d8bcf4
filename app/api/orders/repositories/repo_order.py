from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.api.orders.models.model_order import OrderModel
from app.api.orders.models.model_order_item import OrderItemModel
from app.api.orders.models.model_order_tracking import OrderTrackingModel


class OrderRepository:
    def __init__(self, db: Session):
        self.db = db

    # ------ Orders ------
    def get_by_id(self, order_id: str) -> Optional[OrderModel]:
        return self.db.query(OrderModel).filter_by(id=order_id).first()

    def list(self, status: Optional[str] = None) -> List[OrderModel]:
        query = self.db.query(OrderModel)
        if status:
            query = query.filter(OrderModel.status == status)
        return query.order_by(OrderModel.created_at.desc()).all()

    def count(self) -> int:
        return self.db.query(OrderModel).count()

    def delete_with_children(self, order: OrderModel):
        """Items, then tracking rows, then the order itself."""
        self.db.query(OrderItemModel).filter(OrderItemModel.order_id == order.id).delete(synchronize_session=False)
        self.db.query(OrderTrackingModel).filter(OrderTrackingModel.order_id == order.id).delete(synchronize_session=False)
        self.db.delete(order)
        self.db.flush()

    # ------ Items / tracking ------
    def list_items(self, order_id: str) -> List[OrderItemModel]:
        return self.db.query(OrderItemModel).filter(OrderItemModel.order_id == order_id).all()

    def list_tracking(self, order_id: str) -> List[OrderTrackingModel]:
        return (
            self.db.query(OrderTrackingModel)
            .filter(OrderTrackingModel.order_id == order_id)
            .order_by(OrderTrackingModel.created_at.asc())
            .all()
        )

    def add_tracking(self, order_id: str, status: str, notes: Optional[str] = None) -> OrderTrackingModel:
        obj = OrderTrackingModel(order_id=order_id, status=status, notes=notes)
        self.db.add(obj)
        self.db.flush()
        return obj

    # ------ Customers ------
    def customer_summaries(self):
        """(user_id, last order timestamp, order count) per customer, most recent first."""
        last_order_at = func.max(OrderModel.created_at).label("last_order_at")
        return (
            self.db.query(
                OrderModel.user_id,
                last_order_at,
                func.count(OrderModel.id).label("order_count"),
            )
            .group_by(OrderModel.user_id)
            .order_by(last_order_at.desc())
            .all()
        )

    def count_customers(self) -> int:
        return self.db.query(func.count(func.distinct(OrderModel.user_id))).scalar() or 0

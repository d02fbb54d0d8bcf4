from .model_order import OrderModel, ORDER_STATUSES
from .model_order_item import OrderItemModel
from .model_order_tracking import OrderTrackingModel

__all__ = [
    "OrderModel",
    "ORDER_STATUSES",
    "OrderItemModel",
    "OrderTrackingModel",
]

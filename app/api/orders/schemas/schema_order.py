from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

OrderStatus = Literal["pending", "confirmed", "preparing", "out_for_delivery", "delivered", "cancelled"]


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
    notes: Optional[str] = None


class RiderAssignment(BaseModel):
    rider_id: Optional[str] = None


class OrderResponse(BaseModel):
    id: str
    user_id: str
    restaurant_id: str
    restaurant_name: Optional[str] = None
    order_number: str
    status: str
    subtotal: float
    delivery_fee: float
    tax: float
    total: float
    total_display: str
    delivery_address: Optional[str] = None
    payment_method: Optional[str] = None
    payment_status: Optional[str] = None
    rider_id: Optional[str] = None
    rider_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemResponse(BaseModel):
    id: str
    order_id: str
    menu_item_id: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    quantity: int
    unit_price: float
    subtotal: float
    special_instructions: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class OrderTrackingResponse(BaseModel):
    id: str
    order_id: str
    status: str
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

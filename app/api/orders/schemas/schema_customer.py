from datetime import datetime
from typing import List

from pydantic import BaseModel


class CustomerResponse(BaseModel):
    id: str
    label: str
    last_order_at: datetime
    order_count: int


class CustomerTotals(BaseModel):
    total: int
    active: int


class CustomerListResponse(BaseModel):
    customers: List[CustomerResponse]
    totals: CustomerTotals

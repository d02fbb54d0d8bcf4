from sqlalchemy.orm import Session

from app.api.orders.repositories.repo_order import OrderRepository
from app.api.orders.schemas.schema_customer import (
    CustomerListResponse,
    CustomerResponse,
    CustomerTotals,
)


def customer_label(user_id: str) -> str:
    return f"user-{user_id[:8]}..."


class CustomerService:
    """Customers are not stored locally; they are derived from who placed orders."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepository(db)

    def list(self) -> CustomerListResponse:
        customers = [
            CustomerResponse(
                id=row.user_id,
                label=customer_label(row.user_id),
                last_order_at=row.last_order_at,
                order_count=row.order_count,
            )
            for row in self.repo.customer_summaries()
        ]
        # Every customer with an order counts as active.
        totals = CustomerTotals(total=len(customers), active=len(customers))
        return CustomerListResponse(customers=customers, totals=totals)

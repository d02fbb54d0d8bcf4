from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.orders.schemas.schema_customer import CustomerListResponse
from app.api.orders.services.service_customer import CustomerService
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db

router = APIRouter(
    prefix="/api/orders/admin/customers",
    tags=["Admin - Customers"],
    dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=CustomerListResponse)
def list_customers(db: Session = Depends(get_db)):
    return CustomerService(db).list()

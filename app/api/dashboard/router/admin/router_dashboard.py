from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Header
from sqlalchemy.orm import Session

from app.api.dashboard.schemas.schema_dashboard import NavigationResponse, OverviewResponse
from app.api.dashboard.services.service_dashboard import DashboardService, build_navigation
from app.config.settings import LANGUAGE_COOKIE
from app.core.admin_dependencies import get_current_user
from app.database.db_connection import get_db
from app.i18n.config import resolve_language

router = APIRouter(
    prefix="/api/dashboard",
    tags=["Admin - Dashboard"],
    dependencies=[Depends(get_current_user)]
)


@router.get("/overview", response_model=OverviewResponse)
def get_overview(db: Session = Depends(get_db)):
    """Restaurant, product, order and customer counts."""
    return DashboardService(db).overview()


@router.get("/navigation", response_model=NavigationResponse)
def get_navigation(
    dashboard_language: Optional[str] = Cookie(None, alias=LANGUAGE_COOKIE),
    accept_language: Optional[str] = Header(None),
):
    return build_navigation(resolve_language(dashboard_language, accept_language))

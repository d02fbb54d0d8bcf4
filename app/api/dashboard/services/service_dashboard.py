from typing import List

from sqlalchemy.orm import Session

from app.api.catalog.repositories.repo_menu_item import MenuItemRepository
from app.api.dashboard.schemas.schema_dashboard import NavItem, NavigationResponse, OverviewResponse
from app.api.orders.repositories.repo_order import OrderRepository
from app.api.restaurants.repositories.repo_restaurant import RestaurantRepository
from app.i18n.config import translate
from app.utils.currency import get_currency_code, get_currency_symbol

# (href, translation key, icon)
NAV_ITEMS = (
    ("/dashboard", "nav.overview", "📊"),
    ("/dashboard/restaurants", "nav.restaurants", "🍽️"),
    ("/dashboard/products", "nav.products", "🍕"),
    ("/dashboard/categories", "nav.categories", "📁"),
    ("/dashboard/events", "nav.events", "🎉"),
    ("/dashboard/party-requests", "nav.party_requests", "🎊"),
    ("/dashboard/addons", "nav.addons", "➕"),
    ("/dashboard/offers", "nav.offers", "🎁"),
    ("/dashboard/riders", "nav.riders", "🏍️"),
    ("/dashboard/customers", "nav.customers", "👥"),
    ("/dashboard/orders", "nav.orders", "📦"),
    ("/dashboard/files", "nav.files", "🗂️"),
    ("/dashboard/content", "nav.content", "📝"),
    ("/dashboard/config", "nav.config", "⚙️"),
)


def build_navigation(language: str) -> NavigationResponse:
    items: List[NavItem] = [
        NavItem(href=href, label=translate(key, language), icon=icon)
        for href, key, icon in NAV_ITEMS
    ]
    return NavigationResponse(
        language=language,
        currency_code=get_currency_code(),
        currency_symbol=get_currency_symbol(),
        items=items,
    )


class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    def overview(self) -> OverviewResponse:
        orders = OrderRepository(self.db)
        return OverviewResponse(
            restaurants=RestaurantRepository(self.db).count(),
            products=MenuItemRepository(self.db).count(),
            orders=orders.count(),
            customers=orders.count_customers(),
        )

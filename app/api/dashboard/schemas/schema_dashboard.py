from typing import List

from pydantic import BaseModel, Field


class OverviewResponse(BaseModel):
    restaurants: int
    products: int
    orders: int
    customers: int


class NavItem(BaseModel):
    href: str
    label: str
    icon: str


class NavigationResponse(BaseModel):
    language: str
    currency_code: str
    currency_symbol: str
    items: List[NavItem]


class LanguageUpdate(BaseModel):
    language: str = Field(..., min_length=2, max_length=5)


class LanguageResponse(BaseModel):
    language: str
    supported: List[str]

from .model_category import CategoryModel
from .model_menu_item import MenuItemModel
from .model_addon import AddonModel, AddonOptionModel

__all__ = [
    "CategoryModel",
    "MenuItemModel",
    "AddonModel",
    "AddonOptionModel",
]

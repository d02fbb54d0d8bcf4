from .model_restaurant import RestaurantModel

__all__ = ["RestaurantModel"]

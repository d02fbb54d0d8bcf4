from .model_special_offer import SpecialOfferModel

__all__ = ["SpecialOfferModel"]

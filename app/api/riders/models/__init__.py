from .model_rider import RiderModel

__all__ = ["RiderModel"]

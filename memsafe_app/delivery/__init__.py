"""
Output delivery module.
"""
from .base import BaseDelivery, DeliveryResult, DeliveryStatus
from .stdout_delivery import StdoutDelivery

__all__ = ["BaseDelivery", "DeliveryResult", "DeliveryStatus", "StdoutDelivery"]

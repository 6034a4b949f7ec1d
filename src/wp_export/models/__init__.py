"""Shopping API data-transfer models."""

from .record import Record, PickupService

__all__ = [
    "Record",
    "PickupService",
]

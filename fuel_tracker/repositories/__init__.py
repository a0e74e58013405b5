"""Couche d'acces aux donnees / Repository layer for data access."""

from fuel_tracker.repositories.fuel_log import FuelLogStore
from fuel_tracker.repositories.vehicle_directory import VehicleDirectory

__all__ = [
    "FuelLogStore",
    "VehicleDirectory",
]

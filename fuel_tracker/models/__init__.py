"""
Modèles SQLAlchemy / SQLAlchemy models.
Importer tous les modèles ici pour que Base.metadata les détecte.
Import all models here so Base.metadata can detect them.
"""

from fuel_tracker.models.vehicle import Vehicle
from fuel_tracker.models.fuel_entry import FuelEntry

__all__ = [
    "Vehicle",
    "FuelEntry",
]

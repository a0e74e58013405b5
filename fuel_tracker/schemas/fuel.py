"""Schemas suivi carburant / Fuel tracking schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


# --- Fuel entries ---

class FuelEntryCreate(BaseModel):
    liters: float = Field(gt=0)
    price: float = Field(ge=0)
    odometer: int = Field(gt=0)
    # Horodatage auto si absent / Auto timestamp when absent
    timestamp: datetime | None = None


class FuelEntryUpdate(BaseModel):
    liters: float = Field(gt=0)
    price: float = Field(ge=0)
    odometer: int = Field(gt=0)


class FuelEntryRead(BaseModel):
    id: int
    vehicle_id: int
    liters: float
    price: float
    odometer: int
    timestamp: datetime

    model_config = {"from_attributes": True}


# --- Stats ---

class FuelStats(BaseModel):
    """Statistiques carburant d'un vehicule / Fuel statistics for one vehicle."""
    total_liters: float = 0.0
    total_price: float = 0.0
    avg_per_100km: float = 0.0

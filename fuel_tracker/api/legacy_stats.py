"""
Ancienne adresse des statistiques / Legacy stats address.
Meme reponse que /api/cars/{id}/fuel/stats, vehicule passe en query string.
Same payload as /api/cars/{id}/fuel/stats, car id given as a query parameter.
"""

from fastapi import APIRouter, Depends, Query

from fuel_tracker.api.deps import get_fuel_entry_service
from fuel_tracker.schemas.fuel import FuelStats
from fuel_tracker.services.fuel_entry_service import FuelEntryService

router = APIRouter(prefix="/servlet", tags=["legacy"])


@router.get("/fuel-stats", response_model=FuelStats)
async def fuel_stats(
    car_id: int = Query(..., alias="carId"),
    service: FuelEntryService = Depends(get_fuel_entry_service),
):
    return await service.get_stats(car_id)

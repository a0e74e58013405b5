"""Routes Pleins / Fuel entry API routes."""

from fastapi import APIRouter, Depends, Request

from fuel_tracker.api.deps import get_fuel_entry_service
from fuel_tracker.config import settings
from fuel_tracker.rate_limit import limiter
from fuel_tracker.schemas.fuel import FuelEntryRead, FuelEntryUpdate
from fuel_tracker.services.fuel_entry_service import FuelEntryService

router = APIRouter()


@router.get("/", response_model=list[FuelEntryRead])
async def list_fuel_entries(service: FuelEntryService = Depends(get_fuel_entry_service)):
    return await service.list_entries()


@router.get("/{entry_id}", response_model=FuelEntryRead)
async def get_fuel_entry(entry_id: int, service: FuelEntryService = Depends(get_fuel_entry_service)):
    return await service.get_entry(entry_id)


@router.put("/{entry_id}", response_model=FuelEntryRead)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def update_fuel_entry(
    request: Request,
    entry_id: int,
    data: FuelEntryUpdate,
    service: FuelEntryService = Depends(get_fuel_entry_service),
):
    """Corriger un plein / Correct a fill-up (liters, price, odometer)."""
    return await service.update_entry(entry_id, data)


@router.delete("/{entry_id}", status_code=204)
async def delete_fuel_entry(entry_id: int, service: FuelEntryService = Depends(get_fuel_entry_service)):
    await service.delete_entry(entry_id)

"""Routes Vehicules / Car API routes."""

from fastapi import APIRouter, Depends, Request

from fuel_tracker.api.deps import get_fuel_entry_service, get_vehicle_service
from fuel_tracker.config import settings
from fuel_tracker.rate_limit import limiter
from fuel_tracker.schemas.fuel import FuelEntryCreate, FuelEntryRead, FuelStats
from fuel_tracker.schemas.vehicle import VehicleCreate, VehicleRead, VehicleUpdate
from fuel_tracker.services.fuel_entry_service import FuelEntryService
from fuel_tracker.services.vehicle_service import VehicleService

router = APIRouter()


@router.get("/", response_model=list[VehicleRead])
async def list_cars(service: VehicleService = Depends(get_vehicle_service)):
    """Lister les vehicules / List cars."""
    return await service.list_vehicles()


@router.get("/{car_id}", response_model=VehicleRead)
async def get_car(car_id: int, service: VehicleService = Depends(get_vehicle_service)):
    """Voir un vehicule / Get car detail."""
    return await service.get_vehicle(car_id)


@router.post("/", response_model=VehicleRead, status_code=201)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def create_car(
    request: Request,
    data: VehicleCreate,
    service: VehicleService = Depends(get_vehicle_service),
):
    """Creer un vehicule / Create car."""
    return await service.create_vehicle(data)


@router.put("/{car_id}", response_model=VehicleRead)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def update_car(
    request: Request,
    car_id: int,
    data: VehicleUpdate,
    service: VehicleService = Depends(get_vehicle_service),
):
    """Modifier un vehicule / Replace a car's descriptive fields."""
    return await service.update_vehicle(car_id, data)


@router.delete("/{car_id}", status_code=204)
async def delete_car(car_id: int, service: VehicleService = Depends(get_vehicle_service)):
    """Supprimer un vehicule et ses pleins / Delete car and its fuel entries."""
    await service.delete_vehicle(car_id)


# ─── Carburant du vehicule / Car fuel ───

@router.post("/{car_id}/fuel", response_model=FuelEntryRead, status_code=201)
@limiter.limit(settings.RATE_LIMIT_WRITE)
async def add_fuel(
    request: Request,
    car_id: int,
    data: FuelEntryCreate,
    service: FuelEntryService = Depends(get_fuel_entry_service),
):
    """Enregistrer un plein / Record a fill-up."""
    return await service.add_fuel(car_id, data)


@router.get("/{car_id}/fuel", response_model=list[FuelEntryRead])
async def list_car_fuel(car_id: int, service: FuelEntryService = Depends(get_fuel_entry_service)):
    """Journal carburant du vehicule / Car fuel log."""
    return await service.list_for_vehicle(car_id)


@router.get("/{car_id}/fuel/stats", response_model=FuelStats)
async def car_fuel_stats(car_id: int, service: FuelEntryService = Depends(get_fuel_entry_service)):
    """Statistiques de consommation / Fuel-economy stats."""
    return await service.get_stats(car_id)

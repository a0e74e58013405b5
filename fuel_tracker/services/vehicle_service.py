"""
Service Vehicules / Vehicle service.
Creation, mise a jour et suppression (avec son journal carburant).
Create, update and delete a vehicle (deleting its fuel log along with it).
"""

import logging
from datetime import datetime, timezone

from fuel_tracker.exceptions import InvalidArgumentError, ResourceNotFoundError
from fuel_tracker.models.vehicle import Vehicle
from fuel_tracker.repositories.fuel_log import FuelLogStore
from fuel_tracker.repositories.vehicle_directory import VehicleDirectory
from fuel_tracker.schemas.vehicle import VehicleCreate, VehicleUpdate
from fuel_tracker.services.locks import VehicleLockRegistry, vehicle_locks
from fuel_tracker.utils.validation import require_id

logger = logging.getLogger(__name__)


class VehicleService:
    def __init__(
        self,
        vehicles: VehicleDirectory,
        fuel_log: FuelLogStore,
        locks: VehicleLockRegistry = vehicle_locks,
    ):
        self.vehicles = vehicles
        self.fuel_log = fuel_log
        self.locks = locks

    async def list_vehicles(self) -> list[Vehicle]:
        return await self.vehicles.list_all()

    async def get_vehicle(self, vehicle_id: int) -> Vehicle:
        require_id(vehicle_id, "Car")
        vehicle = await self.vehicles.get(vehicle_id)
        if vehicle is None:
            raise ResourceNotFoundError(f"Car with ID {vehicle_id} not found")
        return vehicle

    async def create_vehicle(self, data: VehicleCreate) -> Vehicle:
        _check_year(data.year)
        vehicle = await self.vehicles.save(Vehicle(**data.model_dump()))
        logger.info("Created vehicle %s (%s %s %s)", vehicle.id, vehicle.brand, vehicle.model, vehicle.year)
        return vehicle

    async def update_vehicle(self, vehicle_id: int, data: VehicleUpdate) -> Vehicle:
        vehicle = await self.get_vehicle(vehicle_id)
        _check_year(data.year)
        for key, value in data.model_dump().items():
            setattr(vehicle, key, value)
        vehicle = await self.vehicles.save(vehicle)
        logger.info("Updated vehicle %s", vehicle.id)
        return vehicle

    async def delete_vehicle(self, vehicle_id: int) -> None:
        """Supprimer le vehicule et ses pleins / Delete the vehicle and its fill-ups."""
        vehicle = await self.get_vehicle(vehicle_id)
        async with self.locks.for_vehicle(vehicle_id):
            removed = await self.fuel_log.delete_for_vehicle(vehicle_id)
            await self.vehicles.delete(vehicle)
            await self.fuel_log.commit()
        self.locks.discard(vehicle_id)
        logger.info("Deleted vehicle %s and %d fuel entries", vehicle_id, removed)


def _check_year(year: int) -> None:
    current_year = datetime.now(timezone.utc).year
    if year > current_year:
        raise InvalidArgumentError(
            f"Year cannot exceed current year ({current_year})",
            details={"year": year, "current_year": current_year},
        )

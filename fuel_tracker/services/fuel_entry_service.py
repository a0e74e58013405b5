"""
Service Pleins / Fuel entry service.

Chaque ecriture suit : verrou vehicule -> lecture du journal -> validation
du compteur -> ecriture -> commit. Les statistiques lisent le journal
complet et le passent au moteur de calcul.
Every write follows: vehicle lock -> log snapshot -> odometer validation ->
write -> commit. Stats read the full log and hand it to the stats engine.
"""

import logging
from datetime import datetime, timezone

from fuel_tracker.exceptions import OdometerConflictError, ResourceNotFoundError
from fuel_tracker.models.fuel_entry import FuelEntry
from fuel_tracker.repositories.fuel_log import FuelLogStore
from fuel_tracker.repositories.vehicle_directory import VehicleDirectory
from fuel_tracker.schemas.fuel import FuelEntryCreate, FuelEntryUpdate, FuelStats
from fuel_tracker.services.fuel_stats import FuelStatsEngine
from fuel_tracker.services.locks import VehicleLockRegistry, vehicle_locks
from fuel_tracker.services.odometer_validator import OdometerValidator
from fuel_tracker.utils.validation import require_id

logger = logging.getLogger(__name__)


def to_utc_naive(value: datetime) -> datetime:
    """Stockage en UTC sans fuseau / Store as naive UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class FuelEntryService:
    def __init__(
        self,
        vehicles: VehicleDirectory,
        fuel_log: FuelLogStore,
        validator: OdometerValidator,
        stats_engine: type[FuelStatsEngine] = FuelStatsEngine,
        locks: VehicleLockRegistry = vehicle_locks,
    ):
        self.vehicles = vehicles
        self.fuel_log = fuel_log
        self.validator = validator
        self.stats_engine = stats_engine
        self.locks = locks

    async def _require_vehicle(self, vehicle_id: int) -> None:
        require_id(vehicle_id, "Car")
        if not await self.vehicles.exists(vehicle_id):
            raise ResourceNotFoundError(f"Car with ID {vehicle_id} not found")

    # ─── Lecture / Reads ───

    async def list_entries(self) -> list[FuelEntry]:
        return await self.fuel_log.list_all()

    async def get_entry(self, entry_id: int) -> FuelEntry:
        require_id(entry_id, "Fuel entry")
        entry = await self.fuel_log.find_by_id(entry_id)
        if entry is None:
            raise ResourceNotFoundError(f"Fuel entry with ID {entry_id} not found")
        return entry

    async def list_for_vehicle(self, vehicle_id: int) -> list[FuelEntry]:
        await self._require_vehicle(vehicle_id)
        return await self.fuel_log.all_for_vehicle(vehicle_id)

    async def get_stats(self, vehicle_id: int) -> FuelStats:
        await self._require_vehicle(vehicle_id)
        entries = await self.fuel_log.all_for_vehicle(vehicle_id)
        return self.stats_engine.compute_stats(vehicle_id, entries)

    # ─── Ecriture / Writes ───

    async def add_fuel(self, vehicle_id: int, data: FuelEntryCreate) -> FuelEntry:
        """Enregistrer un plein / Record a fill-up."""
        await self._require_vehicle(vehicle_id)

        async with self.locks.for_vehicle(vehicle_id):
            # Le vehicule a pu etre supprime pendant l'attente du verrou /
            # The vehicle may have been deleted while waiting for the lock
            await self._require_vehicle(vehicle_id)
            timestamp = to_utc_naive(data.timestamp) if data.timestamp else utcnow()
            try:
                await self.validator.validate_insert(vehicle_id, data.odometer, timestamp)
            except OdometerConflictError as exc:
                logger.warning("Rejected fuel entry for vehicle %s: %s", vehicle_id, exc.message)
                raise
            entry = FuelEntry(
                vehicle_id=vehicle_id,
                liters=data.liters,
                price=data.price,
                odometer=data.odometer,
                timestamp=timestamp,
            )
            entry = await self.fuel_log.save(entry)
            await self.fuel_log.commit()

        logger.info(
            "Fuel entry %s recorded for vehicle %s: %.2fL at %s",
            entry.id, vehicle_id, entry.liters, entry.odometer,
        )
        return entry

    async def update_entry(self, entry_id: int, data: FuelEntryUpdate) -> FuelEntry:
        """Corriger un plein existant / Correct an existing fill-up in place."""
        entry = await self.get_entry(entry_id)

        async with self.locks.for_vehicle(entry.vehicle_id):
            try:
                await self.validator.validate_edit(entry.vehicle_id, entry.id, entry.timestamp, data.odometer)
            except OdometerConflictError as exc:
                logger.warning("Rejected update of fuel entry %s: %s", entry.id, exc.message)
                raise
            for key, value in data.model_dump().items():
                setattr(entry, key, value)
            entry = await self.fuel_log.save(entry)
            await self.fuel_log.commit()

        logger.info("Fuel entry %s updated (odometer %s)", entry.id, entry.odometer)
        return entry

    async def delete_entry(self, entry_id: int) -> None:
        entry = await self.get_entry(entry_id)
        async with self.locks.for_vehicle(entry.vehicle_id):
            await self.fuel_log.delete(entry)
            await self.fuel_log.commit()
        logger.info("Fuel entry %s deleted", entry_id)

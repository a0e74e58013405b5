"""Annuaire des vehicules / Vehicle directory."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.models.vehicle import Vehicle


class VehicleDirectory:
    """Acces aux vehicules / Vehicle identity records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, vehicle_id: int) -> bool:
        result = await self.db.execute(
            select(func.count(Vehicle.id)).where(Vehicle.id == vehicle_id)
        )
        return bool(result.scalar())

    async def get(self, vehicle_id: int) -> Vehicle | None:
        return await self.db.get(Vehicle, vehicle_id)

    async def list_all(self) -> list[Vehicle]:
        result = await self.db.execute(select(Vehicle).order_by(Vehicle.id))
        return list(result.scalars().all())

    async def save(self, vehicle: Vehicle) -> Vehicle:
        """Inserer ou mettre a jour / Insert or update, assigning an id on insert."""
        self.db.add(vehicle)
        await self.db.flush()
        await self.db.refresh(vehicle)
        return vehicle

    async def delete(self, vehicle: Vehicle) -> None:
        await self.db.delete(vehicle)
        await self.db.flush()

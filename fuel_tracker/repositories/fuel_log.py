"""Journal carburant / Fuel log store.

Seules les operations etroites sont exposees (lecture par vehicule, lecture
par id, ecriture) ; aucun appelant n'itere sur l'etat partage.
Only the narrow operations are exposed (per-vehicle read, read by id, write);
no caller iterates over shared state directly.
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.models.fuel_entry import FuelEntry


class FuelLogStore:
    """Entrees carburant indexees par id et par vehicule / Fuel entries keyed by id and by vehicle."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def all_for_vehicle(self, vehicle_id: int) -> list[FuelEntry]:
        """Journal complet d'un vehicule / Full fuel log of one vehicle.

        Trie par horodatage pour l'affichage ; les consommateurs du coeur
        ne dependent pas de cet ordre.
        Sorted by timestamp for display; core consumers do not rely on it.
        """
        result = await self.db.execute(
            select(FuelEntry)
            .where(FuelEntry.vehicle_id == vehicle_id)
            .order_by(FuelEntry.timestamp, FuelEntry.id)
        )
        return list(result.scalars().all())

    async def find_by_id(self, entry_id: int) -> FuelEntry | None:
        return await self.db.get(FuelEntry, entry_id)

    async def exists(self, entry_id: int) -> bool:
        result = await self.db.execute(
            select(func.count(FuelEntry.id)).where(FuelEntry.id == entry_id)
        )
        return bool(result.scalar())

    async def list_all(self) -> list[FuelEntry]:
        result = await self.db.execute(select(FuelEntry).order_by(FuelEntry.id))
        return list(result.scalars().all())

    async def save(self, entry: FuelEntry) -> FuelEntry:
        """Inserer ou mettre a jour / Insert or update, assigning an id on insert."""
        self.db.add(entry)
        await self.db.flush()
        await self.db.refresh(entry)
        return entry

    async def commit(self) -> None:
        """Valider avant de relacher le verrou vehicule / Commit before releasing the vehicle lock."""
        await self.db.commit()

    async def delete(self, entry: FuelEntry) -> None:
        await self.db.delete(entry)
        await self.db.flush()

    async def delete_for_vehicle(self, vehicle_id: int) -> int:
        """Supprimer tout le journal d'un vehicule / Delete a vehicle's whole log."""
        result = await self.db.execute(
            delete(FuelEntry)
            .where(FuelEntry.vehicle_id == vehicle_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0

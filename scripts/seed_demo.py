"""
Donnees de demonstration / Demo data seeding.

Usage:
    DATABASE_URL=sqlite+aiosqlite:///./fuel_tracker.db python -m scripts.seed_demo

Cree un vehicule et quelques pleins via la couche service (validation du
compteur incluse), puis affiche ses statistiques.
Creates a car and a few fill-ups through the service layer (odometer
validation included), then prints its stats.
"""

import asyncio
import logging
from datetime import timedelta

from fuel_tracker.database import async_session, init_db
from fuel_tracker.repositories.fuel_log import FuelLogStore
from fuel_tracker.repositories.vehicle_directory import VehicleDirectory
from fuel_tracker.schemas.fuel import FuelEntryCreate
from fuel_tracker.schemas.vehicle import VehicleCreate
from fuel_tracker.services.fuel_entry_service import FuelEntryService, utcnow
from fuel_tracker.services.odometer_validator import OdometerValidator
from fuel_tracker.services.vehicle_service import VehicleService

logger = logging.getLogger("fuel_tracker.seed")

# (jours avant aujourd'hui, litres, prix, compteur) / (days ago, liters, price, odometer)
DEMO_FILLS = [
    (30, 42.0, 71.40, 12_400),
    (20, 38.5, 64.68, 12_980),
    (11, 40.2, 69.94, 13_550),
    (2, 35.0, 60.20, 14_090),
]


async def seed():
    await init_db()
    async with async_session() as session:
        vehicles = VehicleDirectory(session)
        fuel_log = FuelLogStore(session)
        vehicle_service = VehicleService(vehicles, fuel_log)
        fuel_service = FuelEntryService(vehicles, fuel_log, OdometerValidator(fuel_log))

        car = await vehicle_service.create_vehicle(VehicleCreate(brand="Renault", model="Clio", year=2019))
        await session.commit()

        now = utcnow()
        for days_ago, liters, price, odometer in DEMO_FILLS:
            await fuel_service.add_fuel(car.id, FuelEntryCreate(
                liters=liters,
                price=price,
                odometer=odometer,
                timestamp=now - timedelta(days=days_ago),
            ))

        stats = await fuel_service.get_stats(car.id)
        logger.info(
            "[seed] Car %s: %.1f L, %.2f spent, %.2f L/100km",
            car.id, stats.total_liters, stats.total_price, stats.avg_per_100km,
        )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())

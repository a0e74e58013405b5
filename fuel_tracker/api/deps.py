"""
Cablage des services / Service wiring.
Chaque requete construit ses services a partir de la session DB ; les
collaborateurs sont passes explicitement aux constructeurs.
Each request builds its services from the DB session; collaborators are
passed explicitly to constructors.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.database import get_db
from fuel_tracker.repositories.fuel_log import FuelLogStore
from fuel_tracker.repositories.vehicle_directory import VehicleDirectory
from fuel_tracker.services.fuel_entry_service import FuelEntryService
from fuel_tracker.services.odometer_validator import OdometerValidator
from fuel_tracker.services.vehicle_service import VehicleService


def get_vehicle_service(db: AsyncSession = Depends(get_db)) -> VehicleService:
    return VehicleService(VehicleDirectory(db), FuelLogStore(db))


def get_fuel_entry_service(db: AsyncSession = Depends(get_db)) -> FuelEntryService:
    fuel_log = FuelLogStore(db)
    return FuelEntryService(
        vehicles=VehicleDirectory(db),
        fuel_log=fuel_log,
        validator=OdometerValidator(fuel_log),
    )

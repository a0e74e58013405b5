"""Routes API / API routes."""

from fastapi import APIRouter

from fuel_tracker.api import cars, fuel_entries

api_router = APIRouter(prefix="/api")

api_router.include_router(cars.router, prefix="/cars", tags=["cars"])
api_router.include_router(fuel_entries.router, prefix="/fuel-entries", tags=["fuel-entries"])

"""Schémas Véhicule / Vehicle schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fuel_tracker.config import settings


class VehicleBase(BaseModel):
    brand: str = Field(max_length=50)
    model: str = Field(max_length=50)
    year: int = Field(ge=settings.MIN_VEHICLE_YEAR)

    @field_validator("brand", "model")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class VehicleCreate(VehicleBase):
    pass


class VehicleUpdate(VehicleBase):
    """Remplacement complet des champs descriptifs / Full replacement of descriptive fields."""


class VehicleRead(VehicleBase):
    model_config = ConfigDict(from_attributes=True)
    id: int

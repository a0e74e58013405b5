"""Modele Vehicule / Vehicle model.

Identite du vehicule suivi (marque, modele, annee).
Identity record of a tracked vehicle (brand, model, model-year).
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fuel_tracker.database import Base


class Vehicle(Base):
    """Vehicule suivi / Tracked vehicle."""
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    # Les entrees sont supprimees par le service / Entries are deleted by the service
    fuel_entries: Mapped[list["FuelEntry"]] = relationship(
        back_populates="vehicle", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Vehicle {self.id} - {self.brand} {self.model} ({self.year})>"

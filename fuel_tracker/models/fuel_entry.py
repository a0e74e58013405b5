"""Modele suivi carburant / Fuel tracking model."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fuel_tracker.database import Base


class FuelEntry(Base):
    """Entree carburant / Fuel entry (one fill-up)."""
    __tablename__ = "fuel_entries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    vehicle_id: Mapped[int] = mapped_column(
        ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    liters: Mapped[float] = mapped_column(Float, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)  # prix total paye / total paid
    odometer: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False)  # UTC naive

    # Relations
    vehicle: Mapped["Vehicle"] = relationship(back_populates="fuel_entries")

    def __repr__(self) -> str:
        return f"<FuelEntry {self.timestamp} - {self.liters}L @ {self.odometer} - vehicle {self.vehicle_id}>"

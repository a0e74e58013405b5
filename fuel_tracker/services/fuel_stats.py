"""
Service de statistiques carburant / Fuel statistics service.

Formule / Formula:
    moyenne (L/100km) = (carburant consomme / distance parcourue) x 100

Politique retenue : le plein le plus recent (par horodatage) est exclu du
carburant consomme, il est considere encore dans le reservoir. Avec une
seule entree, tout le carburant a servi a rouler de 0 au releve.
Chosen policy: the most recent fill (by timestamp) is excluded from fuel
consumed, as it is assumed still in the tank. With a single entry, all of
its fuel was used driving from 0 to its reading.
"""

import logging
import math
from collections.abc import Sequence

from fuel_tracker.models.fuel_entry import FuelEntry
from fuel_tracker.schemas.fuel import FuelStats

log = logging.getLogger(__name__)


class FuelStatsEngine:
    """Calcul des indicateurs de consommation / Fuel-economy metrics."""

    @staticmethod
    def compute_stats(vehicle_id: int, entries: Sequence[FuelEntry]) -> FuelStats:
        """Statistiques d'un journal complet / Stats over one vehicle's full log (any order)."""
        if not entries:
            return FuelStats(total_liters=0.0, total_price=0.0, avg_per_100km=0.0)

        total_liters = sum(e.liters for e in entries)
        total_price = sum(e.price for e in entries)

        distance = FuelStatsEngine.distance_driven(entries)
        consumed = FuelStatsEngine.fuel_consumed(entries)
        avg = FuelStatsEngine.avg_per_100(consumed, distance)

        log.debug(
            "Vehicle %s: %d entries, distance=%s, consumed=%s, avg=%s",
            vehicle_id, len(entries), distance, consumed, avg,
        )
        return FuelStats(
            total_liters=float(total_liters),
            total_price=float(total_price),
            avg_per_100km=avg,
        )

    @staticmethod
    def distance_driven(entries: Sequence[FuelEntry]) -> int:
        """
        Distance = max - min des releves. Releve unique (ou tous egaux) :
        le vehicule est suppose parti de 0.
        Distance = max - min reading. Single (or all equal) reading: the
        vehicle is assumed to have started at 0.
        """
        readings = sorted(e.odometer for e in entries)
        lo, hi = readings[0], readings[-1]
        if lo == hi:
            return hi
        return hi - lo

    @staticmethod
    def fuel_consumed(entries: Sequence[FuelEntry]) -> float:
        if len(entries) == 1:
            return entries[0].liters
        most_recent = max(entries, key=lambda e: (e.timestamp, e.id))
        return sum(e.liters for e in entries if e is not most_recent)

    @staticmethod
    def avg_per_100(consumed: float, distance: int) -> float:
        if distance <= 0:
            return 0.0
        return round_half_up((consumed / distance) * 100.0)


def round_half_up(value: float, digits: int = 2) -> float:
    """Arrondi arithmetique (pas bancaire) / Arithmetic rounding, not banker's: 6.785 -> 6.79."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor

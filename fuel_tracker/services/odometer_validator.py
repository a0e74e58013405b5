"""
Validation du compteur kilometrique / Odometer consistency validation.

Invariant : pour un vehicule, les entrees triees par horodatage ont des
releves kilometriques non decroissants (egalite acceptee).
Invariant: for one vehicle, entries ordered by timestamp carry
non-decreasing odometer readings (ties accepted).
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from fuel_tracker.exceptions import OdometerConflictError
from fuel_tracker.models.fuel_entry import FuelEntry
from fuel_tracker.repositories.fuel_log import FuelLogStore
from fuel_tracker.utils.validation import require_id

log = logging.getLogger(__name__)


class OdometerValidator:
    """Controle des releves contre le journal courant / Check readings against the current log."""

    def __init__(self, fuel_log: FuelLogStore):
        self.fuel_log = fuel_log

    async def validate_insert(
        self,
        vehicle_id: int,
        odometer: int,
        timestamp: datetime | None = None,
    ) -> None:
        """Valider un nouveau plein / Validate a new fill-up against the vehicle's log."""
        require_id(vehicle_id, "Car")
        entries = await self.fuel_log.all_for_vehicle(vehicle_id)
        self.check_insert(entries, odometer, timestamp)

    async def validate_edit(
        self,
        vehicle_id: int,
        entry_id: int,
        entry_timestamp: datetime,
        odometer: int,
    ) -> None:
        """Valider la correction d'un plein existant / Validate an in-place correction."""
        require_id(vehicle_id, "Car")
        require_id(entry_id, "Fuel entry")
        entries = await self.fuel_log.all_for_vehicle(vehicle_id)
        self.check_edit(entries, entry_id, odometer, entry_timestamp)

    @staticmethod
    def check_insert(
        entries: Iterable[FuelEntry],
        odometer: int,
        timestamp: datetime | None = None,
    ) -> None:
        """
        Un nouveau plein est suppose posterieur a tous les autres : son releve
        doit etre >= au maximum deja enregistre.
        A new fill is assumed to happen after all existing ones: its reading
        must be >= the recorded maximum.
        """
        entries = list(entries)
        if not entries:
            return

        max_odometer = max(e.odometer for e in entries)
        if odometer < max_odometer:
            raise OdometerConflictError(
                f"Odometer cannot decrease. Maximum odometer for this car: "
                f"{max_odometer}, New: {odometer}",
                details={"max_odometer": max_odometer, "odometer": odometer},
            )

        # Le nouveau plein ne doit pas s'inserer avant le dernier /
        # The new fill must not land before the latest one
        if timestamp is not None:
            latest = max(entries, key=_timeline_key)
            if timestamp < latest.timestamp:
                raise OdometerConflictError(
                    f"Timestamp cannot precede the latest fuel entry. "
                    f"Latest: {latest.timestamp.isoformat()}, New: {timestamp.isoformat()}",
                    details={
                        "latest_timestamp": latest.timestamp.isoformat(),
                        "timestamp": timestamp.isoformat(),
                    },
                )

    @staticmethod
    def check_edit(
        entries: Iterable[FuelEntry],
        entry_id: int,
        odometer: int,
        entry_timestamp: datetime | None = None,
    ) -> None:
        """
        Le releve corrige doit rester entre ses voisins chronologiques.
        The corrected reading must stay between its timestamp neighbours.
        """
        def key(entry: FuelEntry) -> tuple[datetime, int]:
            if entry.id == entry_id and entry_timestamp is not None:
                return entry_timestamp, entry.id
            return _timeline_key(entry)

        timeline = sorted(entries, key=key)
        index = next((i for i, e in enumerate(timeline) if e.id == entry_id), None)
        if index is None:
            log.warning("Fuel entry %s not found in its vehicle log, skipping odometer check", entry_id)
            return

        if index > 0:
            previous = timeline[index - 1]
            if odometer < previous.odometer:
                raise OdometerConflictError(
                    f"Odometer cannot be below previous entry. "
                    f"Previous odometer: {previous.odometer}, New: {odometer}",
                    details={
                        "neighbor": "previous",
                        "neighbor_id": previous.id,
                        "neighbor_odometer": previous.odometer,
                        "odometer": odometer,
                    },
                )

        if index < len(timeline) - 1:
            following = timeline[index + 1]
            if odometer > following.odometer:
                raise OdometerConflictError(
                    f"Odometer cannot be above next entry. "
                    f"Next odometer: {following.odometer}, New: {odometer}",
                    details={
                        "neighbor": "next",
                        "neighbor_id": following.id,
                        "neighbor_odometer": following.odometer,
                        "odometer": odometer,
                    },
                )


def _timeline_key(entry: FuelEntry) -> tuple[datetime, int]:
    # Egalite d'horodatage : l'id le plus grand est le plus recent /
    # Timestamp ties: the highest id is the most recent
    return entry.timestamp, entry.id

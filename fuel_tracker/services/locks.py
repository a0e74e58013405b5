"""
Verrous par vehicule / Per-vehicle write locks.

Lecture du journal, validation et ecriture d'un plein s'executent sous le
verrou du vehicule : deux ecritures concurrentes ne peuvent pas valider
contre le meme maximum perime.
Log snapshot, validation and write of a fill run under the vehicle's lock:
two concurrent writers cannot both validate against the same stale maximum.
"""

import asyncio


class VehicleLockRegistry:
    """Un asyncio.Lock par vehicule, lie a la boucle courante / One asyncio.Lock per vehicle, bound to the running loop."""

    def __init__(self) -> None:
        self._locks: dict[int, asyncio.Lock] = {}
        self._loop: asyncio.AbstractEventLoop | None = None

    def for_vehicle(self, vehicle_id: int) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        # Nouvelle boucle (tests, rechargement) : repartir de zero / New loop: start over
        if self._loop is not loop:
            self._locks.clear()
            self._loop = loop

        lock = self._locks.get(vehicle_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[vehicle_id] = lock
        return lock

    def discard(self, vehicle_id: int) -> None:
        self._locks.pop(vehicle_id, None)


vehicle_locks = VehicleLockRegistry()

"""
Hierarchie d'exceptions metier / Domain exception hierarchy.

Les routes ne levent pas HTTPException pour ces cas : main.py traduit
chaque classe en code HTTP (404, 409, 400).
Routes do not raise HTTPException for these: main.py maps each class
to an HTTP status code (404, 409, 400).
"""


class FuelTrackerError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(FuelTrackerError):
    """A referenced vehicle or fuel entry does not exist."""


class OdometerConflictError(FuelTrackerError):
    """An odometer value conflicts with the vehicle's existing fuel log."""


class InvalidArgumentError(FuelTrackerError):
    """A required identifier is missing or a field breaks a business rule."""

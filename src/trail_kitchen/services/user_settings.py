"""User settings service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from trail_kitchen.domain.errors import ValidationError
from trail_kitchen.domain.results import PersistOutcome
from trail_kitchen.domain.units import IMPERIAL, METRIC, UNIT_SYSTEMS
from trail_kitchen.services.store import AppStore

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_unit_system(self) -> str | None:
        """Return the stored unit system if set."""

    def set_unit_system(self, unit_system: str) -> None:
        """Update the stored unit system."""


@dataclass
class UserSettingsService:
    """Service for the unit system preference."""

    repository: UserSettingsRepository
    store: AppStore
    default_unit_system: str = METRIC

    def load(self) -> PersistOutcome:
        """Read the stored preference into the snapshot, falling back to default."""
        try:
            stored = self.repository.get_unit_system()
        except Exception as exc:
            _logger.exception("Failed to load unit system")
            self.store.unit_system = self.default_unit_system
            return PersistOutcome(entity_id="unit_system", ok=False, error=str(exc))
        self.store.unit_system = (
            stored if stored in UNIT_SYSTEMS else self.default_unit_system
        )
        return PersistOutcome(entity_id="unit_system", ok=True)

    def get_unit_system(self) -> str:
        return self.store.unit_system

    def set_unit_system(self, unit_system: str) -> PersistOutcome:
        """Apply a preference locally and persist it, reverting on failure."""
        if unit_system not in UNIT_SYSTEMS:
            raise ValidationError(f"Unknown unit system: {unit_system}")
        previous = self.store.unit_system
        self.store.unit_system = unit_system
        try:
            self.repository.set_unit_system(unit_system)
        except Exception as exc:
            _logger.exception("Failed to persist unit system")
            self.store.unit_system = previous
            return PersistOutcome(entity_id="unit_system", ok=False, error=str(exc))
        return PersistOutcome(entity_id="unit_system", ok=True)

    def toggle_unit_system(self) -> PersistOutcome:
        """Switch between metric and imperial."""
        target = METRIC if self.store.unit_system == IMPERIAL else IMPERIAL
        return self.set_unit_system(target)

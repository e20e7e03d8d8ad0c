"""
Registry service - Business logic for registry operations.

Mutating calls go through the access guard, then the validator, then the
registry. Reads go straight to the registry.
"""

import logging
from collections.abc import Iterable

from nft_registry.auth.guard import AccessGuard, ControllerState
from nft_registry.core.exceptions import ControllerNotInitializedError, NotAuthorized
from nft_registry.models.canister import CanisterInfo
from nft_registry.models.detail import detail_to_python
from nft_registry.services.registry import Registry, SnapshotEntry
from nft_registry.services.validator import validate_canister

logger = logging.getLogger(__name__)


class RegistryService:
    """Service class for one controller-administered registry."""

    def __init__(self, name: str):
        self._name = name
        self.controller = ControllerState()
        self.guard = AccessGuard(self.controller)
        self.registry = Registry()

    @property
    def is_active(self) -> bool:
        """Whether initialize() has run."""
        return self.controller.is_initialized

    def name(self) -> str:
        return self._name

    def initialize(self, caller: str) -> None:
        """
        Make the initializing caller the controller.
        Must run once, at startup, before any other operation.
        """
        self.controller.initialize(caller)
        logger.info(f"{self._name}: controller initialized to {caller}")

    def _require_active(self) -> None:
        if not self.is_active:
            raise ControllerNotInitializedError(f"{self._name} has not been initialized")

    def require_controller(self, caller: str, action: str) -> None:
        """
        Reject callers other than the current controller.

        Raises:
            NotAuthorized: If the caller is not the current controller
        """
        if not self.guard.authorize(caller):
            logger.warning(f"{self._name}: {action} rejected for non-controller {caller}")
            raise NotAuthorized()

    def replace_controller(self, caller: str, new_controller: str) -> None:
        """
        Hand registry control to another identifier.

        Args:
            caller: Authenticated caller identifier
            new_controller: Identifier of the new controller

        Raises:
            NotAuthorized: If the caller is not the current controller
        """
        self.require_controller(caller, "replace_controller")
        self.controller.replace(new_controller)
        logger.info(f"{self._name}: controller changed from {caller} to {new_controller}")

    def add(self, caller: str, canister: CanisterInfo) -> None:
        """
        Register or replace a canister record.

        Authorization is checked before validation, so a non-controller
        never learns why a record would have been rejected.

        Args:
            caller: Authenticated caller identifier
            canister: Record to store

        Raises:
            NotAuthorized: If the caller is not the current controller
            BadParameters: If the record fails validation
        """
        self.require_controller(caller, "add")
        validate_canister(canister)

        replaced = canister.principal_id in self.registry
        self.registry.insert(canister)

        _, standard = canister.details[0]
        logger.info(
            f"{self._name}: {'updated' if replaced else 'added'} {canister.principal_id} "
            f"(standard={detail_to_python(standard)!r})"
        )

    def remove(self, caller: str, principal_id: str) -> None:
        """
        Remove a canister record.

        Raises:
            NotAuthorized: If the caller is not the current controller
            NonExistentItem: If nothing is registered under the id
        """
        self.require_controller(caller, "remove")
        self.registry.remove(principal_id)
        logger.info(f"{self._name}: removed {principal_id}")

    def get(self, principal_id: str) -> CanisterInfo | None:
        self._require_active()
        return self.registry.lookup(principal_id)

    def get_all(self) -> list[CanisterInfo]:
        self._require_active()
        return self.registry.list_all()

    def export_snapshot(self) -> list[SnapshotEntry]:
        """Drain the registry for persistence before shutdown."""
        entries = self.registry.export_snapshot()
        logger.info(f"{self._name}: exported {len(entries)} records")
        return entries

    def import_snapshot(self, entries: Iterable[SnapshotEntry]) -> None:
        """
        Restore a snapshot taken by export_snapshot().

        Raises:
            SnapshotInvariantError: If the registry is not empty
        """
        self.registry.import_snapshot(entries)
        logger.info(f"{self._name}: imported {len(self.registry)} records")

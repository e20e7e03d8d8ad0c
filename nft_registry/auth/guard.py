"""
Single-controller authority model.

A registry service owns one ``ControllerState``; its ``AccessGuard`` reads
that state by reference to decide whether a caller may mutate the registry.
"""

from nft_registry.core.exceptions import (
    ControllerAlreadyInitializedError,
    ControllerNotInitializedError,
)


class ControllerState:
    """Holds the identifier of the current controller."""

    def __init__(self) -> None:
        self._current: str | None = None

    @property
    def is_initialized(self) -> bool:
        return self._current is not None

    @property
    def current(self) -> str:
        """
        The current controller.

        Raises:
            ControllerNotInitializedError: If initialize() has not run
        """
        if self._current is None:
            raise ControllerNotInitializedError("Controller read before initialization")
        return self._current

    def initialize(self, caller: str) -> None:
        """Set the first controller. Allowed exactly once."""
        if self._current is not None:
            raise ControllerAlreadyInitializedError(
                f"Controller already initialized to '{self._current}'"
            )
        self._current = caller

    def replace(self, new_controller: str) -> None:
        """Overwrite the controller. Callers must be authorized beforehand."""
        if self._current is None:
            raise ControllerNotInitializedError("Controller replaced before initialization")
        self._current = new_controller


class AccessGuard:
    """Authorization predicate against a shared controller state."""

    def __init__(self, state: ControllerState) -> None:
        self.state = state

    def authorize(self, caller: str) -> bool:
        """True iff the caller is the current controller."""
        return caller == self.state.current

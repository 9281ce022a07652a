"""Status strategies for variant C digital devices."""

from abc import ABC, abstractmethod

from devicemanager import constants


class StatusStrategy(ABC):
    """Advances and reports the status of a variant C device."""

    @abstractmethod
    def execute(self, device) -> str:
        """Advance the device's status and return the new status text."""

    @abstractmethod
    def peek(self, device) -> str:
        """Return the device's status text without changing it."""


class StrategyGen1(StatusStrategy):
    """First generation: steps of ten percent, reported as a percentage."""

    def execute(self, device) -> str:
        device.internal_percentage = min(device.internal_percentage + 10, 100)
        return self.peek(device)

    def peek(self, device) -> str:
        return f"{device.internal_percentage}%"


class StrategyGen2(StatusStrategy):
    """Second generation: steps of one percent, with named end states."""

    def execute(self, device) -> str:
        device.internal_percentage = min(device.internal_percentage + 1, 100)
        return self.peek(device)

    def peek(self, device) -> str:
        percentage = device.internal_percentage
        if percentage == 0:
            return constants.OPENED
        if percentage == 100:
            return constants.CLOSED
        return f"{percentage}%"
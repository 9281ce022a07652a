"""Generators that hand out device identifiers."""

from abc import ABC, abstractmethod

from devicemanager import constants


class IDGenerator(ABC):
    """Source of device identifiers."""

    @abstractmethod
    def next_free_id(self) -> int:
        """Return the next unused identifier."""

    @abstractmethod
    def max_id(self) -> int:
        """Return the largest identifier this generator can produce."""


class SequentialIDGenerator(IDGenerator):
    """Hands out identifiers in ascending order within a closed range."""

    def __init__(self, min_id: int, max_id: int) -> None:
        self._min_id = min_id
        self._max_id = max_id
        self._current_id = min_id

    def next_free_id(self) -> int:
        """Return the next identifier; raise IndexError once the range is used up."""
        if self._current_id > self._max_id:
            raise IndexError("No more IDs available.")
        current = self._current_id
        self._current_id += 1
        return current

    def max_id(self) -> int:
        return self._max_id


class StandardAnalogIDGenerator(SequentialIDGenerator):
    """Sequential generator over the analog identifier range."""

    def __init__(self) -> None:
        super().__init__(constants.ANALOG_MIN_ID, constants.ANALOG_MAX_ID)


class StandardDigitalIDGenerator(SequentialIDGenerator):
    """Sequential generator over the digital identifier range."""

    def __init__(self) -> None:
        super().__init__(constants.DIGITAL_MIN_ID, constants.DIGITAL_MAX_ID)
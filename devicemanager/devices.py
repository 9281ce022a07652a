"""Device types: analog, digital and the digital variants."""

from abc import ABC, abstractmethod
from typing import Mapping

from devicemanager import constants
from devicemanager.constants import Generation
from devicemanager.idgen import IDGenerator
from devicemanager.randomizer import Randomizer
from devicemanager.strategies import StatusStrategy


class DevicePresenter(ABC):
    """Displays information about a device."""

    @abstractmethod
    def print_info(self, device: "Device") -> None:
        """Show the device's details."""


class Device:
    """A named device with an identifier drawn from a generator."""

    def __init__(self, name: str, presenter: DevicePresenter, id_generator: IDGenerator) -> None:
        if id_generator is None:
            raise ValueError("IDGenerator cannot be null")
        if presenter is None:
            raise ValueError("Presenter is not set. Cannot print device info.")
        self._name = name
        self._presenter = presenter
        self._id = id_generator.next_free_id()
        self._padding = id_generator.max_id()

    @property
    def name(self) -> str:
        return self._name

    @property
    def device_id(self) -> int:
        return self._id

    def print_info(self) -> None:
        """Hand the device to its presenter."""
        self._presenter.print_info(self)

    def prefix(self) -> str:
        """Return the prefix placed before the identifier in the description."""
        return ""

    def description(self) -> str:
        """Return the prefix followed by the identifier, zero-padded to the width of the maximum id."""
        width = len(str(self._padding))
        return f"{self.prefix()}{self._id:0{width}d}"


class AnalogDevice(Device):
    """An analog device."""

    def prefix(self) -> str:
        return constants.ANALOG_PREFIX


class DigitalDevice(Device):
    """A digital device with a status."""

    def prefix(self) -> str:
        return constants.DIGITAL_PREFIX

    def status(self) -> str:
        return "Digital Device Status"

    def update_status(self) -> str:
        return "Digital Device Updated Status"


class DigitalDeviceVariantA(DigitalDevice):
    """Digital device whose status is a random reading."""

    def __init__(
        self,
        name: str,
        presenter: DevicePresenter,
        id_generator: IDGenerator,
        randomizer: Randomizer,
    ) -> None:
        super().__init__(name, presenter, id_generator)
        self._randomizer = randomizer
        self._reading = 0.0
        self.update_status()

    def update_status(self) -> str:
        """Take a new random reading and return it with six decimals."""
        self._reading = self._randomizer.random_float(constants.MIN_STATUS, constants.MAX_STATUS)
        return f"{self._reading:.6f}"

    def status(self) -> str:
        if self._reading == constants.MIN_STATUS:
            return constants.LOW
        if self._reading == constants.MAX_STATUS:
            return constants.HIGH
        return f"{self._reading:.1f}"


class DigitalDeviceVariantB(DigitalDevice):
    """Digital device that toggles between on and off."""

    def __init__(self, name: str, presenter: DevicePresenter, id_generator: IDGenerator) -> None:
        super().__init__(name, presenter, id_generator)
        self._on = False

    def status(self) -> str:
        return constants.ON if self._on else constants.OFF

    def update_status(self) -> str:
        self._on = not self._on
        return self.status()


class DigitalDeviceVariantC(DigitalDevice):
    """Digital device whose status progresses by a generation-specific strategy."""

    def __init__(
        self,
        name: str,
        presenter: DevicePresenter,
        id_generator: IDGenerator,
        strategies: Mapping[Generation, StatusStrategy],
    ) -> None:
        super().__init__(name, presenter, id_generator)
        self._strategies = dict(strategies)
        self.internal_percentage = 0
        self.generation = (
            Generation.GEN2 if self.device_id >= constants.ID_GEN1_CAP else Generation.GEN1
        )

    def description(self) -> str:
        base = super().description()
        if self.generation is Generation.GEN1:
            return base
        if self.generation is Generation.GEN2:
            return base + constants.GEN2_OUTPUT_MODIFIER
        raise RuntimeError("Unknown generation")

    def update_status(self) -> str:
        """Advance the status; raise KeyError if no strategy serves this generation."""
        return self._strategies[self.generation].execute(self)

    def status(self) -> str:
        return self._strategies[self.generation].peek(self)
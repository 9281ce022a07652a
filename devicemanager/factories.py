"""Factories that build devices sharing an identifier generator."""

from abc import ABC, abstractmethod
from typing import Mapping

from devicemanager.constants import Generation
from devicemanager.devices import (
    AnalogDevice,
    Device,
    DevicePresenter,
    DigitalDevice,
    DigitalDeviceVariantA,
    DigitalDeviceVariantB,
    DigitalDeviceVariantC,
)
from devicemanager.idgen import IDGenerator
from devicemanager.randomizer import Randomizer
from devicemanager.strategies import StatusStrategy


class DeviceFactory(ABC):
    """Creates devices whose identifiers come from one generator."""

    def __init__(self, id_generator: IDGenerator) -> None:
        self._id_generator = id_generator

    @property
    def id_generator(self) -> IDGenerator:
        return self._id_generator

    @abstractmethod
    def create_device(self, name: str, presenter: DevicePresenter) -> Device:
        """Create a device with the given name and presenter."""


class AnalogDeviceFactory(DeviceFactory):
    """Creates analog devices."""

    def create_device(self, name: str, presenter: DevicePresenter) -> AnalogDevice:
        return AnalogDevice(name, presenter, self.id_generator)


class DigitalDeviceFactory(DeviceFactory):
    """Creates digital devices and their variants."""

    def __init__(
        self,
        id_generator: IDGenerator,
        randomizer: Randomizer,
        strategies: Mapping[Generation, StatusStrategy],
    ) -> None:
        super().__init__(id_generator)
        # Every created device shares the same randomizer and strategies.
        self._randomizer = randomizer
        self._strategies = dict(strategies)

    def create_device(self, name: str, presenter: DevicePresenter) -> DigitalDevice:
        return DigitalDevice(name, presenter, self.id_generator)

    def create_variant_a(self, name: str, presenter: DevicePresenter) -> DigitalDeviceVariantA:
        return DigitalDeviceVariantA(name, presenter, self.id_generator, self._randomizer)

    def create_variant_b(self, name: str, presenter: DevicePresenter) -> DigitalDeviceVariantB:
        return DigitalDeviceVariantB(name, presenter, self.id_generator)

    def create_variant_c(self, name: str, presenter: DevicePresenter) -> DigitalDeviceVariantC:
        return DigitalDeviceVariantC(name, presenter, self.id_generator, self._strategies)
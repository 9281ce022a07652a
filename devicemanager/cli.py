"""Command that creates a batch of sample devices and prints them."""

import argparse
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from devicemanager.constants import Generation
from devicemanager.devices import Device, DevicePresenter
from devicemanager.factories import AnalogDeviceFactory, DigitalDeviceFactory
from devicemanager.idgen import StandardAnalogIDGenerator, StandardDigitalIDGenerator
from devicemanager.presenter import DefaultDevicePresenter
from devicemanager.randomizer import StandardRandomizer
from devicemanager.strategies import StrategyGen1, StrategyGen2

SEPARATOR = "-" * 40
DEVICES_TO_GENERATE = 5


def generate_data(
    count: int,
    presenter: DevicePresenter,
    analog_factory: AnalogDeviceFactory,
    digital_factory: DigitalDeviceFactory,
) -> List[Device]:
    """Create `count` rounds of one analog, one digital and one of each digital variant."""
    devices: List[Device] = []
    for current in range(count):
        device_name = f" Device {current}"
        devices.append(analog_factory.create_device("Analog " + device_name, presenter))
        devices.append(digital_factory.create_device("Digital " + device_name, presenter))
        devices.append(digital_factory.create_variant_a("Digital Variant A" + device_name, presenter))
        devices.append(digital_factory.create_variant_b("Digital Variant B" + device_name, presenter))
        devices.append(digital_factory.create_variant_c("Digital Variant C" + device_name, presenter))
    return devices


def show_data(devices: Iterable[Device], stream: Optional[TextIO] = None) -> None:
    """Print every device, each followed by a separator line."""
    out = stream if stream is not None else sys.stdout
    for device in devices:
        device.print_info()
        out.write(SEPARATOR + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="devicemanager", description="Create sample devices and print their details."
    )
    parser.parse_args(argv)

    strategies = {Generation.GEN1: StrategyGen1(), Generation.GEN2: StrategyGen2()}
    analog_factory = AnalogDeviceFactory(StandardAnalogIDGenerator())
    digital_factory = DigitalDeviceFactory(
        StandardDigitalIDGenerator(), StandardRandomizer(), strategies
    )
    devices = generate_data(
        DEVICES_TO_GENERATE, DefaultDevicePresenter(), analog_factory, digital_factory
    )
    show_data(devices)
    return 0


if __name__ == "__main__":
    sys.exit(main())
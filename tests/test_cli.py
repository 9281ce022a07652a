import io

from devicemanager import constants
from devicemanager.cli import generate_data, main, show_data
from devicemanager.constants import Generation
from devicemanager.devices import (
    AnalogDevice,
    DigitalDevice,
    DigitalDeviceVariantA,
    DigitalDeviceVariantB,
    DigitalDeviceVariantC,
)
from devicemanager.factories import AnalogDeviceFactory, DigitalDeviceFactory
from devicemanager.idgen import StandardAnalogIDGenerator, StandardDigitalIDGenerator
from devicemanager.presenter import DefaultDevicePresenter
from devicemanager.randomizer import StandardRandomizer
from devicemanager.strategies import StrategyGen1, StrategyGen2

SEPARATOR = "-" * 40


def _generate(count, stream):
    strategies = {Generation.GEN1: StrategyGen1(), Generation.GEN2: StrategyGen2()}
    return generate_data(
        count,
        DefaultDevicePresenter(stream),
        AnalogDeviceFactory(StandardAnalogIDGenerator()),
        DigitalDeviceFactory(StandardDigitalIDGenerator(), StandardRandomizer(7), strategies),
    )


def test_generate_data_order_and_count():
    devices = _generate(2, io.StringIO())
    assert len(devices) == 10
    kinds = [type(d) for d in devices[:5]]
    assert kinds == [
        AnalogDevice,
        DigitalDevice,
        DigitalDeviceVariantA,
        DigitalDeviceVariantB,
        DigitalDeviceVariantC,
    ]


def test_generate_data_names():
    devices = _generate(1, io.StringIO())
    assert [d.name for d in devices] == [
        "Analog  Device 0",
        "Digital  Device 0",
        "Digital Variant A Device 0",
        "Digital Variant B Device 0",
        "Digital Variant C Device 0",
    ]


def test_generate_data_ids_are_sequential():
    devices = _generate(3, io.StringIO())
    analog_ids = [d.device_id for d in devices if isinstance(d, AnalogDevice)]
    digital_ids = [d.device_id for d in devices if isinstance(d, DigitalDevice)]
    assert analog_ids[0] == constants.ANALOG_MIN_ID
    assert analog_ids == list(range(analog_ids[0], analog_ids[0] + 3))
    assert digital_ids[0] == constants.DIGITAL_MIN_ID
    assert digital_ids == list(range(digital_ids[0], digital_ids[0] + 12))


def test_generate_zero_is_empty():
    assert _generate(0, io.StringIO()) == []


def test_show_data_writes_separator_per_device():
    out = io.StringIO()
    devices = _generate(1, out)
    show_data(devices, out)
    text = out.getvalue()
    assert text.count(SEPARATOR + "\n") == len(devices)
    assert text.endswith(SEPARATOR + "\n")
    assert " - Device Name: Analog  Device 0\n" in text


def test_main_prints_all_devices(capsys):
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.count(SEPARATOR + "\n") == 25
    assert output.count(" - Device Name: ") == 25
    assert output.count(" - Device Status: ") == 20
    assert " - Device Name: Digital Variant C Device 4\n" in output
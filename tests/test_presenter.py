import io

from devicemanager import constants
from devicemanager.devices import AnalogDevice, DigitalDeviceVariantB
from devicemanager.idgen import StandardAnalogIDGenerator, StandardDigitalIDGenerator
from devicemanager.presenter import DefaultDevicePresenter


def test_analog_device_prints_three_lines():
    out = io.StringIO()
    presenter = DefaultDevicePresenter(out)
    device = AnalogDevice("Sensor", presenter, StandardAnalogIDGenerator())
    device.print_info()
    lines = out.getvalue().splitlines()
    assert lines == [
        " - Device Name: Sensor",
        f" - Device Id: {device.device_id}",
        f" - Device Description: {device.description()}",
    ]


def test_digital_device_also_prints_status():
    out = io.StringIO()
    presenter = DefaultDevicePresenter(out)
    device = DigitalDeviceVariantB("Switch", presenter, StandardDigitalIDGenerator())
    device.print_info()
    lines = out.getvalue().splitlines()
    assert len(lines) == 4
    assert lines[0] == " - Device Name: Switch"
    assert lines[3] == f" - Device Status: {constants.OFF}"


def test_status_line_follows_updates():
    out = io.StringIO()
    presenter = DefaultDevicePresenter(out)
    device = DigitalDeviceVariantB("Switch", presenter, StandardDigitalIDGenerator())
    device.update_status()
    presenter.print_info(device)
    assert out.getvalue().splitlines()[-1] == f" - Device Status: {constants.ON}"


def test_default_stream_is_stdout(capsys):
    presenter = DefaultDevicePresenter()
    device = AnalogDevice("Meter", presenter, StandardAnalogIDGenerator())
    device.print_info()
    captured = capsys.readouterr().out
    assert " - Device Name: Meter\n" in captured
    assert f" - Device Description: {device.description()}\n" in captured
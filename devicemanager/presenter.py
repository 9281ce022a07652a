"""Presenter that writes device details as plain text."""

import sys
from typing import Optional, TextIO

from devicemanager.devices import Device, DevicePresenter, DigitalDevice


class DefaultDevicePresenter(DevicePresenter):
    """Writes a device's name, id, description and, for digital devices, status."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The stream written to; standard output unless one was given."""
        return self._stream if self._stream is not None else sys.stdout

    def print_info(self, device: Device) -> None:
        out = self.stream
        out.write(f" - Device Name: {device.name}\n")
        out.write(f" - Device Id: {device.device_id}\n")
        out.write(f" - Device Description: {device.description()}\n")
        if isinstance(device, DigitalDevice):
            out.write(f" - Device Status: {device.status()}\n")
# devicemanager

A small library and command that create devices, give them identifiers from
fixed ranges and print their details.

## Installing

    pip install .

To run the test suite as well:

    pip install ".[test]"
    pytest

## Running

    devicemanager

The command takes no options apart from `--help`. It creates five rounds of
devices. Each round has one analog device, one plain digital device and one
digital device of each variant (A, B and C). It then prints each device's
name, ID, description and, for digital devices, its current status. A line
of forty dashes follows each device.

## Devices

All device classes live in `devicemanager.devices`.

- `AnalogDevice` uses the prefix `AD`. With `StandardAnalogIDGenerator` its
  IDs run from 100 to 9999.
- `DigitalDevice` uses the prefix `DD`. With `StandardDigitalIDGenerator` its
  IDs run from 10000 to 19999.
- The description of a device is its prefix followed by its ID. The ID is
  zero-padded to as many digits as the generator's largest ID has, so an
  analog device with ID 100 is described as `AD0100`.
- `DigitalDeviceVariantA` takes a random reading between -50.0 and 70.0 when
  it is created and each time `update_status()` is called. `status()` gives
  the reading to one decimal place, or `Low` or `High` when the reading is
  exactly -50.0 or 70.0.
- `DigitalDeviceVariantB` switches between `Off` and `On` on each
  `update_status()`. A new device starts `Off`.
- `DigitalDeviceVariantC` holds a percentage, starting at 0, that rises each
  time `update_status()` is called. Devices with IDs below 15000 are
  `Generation.GEN1` and use `StrategyGen1`: they rise by 10 each update and
  report values such as `40%`. Devices with IDs of 15000 or more are
  `Generation.GEN2` and use `StrategyGen2`: they rise by 1 each update,
  report `Opened` at 0% and `Closed` at 100%, and have `(Gen 2)` appended to
  their description. In both generations the percentage stops at 100.
  Updating or reading the status raises `KeyError` if no strategy was given
  for the device's generation.

## Using the library

    from devicemanager.constants import Generation
    from devicemanager.factories import AnalogDeviceFactory, DigitalDeviceFactory
    from devicemanager.idgen import StandardAnalogIDGenerator, StandardDigitalIDGenerator
    from devicemanager.presenter import DefaultDevicePresenter
    from devicemanager.randomizer import StandardRandomizer
    from devicemanager.strategies import StrategyGen1, StrategyGen2

    presenter = DefaultDevicePresenter()
    analog = AnalogDeviceFactory(StandardAnalogIDGenerator())
    digital = DigitalDeviceFactory(
        StandardDigitalIDGenerator(),
        StandardRandomizer(),
        {Generation.GEN1: StrategyGen1(), Generation.GEN2: StrategyGen2()},
    )

    device = digital.create_variant_c("Blind", presenter)
    device.update_status()
    device.print_info()

`DefaultDevicePresenter` writes to standard output, or to the text stream
passed as its `stream` argument. `StandardRandomizer` accepts an optional
`seed` for repeatable readings. `SequentialIDGenerator(min_id, max_id)` hands
out IDs in ascending order over any range; `devicemanager.cli` also offers
`generate_data()` and `show_data()` for building and printing a batch of
devices.

## Errors

- An ID generator raises `IndexError` once its range is used up.
- Creating a device without an ID generator or without a presenter raises
  `ValueError`.

## What it does not do

Devices exist only in memory for as long as the program runs: nothing is
saved or loaded, and no device talks to real hardware. Variant A readings
come from a randomizer, and the other statuses change only when
`update_status()` is called.
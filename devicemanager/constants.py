"""Identifier ranges, prefixes and status labels shared by all devices."""

from enum import Enum


class Generation(Enum):
    """Hardware generation of a variant C digital device."""

    GEN1 = "Gen1"
    GEN2 = "Gen2"


class Variant(Enum):
    """Kinds of specialised digital devices."""

    VARIANT_A = "VariantA"
    VARIANT_B = "VariantB"
    VARIANT_C = "VariantC"


ANALOG_MIN_ID = 100
ANALOG_MAX_ID = 9999
ANALOG_PREFIX = "AD"

DIGITAL_MIN_ID = 10000
DIGITAL_MAX_ID = 19999
DIGITAL_PREFIX = "DD"

MIN_STATUS = -50.0
MAX_STATUS = 70.0

ON = "On"
OFF = "Off"
LOW = "Low"
HIGH = "High"
GEN2_OUTPUT_MODIFIER = "(Gen 2)"
OPENED = "Opened"
CLOSED = "Closed"

ID_GEN1_CAP = 15000
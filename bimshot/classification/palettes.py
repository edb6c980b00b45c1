"""Mini README: Colour palettes used to tint model objects.

Structure:
    * STATUS_PALETTE / status_color - construction states and delay buckets.
    * ATTENTION_PALETTE / attention_color - attention outcomes.
    * hex_to_rgb - ``#rrggbb`` to fractional RGB.

All colours are RGB triples with components in [0, 1]. The two ``#...``
keys of the status palette are literal lookup strings sent by the planner,
not hex colours to decode.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

import numpy as np

from .records import RGB

BLACK: RGB = (0.0, 0.0, 0.0)
NEUTRAL_GRAY: RGB = (0.5, 0.5, 0.5)

EARLY = "Early"
ON_TIME = "On Time"
LATE = "Late"

STATUS_DEFAULT: RGB = (1.0, 1.0, 1.0)
STATUS_PALETTE: Mapping[str, RGB] = MappingProxyType(
    {
        "Curing": (1.0, 1.0, 0.0),
        "Detailing Approved": (1.0, 0.455, 1.0),
        "Elements in Workshop": (1.0, 0.4, 0.0),
        "Transit": (0.004, 0.686, 0.933),
        "Elements Onsite": (0.0, 0.439, 0.753),
        "Precast Reception": (0.004, 0.439, 0.749),
        EARLY: (0.012, 0.686, 0.318),
        ON_TIME: (0.5, 0.5, 0.5),
        LATE: (0.988, 0.016, 0.008),
        "Precast Approved": (1.0, 0.753, 0.012),
        "#03af51": (0.988, 0.016, 0.008),
        "#aaaaaa": (0.012, 0.686, 0.318),
    }
)

ATTENTION_DEFAULT: RGB = (0.012, 0.686, 0.318)
ATTENTION_PALETTE: Mapping[str, RGB] = MappingProxyType(
    {
        "No Atendió": (0.988, 0.016, 0.008),
        "Atención Total": (0.012, 0.686, 0.318),
    }
)

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


def status_color(status: Optional[str]) -> RGB:
    """Colour for a planner state or delay bucket; unknown states are white."""

    return STATUS_PALETTE.get(status, STATUS_DEFAULT) if isinstance(status, str) else STATUS_DEFAULT


def attention_color(attention: Optional[str]) -> RGB:
    """Colour for an attention outcome; anything unrecognised counts as attended."""

    return ATTENTION_PALETTE.get(attention, ATTENTION_DEFAULT) if isinstance(attention, str) else ATTENTION_DEFAULT


def hex_to_rgb(value: Any) -> RGB:
    """Decode ``#rrggbb`` (``#`` optional, any case); malformed input gives mid-gray."""

    if not isinstance(value, str):
        return NEUTRAL_GRAY
    match = _HEX_PATTERN.fullmatch(value)
    if match is None:
        return NEUTRAL_GRAY
    channels = np.frombuffer(bytes.fromhex(match.group(1)), dtype=np.uint8) / 255.0
    return (float(channels[0]), float(channels[1]), float(channels[2]))

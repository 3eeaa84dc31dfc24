# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Reference palette table (Open Color).

Thirteen fixed hue families, each with a reference hue angle and ten
shades ordered lightest to darkest. Generated schemes use the same
layout so they can replace reference families one for one.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from huescheme.schema import HueFamily, ReferenceHueFamily


def _family(family: HueFamily, name: str, hue: float, shades: tuple[str, ...]) -> ReferenceHueFamily:
    return ReferenceHueFamily(family=family, name=name, hue=float(hue), color=shades[5], shades=shades)


_TABLE = (
    _family(HueFamily.GRAY, "Gray", 210, (
        "#f8f9fa", "#f1f3f4", "#e9ecef", "#dee2e6", "#ced4da",
        "#adb5bd", "#868e96", "#495057", "#343a40", "#212529",
    )),
    _family(HueFamily.RED, "Red", 0, (
        "#fff5f5", "#ffe3e3", "#ffc9c9", "#ffa8a8", "#ff8787",
        "#ff6b6b", "#fa5252", "#f03e3e", "#e03131", "#c92a2a",
    )),
    _family(HueFamily.PINK, "Pink", 328, (
        "#fff0f6", "#ffdeeb", "#fcc2d7", "#faa2c1", "#f783ac",
        "#f06595", "#e64980", "#d6336c", "#c2255c", "#a61e4d",
    )),
    _family(HueFamily.GRAPE, "Grape", 294, (
        "#f8f0fc", "#f3d9fa", "#eebefa", "#e599f7", "#da77f2",
        "#cc5de8", "#be4bdb", "#ae3ec9", "#9c36b5", "#862e9c",
    )),
    _family(HueFamily.VIOLET, "Violet", 260, (
        "#f3f0ff", "#e5dbff", "#d0bfff", "#b197fc", "#9775fa",
        "#845ef7", "#7950f2", "#7048e8", "#6741d9", "#5f3dc4",
    )),
    _family(HueFamily.INDIGO, "Indigo", 242, (
        "#edf2ff", "#dbe4ff", "#bac8ff", "#91a7ff", "#748ffc",
        "#5c7cfa", "#4c6ef5", "#4263eb", "#3b5bdb", "#364fc7",
    )),
    _family(HueFamily.BLUE, "Blue", 200, (
        "#e7f5ff", "#d0ebff", "#a5d8ff", "#74c0fc", "#4dabf7",
        "#339af0", "#228be6", "#1c7ed6", "#1971c2", "#1864ab",
    )),
    _family(HueFamily.CYAN, "Cyan", 187, (
        "#e3fafc", "#c5f6fa", "#99e9f2", "#66d9ef", "#3bc9db",
        "#22b8cf", "#15aabf", "#1098ad", "#0c8599", "#0b7285",
    )),
    _family(HueFamily.TEAL, "Teal", 162, (
        "#e6fcf5", "#c3fae8", "#96f2d7", "#63e6be", "#38d9a9",
        "#20c997", "#12b886", "#0ca678", "#099268", "#087f5b",
    )),
    _family(HueFamily.GREEN, "Green", 120, (
        "#ebfbee", "#d3f9d8", "#b2f2bb", "#8ce99a", "#69db7c",
        "#51cf66", "#40c057", "#37b24d", "#2f9e44", "#2b8a3e",
    )),
    _family(HueFamily.LIME, "Lime", 83, (
        "#f4fce3", "#e9fac8", "#d8f5a2", "#c0eb75", "#a9e34b",
        "#94d82d", "#82c91e", "#74b816", "#66a80f", "#5c940d",
    )),
    _family(HueFamily.YELLOW, "Yellow", 44, (
        "#fff9db", "#fff3bf", "#ffec99", "#ffe066", "#ffd43b",
        "#fcc419", "#fab005", "#f59f00", "#f08c00", "#e67700",
    )),
    _family(HueFamily.ORANGE, "Orange", 25, (
        "#fff4e6", "#ffe8cc", "#ffd8a8", "#ffc078", "#ffa94d",
        "#ff922b", "#fd7e14", "#f76707", "#e8590c", "#d9480f",
    )),
)

# Table order matches HueFamily member order
REFERENCE_FAMILIES: Mapping[HueFamily, ReferenceHueFamily] = MappingProxyType(
    {ref.family: ref for ref in _TABLE}
)

# Chromatic families in table order (classification candidates)
CHROMATIC_FAMILIES: tuple[ReferenceHueFamily, ...] = tuple(
    ref for ref in _TABLE if not ref.family.is_neutral
)

# Color-wheel order for display, gray last
SPECTRAL_ORDER: tuple[HueFamily, ...] = (
    HueFamily.RED,
    HueFamily.PINK,
    HueFamily.GRAPE,
    HueFamily.VIOLET,
    HueFamily.INDIGO,
    HueFamily.BLUE,
    HueFamily.CYAN,
    HueFamily.TEAL,
    HueFamily.GREEN,
    HueFamily.LIME,
    HueFamily.YELLOW,
    HueFamily.ORANGE,
    HueFamily.GRAY,
)

_SPECTRAL_INDEX = {family: i for i, family in enumerate(SPECTRAL_ORDER)}

# Sort position for anything not in SPECTRAL_ORDER
UNKNOWN_SPECTRAL_INDEX = 999


def spectral_index(family: HueFamily) -> int:
    """Sort position of a family in spectral order. Unknown families sort last."""
    return _SPECTRAL_INDEX.get(family, UNKNOWN_SPECTRAL_INDEX)


def get_reference(family: HueFamily) -> ReferenceHueFamily:
    """Reference entry for a family."""
    return REFERENCE_FAMILIES[family]


def reference_palette() -> dict[HueFamily, tuple[str, ...]]:
    """Fresh {family: shades} copy of the reference palette, table order."""
    return {family: ref.shades for family, ref in REFERENCE_FAMILIES.items()}

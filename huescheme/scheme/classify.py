# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Hue classification against the reference palette.

Every color maps to exactly one hue family:
1. Saturation below the chromatic threshold → gray
2. Otherwise the chromatic family with the nearest reference hue

Unparseable colors also map to gray so grouping stays a total partition.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from huescheme.schema import HueFamily, ReferenceEntry, SHADE_COUNT
from huescheme.scheme.colorspace import (
    INVALID_DISTANCE,
    InvalidColorError,
    hex_to_hsl,
    rgb_distance,
)
from huescheme.scheme.hues import hue_distance
from huescheme.scheme.reference import CHROMATIC_FAMILIES, REFERENCE_FAMILIES

logger = logging.getLogger(__name__)


# Colors with HSL saturation below this (percent) are treated as neutral
CHROMATIC_SATURATION_THRESHOLD = 15.0


def is_chromatic(saturation: float) -> bool:
    """True if an HSL saturation (percent) is high enough to carry a hue."""
    return saturation >= CHROMATIC_SATURATION_THRESHOLD


def nearest_family_for_hue(hue: float) -> HueFamily:
    """
    Chromatic family whose reference hue is circularly closest.

    Ties resolve to the first family in table order.
    """
    closest = CHROMATIC_FAMILIES[0].family
    min_distance = 180.0  # Maximum possible circular distance

    for ref in CHROMATIC_FAMILIES:
        distance = hue_distance(hue, ref.hue)
        if distance < min_distance:
            min_distance = distance
            closest = ref.family

    return closest


def classify_hue(hex_color: str) -> HueFamily:
    """
    Assign a color to its hue family.

    Args:
        hex_color: Hex string like "#339af0"

    Returns:
        HueFamily. Low-saturation and unparseable colors return GRAY.
    """
    try:
        h, s, _ = hex_to_hsl(hex_color)
    except InvalidColorError:
        logger.warning(f"Unparseable color {hex_color!r} classified as gray")
        return HueFamily.GRAY

    if not is_chromatic(s):
        return HueFamily.GRAY

    return nearest_family_for_hue(h)


def group_by_family(hex_colors: Iterable[str]) -> dict[HueFamily, list[str]]:
    """
    Partition colors into hue families.

    Every family is present in the result (empty list if no members),
    in table order. Members keep their input order, duplicates included.
    """
    grouped: dict[HueFamily, list[str]] = {family: [] for family in REFERENCE_FAMILIES}

    for hex_color in hex_colors:
        grouped[classify_hue(hex_color)].append(hex_color)

    return grouped


def nearest_reference_shade(lightness: float) -> int:
    """
    Map HSL lightness (percent) to a reference shade index.

    Lighter colors map to lower indices: L=100 → 0, L=0 → 9.
    """
    # Round half up: L=50 → 4.5 → shade 5
    shade = math.floor((1.0 - lightness / 100.0) * (SHADE_COUNT - 1) + 0.5)
    return max(0, min(SHADE_COUNT - 1, int(shade)))


def nearest_reference_entry(hex_color: str) -> ReferenceEntry:
    """
    Closest static reference-table entry for a color.

    Family comes from classify_hue, shade from lightness, and distance is
    the RGB distance to that exact reference shade. Independent of any
    generated scheme.

    Unparseable colors map to the darkest gray shade with INVALID_DISTANCE.
    """
    try:
        _, _, lightness = hex_to_hsl(hex_color)
    except InvalidColorError:
        return ReferenceEntry(
            family=HueFamily.GRAY,
            shade=SHADE_COUNT - 1,
            distance=INVALID_DISTANCE,
        )

    family = classify_hue(hex_color)
    shade = nearest_reference_shade(lightness)
    reference_color = REFERENCE_FAMILIES[family].shades[shade]

    return ReferenceEntry(
        family=family,
        shade=shade,
        distance=rgb_distance(hex_color, reference_color),
    )

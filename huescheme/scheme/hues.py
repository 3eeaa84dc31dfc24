# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Circular statistics on hue angles.

Hue is angular: 350° and 10° are 20° apart, not 340°. Every hue average,
distance and blend in the package goes through this module.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np


# Below this resultant length the mean direction is undefined
_MIN_RESULTANT = 1e-9


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    h = float(hue) % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if h >= 360.0 else h


def hue_distance(hue1: float, hue2: float) -> float:
    """
    Circular distance between two hues in degrees [0, 180].

    Inputs are expected in [0, 360).
    """
    diff = abs(hue1 - hue2)
    return min(diff, 360.0 - diff)


def circular_mean(hues: Iterable[float]) -> float:
    """
    Circular mean of hue angles in degrees.

    Each hue becomes a unit vector (cos θ, sin θ); the vectors are averaged
    and converted back with atan2. {350, 10} averages to 0, not 180.

    Returns 0.0 for an empty input or when the vectors cancel out
    (e.g. {0, 90, 180, 270}).
    """
    angles = np.radians(np.fromiter(hues, dtype=np.float64))
    if angles.size == 0:
        return 0.0

    x = float(np.mean(np.cos(angles)))
    y = float(np.mean(np.sin(angles)))

    if np.hypot(x, y) < _MIN_RESULTANT:
        return 0.0

    return normalize_hue(np.degrees(np.arctan2(y, x)))


def interpolate_hue(hue1: float, hue2: float, factor: float) -> float:
    """
    Blend two hues along the shortest arc.

    Args:
        hue1: Start hue (factor 0)
        hue2: End hue (factor 1)
        factor: Position along the arc

    Returns:
        Blended hue in [0, 360). interpolate_hue(350, 10, 0.5) == 0.
    """
    h1 = normalize_hue(hue1)
    h2 = normalize_hue(hue2)

    diff = h2 - h1
    if diff > 180.0:
        diff -= 360.0
    elif diff < -180.0:
        diff += 360.0

    return normalize_hue(h1 + diff * factor)

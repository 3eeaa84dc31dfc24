# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Shade synthesis.

Builds a 10-step palette, lightest first, from a hue family's statistics.
Lightness follows a fixed perceptual curve; chroma peaks in the midtones
and tapers toward both ends.

With three zone hues (highlight / midtone / shadow), the hue drifts across
the lightness range:

    L >= 75        midtone → highlight
    40 <= L < 75   shadow → midtone → highlight
    L < 40         shadow → midtone
"""

from __future__ import annotations

from typing import Optional

from huescheme.schema import HueFamily
from huescheme.scheme.colorspace import hsl_to_hex
from huescheme.scheme.hues import hue_distance, interpolate_hue, normalize_hue


# Lightness (percent) of each shade, lightest first. Not evenly spaced.
LIGHTNESS_CURVE: tuple[float, ...] = (96, 90, 82, 70, 56, 45, 37, 29, 22, 16)

# Gray shades: near-neutral with a slight cool tint
NEUTRAL_SHADE_HUE = 210.0
NEUTRAL_SHADE_SATURATION = 8.0

# Zone hues closer than this (degrees) are treated as one hue
MIN_ZONE_HUE_SPREAD = 5.0

# Zone boundaries on the lightness curve
_LIGHT_ZONE_START = 75.0
_DARK_ZONE_END = 40.0


def _clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def chroma_for_lightness(lightness: float, base_chroma: float) -> float:
    """
    Modulate chroma by lightness.

    Midtones keep the full base chroma; very light and very dark shades
    are desaturated.
    """
    chroma = _clamp(float(base_chroma))

    if lightness > 85:
        return chroma * 0.7
    if lightness > 75:
        return chroma * 0.85
    if lightness > 35:
        return chroma
    if lightness > 20:
        return chroma * 0.85
    return chroma * 0.7


def uses_zone_interpolation(
    multi_zone: bool,
    highlight_hue: Optional[float],
    midtone_hue: Optional[float],
    shadow_hue: Optional[float],
) -> bool:
    """
    True if three-zone hue interpolation applies.

    Requires multi-zone mode, all three zone hues, and at least one pair
    of zone hues more than MIN_ZONE_HUE_SPREAD degrees apart.
    """
    if not multi_zone:
        return False
    if highlight_hue is None or midtone_hue is None or shadow_hue is None:
        return False

    h = normalize_hue(highlight_hue)
    m = normalize_hue(midtone_hue)
    s = normalize_hue(shadow_hue)
    return (
        hue_distance(h, m) > MIN_ZONE_HUE_SPREAD
        or hue_distance(m, s) > MIN_ZONE_HUE_SPREAD
        or hue_distance(h, s) > MIN_ZONE_HUE_SPREAD
    )


def zone_hue_for_lightness(
    lightness: float,
    highlight_hue: float,
    midtone_hue: float,
    shadow_hue: float,
) -> float:
    """Hue for one shade under three-zone interpolation."""
    top = LIGHTNESS_CURVE[0]
    bottom = LIGHTNESS_CURVE[-1]

    if lightness >= _LIGHT_ZONE_START:
        factor = _clamp((lightness - _LIGHT_ZONE_START) / (top - _LIGHT_ZONE_START), 0.0, 1.0)
        return interpolate_hue(midtone_hue, highlight_hue, factor)

    if lightness >= _DARK_ZONE_END:
        factor = (lightness - _DARK_ZONE_END) / (_LIGHT_ZONE_START - _DARK_ZONE_END)
        if factor < 0.5:
            return interpolate_hue(shadow_hue, midtone_hue, factor * 2)
        return interpolate_hue(midtone_hue, highlight_hue, (factor - 0.5) * 2)

    factor = _clamp((lightness - bottom) / (_DARK_ZONE_END - bottom), 0.0, 1.0)
    return interpolate_hue(shadow_hue, midtone_hue, factor)


def synthesize_shades(
    avg_hue: float,
    avg_chroma: float,
    family: HueFamily,
    multi_zone: bool = False,
    highlight_hue: Optional[float] = None,
    midtone_hue: Optional[float] = None,
    shadow_hue: Optional[float] = None,
) -> tuple[str, ...]:
    """
    Generate 10 shades for a hue family.

    Args:
        avg_hue: Group hue (degrees)
        avg_chroma: Group chroma (HSL saturation percent)
        family: Hue family; gray ignores hue and chroma entirely
        multi_zone: Whether multi-zone mode is enabled
        highlight_hue: Highlight zone hue (multi-zone only)
        midtone_hue: Midtone zone hue (multi-zone only)
        shadow_hue: Shadow zone hue (multi-zone only)

    Returns:
        Tuple of 10 lowercase hex strings, lightest first
    """
    if family.is_neutral:
        return tuple(
            hsl_to_hex(NEUTRAL_SHADE_HUE, NEUTRAL_SHADE_SATURATION, lightness)
            for lightness in LIGHTNESS_CURVE
        )

    zoned = uses_zone_interpolation(multi_zone, highlight_hue, midtone_hue, shadow_hue)
    base_hue = normalize_hue(avg_hue)

    shades = []
    for lightness in LIGHTNESS_CURVE:
        if zoned:
            hue = zone_hue_for_lightness(lightness, highlight_hue, midtone_hue, shadow_hue)
        else:
            hue = base_hue

        chroma = chroma_for_lightness(lightness, avg_chroma)
        shades.append(hsl_to_hex(hue, _clamp(chroma), _clamp(lightness)))

    return tuple(shades)

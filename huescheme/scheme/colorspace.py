# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: hex → sRGB [0, 255] → sRGB [0, 1] → HSL

HSL conventions used throughout the package:
- H: Hue in degrees [0, 360)
- S: Saturation in percent [0, 100]
- L: Lightness in percent [0, 100]

All conversions are pure NumPy for determinism and accept arrays of
shape (..., 3).
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray


# Distance reported by color_distance when either color cannot be parsed
INVALID_DISTANCE = 999.0

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class InvalidColorError(ValueError):
    """Raised when a hex color string cannot be parsed."""


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def parse_hex(hex_color: str) -> tuple[int, int, int]:
    """
    Parse a hex color string into 8-bit RGB.

    Accepts "#rgb", "#rgba", "#rrggbb" and "#rrggbbaa", with or without
    the leading "#", in any case. Alpha is dropped.

    Raises:
        InvalidColorError: If the string is not a hex color
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(f"Expected hex string, got {type(hex_color).__name__}")

    m = _HEX_RE.match(hex_color.strip())
    if not m:
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}")

    digits = m.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format 8-bit RGB as a lowercase hex string like "#339af0"."""
    return f"#{r:02x}{g:02x}{b:02x}"


def is_valid_hex(hex_color: str) -> bool:
    """True if the string parses as a hex color."""
    try:
        parse_hex(hex_color)
    except InvalidColorError:
        return False
    return True


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def rgb_to_hsl(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to HSL.

    Args:
        rgb: Array of shape (..., 3) with sRGB values

    Returns:
        Array of shape (..., 3) with (H degrees, S percent, L percent).
        Achromatic colors get H = 0 and S = 0.
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    delta = mx - mn

    L = (mx + mn) / 2.0

    achromatic = delta == 0
    delta_safe = np.where(achromatic, 1.0, delta)

    denom = 1.0 - np.abs(2.0 * L - 1.0)
    denom_safe = np.where(denom == 0, 1.0, denom)
    S = np.where(achromatic, 0.0, delta / denom_safe)

    H = np.select(
        [achromatic, mx == r, mx == g],
        [
            0.0,
            ((g - b) / delta_safe) % 6.0,
            (b - r) / delta_safe + 2.0,
        ],
        default=(r - g) / delta_safe + 4.0,
    )
    H = (H * 60.0) % 360.0

    return np.stack([H, np.clip(S, 0.0, 1.0) * 100.0, L * 100.0], axis=-1)


def hsl_to_rgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    Args:
        hsl: Array of shape (..., 3) with (H degrees, S percent, L percent).
            S and L are clipped to [0, 100]; H wraps.

    Returns:
        Array of shape (..., 3) with sRGB values [0, 1]
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    H = hsl[..., 0] % 360.0
    S = np.clip(hsl[..., 1], 0.0, 100.0) / 100.0
    L = np.clip(hsl[..., 2], 0.0, 100.0) / 100.0

    a = S * np.minimum(L, 1.0 - L)

    # f(n) = L - a * max(-1, min(k - 3, 9 - k, 1)),  k = (n + H/30) mod 12
    channels = []
    for n in (0.0, 8.0, 4.0):
        k = (n + H / 30.0) % 12.0
        channels.append(
            L - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))
        )

    return np.clip(np.stack(channels, axis=-1), 0.0, 1.0)


def srgb_uint8_to_hsl(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB values [0,255] to HSL.

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values

    Returns:
        Array of shape (..., 3) with HSL values
    """
    srgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    return rgb_to_hsl(srgb_float)


# =============================================================================
# Convenience: hex ↔ HSL
# =============================================================================


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """
    Convert a hex color string to HSL.

    Returns:
        Tuple of (H degrees, S percent, L percent)

    Raises:
        InvalidColorError: If the string is not a hex color
    """
    pixels = np.array(parse_hex(hex_color), dtype=np.uint8)
    hsl = srgb_uint8_to_hsl(pixels)
    return float(hsl[0]), float(hsl[1]), float(hsl[2])


def hexes_to_hsl(hex_colors: list[str]) -> NDArray[np.float64]:
    """
    Vectorized hex → HSL for a list of colors.

    Raises:
        InvalidColorError: If any string is not a hex color
    """
    if not hex_colors:
        return np.empty((0, 3), dtype=np.float64)
    pixels = np.array([parse_hex(h) for h in hex_colors], dtype=np.uint8)
    return srgb_uint8_to_hsl(pixels)


def hsl_to_hex(H: float, S: float, L: float) -> str:
    """
    Convert HSL values to a hex color string.

    Args:
        H: Hue in degrees (wraps)
        S: Saturation percent (clipped to [0, 100])
        L: Lightness percent (clipped to [0, 100])

    Returns:
        Lowercase hex string like "#339af0"
    """
    hsl = np.array([H, S, L], dtype=np.float64)
    srgb = hsl_to_rgb(hsl)

    r, g, b = (srgb * 255).round().astype(int)
    return rgb_to_hex(int(r), int(g), int(b))


# =============================================================================
# RGB Distance
# =============================================================================


def rgb_distance(hex1: str, hex2: str) -> float:
    """
    Euclidean distance between two colors in 8-bit RGB space.

    Ranges from 0 (identical) to ~441.7 (black vs white).

    Raises:
        InvalidColorError: If either string is not a hex color
    """
    rgb1 = np.array(parse_hex(hex1), dtype=np.float64)
    rgb2 = np.array(parse_hex(hex2), dtype=np.float64)

    delta = rgb1 - rgb2
    return float(np.sqrt(np.sum(delta ** 2)))


def color_distance(hex1: str, hex2: str) -> float:
    """
    RGB distance that never raises.

    Returns INVALID_DISTANCE when either color cannot be parsed, so batch
    comparisons degrade gracefully instead of aborting.
    """
    try:
        return rgb_distance(hex1, hex2)
    except InvalidColorError:
        return INVALID_DISTANCE


def rgb_distance_batch(
    query: str,
    candidates: list[str],
) -> NDArray[np.float64]:
    """
    Vectorized RGB distance from one color to many.

    Unparseable query or candidates get INVALID_DISTANCE.

    Returns:
        Array of shape (N,) with distances, in candidate order
    """
    if not candidates:
        return np.empty(0, dtype=np.float64)

    try:
        q = np.array(parse_hex(query), dtype=np.float64)
    except InvalidColorError:
        return np.full(len(candidates), INVALID_DISTANCE, dtype=np.float64)

    rgb = np.zeros((len(candidates), 3), dtype=np.float64)
    valid = np.ones(len(candidates), dtype=np.bool_)
    for i, hex_color in enumerate(candidates):
        try:
            rgb[i] = parse_hex(hex_color)
        except InvalidColorError:
            valid[i] = False

    dists = np.sqrt(np.sum((rgb - q) ** 2, axis=-1))
    return np.where(valid, dists, INVALID_DISTANCE)

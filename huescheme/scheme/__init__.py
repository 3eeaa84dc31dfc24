# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Scheme derivation core for Huescheme.

Classifies extracted colors into hue families, computes per-family hue
statistics and synthesizes 10-shade schemes. All operations are pure and
deterministic.
"""

from huescheme.scheme.generate import analyze_colors, generate_complete_palette
from huescheme.scheme.matcher import (
    find_closest_color_in_family,
    find_closest_scheme_color,
    find_closest_scheme_colors,
)
from huescheme.scheme.statistics import MultiZoneConfig

__all__ = [
    "analyze_colors",
    "generate_complete_palette",
    "find_closest_scheme_color",
    "find_closest_scheme_colors",
    "find_closest_color_in_family",
    "MultiZoneConfig",
]

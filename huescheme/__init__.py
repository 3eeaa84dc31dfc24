# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Huescheme -- Design palette derivation from extracted codebase colors.

Groups the colors a codebase actually uses into 13 standard hue families
and synthesizes Open Color-compatible 10-shade schemes from them.

Quick start::

    from huescheme import analyze_colors, samples_from_dict

    colors = samples_from_dict(json.load(open("colors.json")))
    result = analyze_colors(colors)
    for scheme in result.schemes:
        print(scheme.name, scheme.shades)
"""

from __future__ import annotations

__version__ = "1.0.0"

from huescheme.scheme import (
    MultiZoneConfig,
    analyze_colors,
    find_closest_color_in_family,
    find_closest_scheme_color,
    find_closest_scheme_colors,
    generate_complete_palette,
)
from huescheme.schema import (
    ColorOccurrence,
    ColorSample,
    GeneratedScheme,
    HueFamily,
    MultiZoneHueAnalysis,
    SchemeAnalysis,
    SchemeMatch,
    SingleHueAnalysis,
    samples_from_dict,
)

__all__ = [
    # Core API
    "analyze_colors",
    "generate_complete_palette",
    "find_closest_scheme_color",
    "find_closest_scheme_colors",
    "find_closest_color_in_family",
    "MultiZoneConfig",
    # Types (commonly needed)
    "ColorSample",
    "ColorOccurrence",
    "samples_from_dict",
    "HueFamily",
    "SingleHueAnalysis",
    "MultiZoneHueAnalysis",
    "GeneratedScheme",
    "SchemeMatch",
    "SchemeAnalysis",
    # Version
    "__version__",
]

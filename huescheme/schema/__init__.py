# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Schema definitions for color scheme derivation.

All types in this module are immutable (frozen dataclasses).
Inputs are never mutated; every analysis produces fresh records.
"""

from huescheme.schema.color_scheme import (
    SHADE_COUNT,
    AnalysisMetrics,
    AnalysisMode,
    ColorAliases,
    ColorOccurrence,
    ColorSample,
    FileStats,
    GeneratedScheme,
    GroupAnalysis,
    HueFamily,
    MultiZoneHueAnalysis,
    ReferenceEntry,
    ReferenceHueFamily,
    SchemeAnalysis,
    SchemeMatch,
    SimilarColorGroup,
    SingleHueAnalysis,
    samples_from_dict,
)

__all__ = [
    "SHADE_COUNT",
    # Input types
    "ColorOccurrence",
    "ColorAliases",
    "ColorSample",
    "samples_from_dict",
    # Reference palette
    "HueFamily",
    "ReferenceHueFamily",
    "ReferenceEntry",
    # Group analysis (tagged by AnalysisMode)
    "AnalysisMode",
    "SingleHueAnalysis",
    "MultiZoneHueAnalysis",
    "GroupAnalysis",
    # Derived schemes
    "GeneratedScheme",
    "SchemeMatch",
    "SchemeAnalysis",
    # Usage statistics
    "FileStats",
    "AnalysisMetrics",
    "SimilarColorGroup",
]

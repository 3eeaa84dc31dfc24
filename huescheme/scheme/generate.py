# Copyright (c) 2026 Huescheme
# SPDX-License-Identifier: MIT

"""
Scheme generation API.

This is the primary entry point: it turns a collection of extracted colors
into per-family statistics and Open Color-compatible 10-shade schemes.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Mapping, Optional

from huescheme.schema import (
    ColorSample,
    GeneratedScheme,
    GroupAnalysis,
    HueFamily,
    MultiZoneHueAnalysis,
    ReferenceEntry,
    SchemeAnalysis,
)
from huescheme.scheme.classify import classify_hue, nearest_reference_entry
from huescheme.scheme.reference import (
    REFERENCE_FAMILIES,
    reference_palette,
    spectral_index,
)
from huescheme.scheme.shades import synthesize_shades, uses_zone_interpolation
from huescheme.scheme.statistics import MultiZoneConfig, analyze_group

logger = logging.getLogger(__name__)


def _group_samples(samples: list[ColorSample]) -> dict[HueFamily, list[ColorSample]]:
    """Partition samples by hue family. Every family present, table order."""
    grouped: dict[HueFamily, list[ColorSample]] = {family: [] for family in REFERENCE_FAMILIES}
    for sample in samples:
        grouped[classify_hue(sample.hex_value)].append(sample)
    return grouped


def _build_scheme(
    analysis: GroupAnalysis,
    chroma: float,
    multi_zone: Optional[MultiZoneConfig],
) -> GeneratedScheme:
    enabled = multi_zone is not None and multi_zone.enabled

    if isinstance(analysis, MultiZoneHueAnalysis):
        zone_hues = (analysis.highlight_hue, analysis.midtone_hue, analysis.shadow_hue)
    else:
        zone_hues = (None, None, None)

    shades = synthesize_shades(analysis.avg_hue, chroma, analysis.family, enabled, *zone_hues)

    return GeneratedScheme(
        family=analysis.family,
        name=REFERENCE_FAMILIES[analysis.family].name,
        shades=shades,
        analysis=analysis,
        multi_zone=(
            not analysis.family.is_neutral
            and uses_zone_interpolation(enabled, *zone_hues)
        ),
    )


def analyze_colors(
    colors: Mapping[str, ColorSample],
    multi_zone: Optional[MultiZoneConfig] = None,
) -> SchemeAnalysis:
    """
    Derive hue-family statistics and color schemes from extracted colors.

    Steps:
    1. Classify every sample into a hue family
    2. Analyze each non-empty family (usage = sum of occurrence counts)
    3. Sort analyses by spectral order
    4. Synthesize shades for families with usage > 0, using
       max(family chroma, mean chroma of all families) so sparse
       families still get saturated shades
    5. Map every input color to its closest reference-table entry

    Args:
        colors: Mapping of arbitrary keys to ColorSample. Not modified.
        multi_zone: Optional multi-zone settings. None disables it.

    Returns:
        SchemeAnalysis. Empty input yields empty analyses and schemes.

    Example:
        >>> from huescheme import analyze_colors, ColorSample, ColorOccurrence
        >>> sample = ColorSample("#339af0", occurrences=(ColorOccurrence("a.css"),))
        >>> result = analyze_colors({"primary": sample})
        >>> result.schemes[0].family
        <HueFamily.BLUE: 'blue'>
    """
    samples = list(colors.values())
    grouped = _group_samples(samples)

    analyses: list[GroupAnalysis] = []
    for family, members in grouped.items():
        if not members:
            continue
        analysis = analyze_group(
            [sample.hex_value for sample in members],
            family,
            multi_zone,
        )
        usage = sum(sample.occurrence_count for sample in members)
        analyses.append(replace(analysis, usage=usage))

    # Stable sort keeps table order among equal indices
    analyses.sort(key=lambda a: spectral_index(a.family))

    if analyses:
        global_chroma = sum(a.avg_chroma for a in analyses) / len(analyses)
    else:
        global_chroma = 0.0

    schemes = tuple(
        _build_scheme(a, max(a.avg_chroma, global_chroma), multi_zone)
        for a in analyses
        if a.usage > 0
    )

    reference_mapping: dict[str, ReferenceEntry] = {}
    for sample in samples:
        reference_mapping[sample.hex_value] = nearest_reference_entry(sample.hex_value)

    logger.debug(
        f"Analyzed {len(samples)} colors into {len(analyses)} hue groups, "
        f"{len(schemes)} schemes (global chroma {global_chroma:.1f})"
    )

    return SchemeAnalysis(
        total_colors=len(samples),
        analyses=tuple(analyses),
        schemes=schemes,
        reference_mapping=MappingProxyType(reference_mapping),
        multi_zone=multi_zone,
    )


def generate_complete_palette(
    colors: Mapping[str, ColorSample],
    multi_zone: Optional[MultiZoneConfig] = None,
) -> dict[HueFamily, tuple[str, ...]]:
    """
    Full 13-family palette: the reference palette with every generated
    scheme substituted for its family.

    Returns:
        {family: 10 shades}, table order
    """
    palette = reference_palette()
    for scheme in analyze_colors(colors, multi_zone).schemes:
        palette[scheme.family] = scheme.shades
    return palette
